"""
Logic App Deployer.

Creates Azure Logic App workflows from a definition, parameters and an
existing App Service Plan.
"""

__version__ = "0.1.0"
