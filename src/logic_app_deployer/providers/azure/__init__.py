"""
Azure Provider package.
"""

from .provider import AzureProvider

__all__ = ["AzureProvider"]
