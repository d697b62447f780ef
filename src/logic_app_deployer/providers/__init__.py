"""
Provider implementations package.

Package Structure:
    providers/
    ├── __init__.py         # This file
    ├── base.py             # BaseProvider with client registry
    └── azure/
        ├── provider.py     # AzureProvider: credentials and SDK clients
        ├── service_plans.py  # App Service Plan lookup
        └── workflows.py    # Logic App workflow create
"""
