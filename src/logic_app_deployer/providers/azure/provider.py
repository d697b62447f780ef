"""
Azure provider implementation.

This module provides SDK client initialization for the two Azure services
a workflow create touches.

SDK Clients Initialized:
    - WebSiteManagementClient ("web"): App Service Plan lookup
    - LogicManagementClient ("logic"): Logic App workflow create

Usage:
    from logic_app_deployer.providers.azure.provider import AzureProvider

    provider = AzureProvider()
    provider.initialize_clients(credentials)
    # Access clients: provider.clients["web"], provider.clients["logic"]
"""

import logging
from typing import Any, Dict, Optional

from logic_app_deployer.core.exceptions import ConfigurationError
from logic_app_deployer.providers.base import BaseProvider

logger = logging.getLogger(__name__)


class AzureProvider(BaseProvider):
    """
    Azure SDK client holder.

    Attributes:
        name: Provider identifier ("azure")
        subscription_id: Subscription all calls are issued against
        clients: Dictionary of initialized Azure SDK clients
    """

    name: str = "azure"

    def __init__(self):
        """Initialize Azure provider."""
        super().__init__()
        self._subscription_id: str = ""

    @property
    def subscription_id(self) -> str:
        """Get the Azure subscription ID."""
        return self._subscription_id

    def initialize_clients(
        self,
        credentials: Dict[str, str],
        subscription_id: Optional[str] = None
    ) -> None:
        """
        Initialize Azure SDK clients.

        Args:
            credentials: Azure credentials dictionary with:
                - azure_subscription_id: Azure subscription ID (REQUIRED
                  unless subscription_id is passed)
                - azure_tenant_id: Azure AD tenant ID (optional)
                - azure_client_id: Service principal client ID (optional)
                - azure_client_secret: Service principal secret (optional)
            subscription_id: Overrides azure_subscription_id

        Raises:
            ConfigurationError: If no subscription ID is available
        """
        subscription_id = subscription_id or credentials.get("azure_subscription_id")
        if not subscription_id:
            raise ConfigurationError(
                "Missing required credential 'azure_subscription_id'. "
                "Pass --subscription-id, set AZURE_SUBSCRIPTION_ID, "
                "or add it to the credentials file."
            )
        self._subscription_id = subscription_id

        credential = self._get_credential(credentials)
        self._initialize_sdk_clients(credential)

        self._initialized = True
        logger.debug(f"Azure clients initialized for subscription {subscription_id}")

    def _get_credential(self, credentials: Dict[str, str]) -> Any:
        """Get Azure credential for SDK clients."""
        from azure.identity import DefaultAzureCredential, ClientSecretCredential

        client_id = credentials.get("azure_client_id")
        client_secret = credentials.get("azure_client_secret")
        tenant_id = credentials.get("azure_tenant_id")

        if client_id and client_secret and tenant_id:
            logger.debug("Using service principal credentials")
            return ClientSecretCredential(
                tenant_id=tenant_id,
                client_id=client_id,
                client_secret=client_secret
            )
        else:
            logger.debug("Using DefaultAzureCredential")
            return DefaultAzureCredential()

    def _initialize_sdk_clients(self, credential: Any) -> None:
        """Initialize all required Azure SDK clients."""
        from azure.mgmt.web import WebSiteManagementClient
        from azure.mgmt.logic import LogicManagementClient

        subscription_id = self._subscription_id

        self._clients["web"] = WebSiteManagementClient(credential=credential, subscription_id=subscription_id)
        self._clients["logic"] = LogicManagementClient(credential=credential, subscription_id=subscription_id)
