"""
Shared base class for provider implementations.

Contents:
    - BaseProvider: client registry with an initialization guard
"""

import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)


class BaseProvider:
    """
    Base class for cloud provider implementations.

    Subclasses fill self._clients in initialize_clients() and set
    self._initialized once every client exists.
    """

    name: str = ""

    def __init__(self):
        """Initialize base provider state."""
        self._clients: Dict[str, Any] = {}
        self._initialized: bool = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def clients(self) -> Dict[str, Any]:
        """Return initialized SDK clients."""
        if not self._initialized:
            raise RuntimeError(
                "Provider not initialized. Call initialize_clients() first."
            )
        return self._clients

    def _log_resource_creation(self, resource_type: str, resource_name: str) -> None:
        """
        Log a resource creation event.

        Args:
            resource_type: Type of resource (e.g., "Logic App Workflow")
            resource_name: Name of the resource being created
        """
        logger.info(f"Creating {resource_type}: {resource_name}")

    def _log_resource_lookup(self, resource_type: str, resource_name: str) -> None:
        """
        Log a resource lookup.

        Args:
            resource_type: Type of resource (e.g., "App Service Plan")
            resource_name: Name of the resource being looked up
        """
        logger.info(f"Looking up {resource_type}: {resource_name}")
