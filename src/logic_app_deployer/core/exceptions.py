"""
Custom exceptions for the Logic App deployer.

This module defines the hierarchy of exceptions raised while turning
command-line input into a workflow create request.

Exception Hierarchy:
    LogicAppError (base)
    ├── ValidationError - Missing or invalid input value
    ├── ConfigurationError - Invalid or missing credentials/config file
    ├── DocumentReadError - Definition/parameters file could not be read
    ├── DocumentParseError - Definition/parameters content is not valid JSON
    ├── SkuMappingError - App Service Plan tier has no Logic App SKU
    └── RemoteError - Lookup or create call against Azure failed
        └── ServicePlanNotFoundError - App Service Plan lookup returned nothing

Errors raised by the Azure SDK itself (azure.core.exceptions.AzureError and
subclasses) are not wrapped. They propagate to the caller unchanged.
"""

from typing import Optional


class LogicAppError(Exception):
    """
    Base exception for all Logic App deployer errors.

    Attributes:
        message: Human-readable error description
        context: Optional context string appended to the message
    """

    def __init__(self, message: str, context: Optional[str] = None):
        self.message = message
        self.context = context

        if context:
            full_message = f"{message} [{context}]"
        else:
            full_message = message

        super().__init__(full_message)


class ValidationError(LogicAppError):
    """
    Raised when an input value is missing or not allowed.

    This typically occurs when:
    - A required field (resource group, name, app service plan) is empty
    - An optional field was supplied as an empty string
    - The workflow state is not exactly "Enabled" or "Disabled"

    Example:
        >>> WorkflowState.parse("enabled")
        ValidationError: Invalid workflow state 'enabled'. Allowed: ['Enabled', 'Disabled'] [field=state]
    """

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message, context=f"field={field}" if field else None)


class ConfigurationError(LogicAppError):
    """
    Raised when credentials or configuration are invalid or missing.

    Example:
        >>> load_credentials("nonexistent.json")
        ConfigurationError: Credentials file not found (file: nonexistent.json)
    """

    def __init__(self, message: str, config_file: Optional[str] = None):
        self.config_file = config_file
        if config_file:
            message = f"{message} (file: {config_file})"
        super().__init__(message)


class DocumentReadError(LogicAppError):
    """
    Raised when a definition or parameters file cannot be read.

    Attributes:
        path: The resolved file path
        original_error: The underlying OSError
    """

    def __init__(self, path: str, original_error: Optional[Exception] = None):
        self.path = path
        self.original_error = original_error

        message = f"Cannot read file '{path}'"
        if original_error:
            message += f": {original_error}"
        super().__init__(message)


class DocumentParseError(LogicAppError):
    """
    Raised when a definition or parameters document is not valid JSON,
    or a parameters document is not a JSON object.

    Attributes:
        source: Description of where the document came from
        original_error: The underlying JSONDecodeError or UnicodeDecodeError, if any
    """

    def __init__(
        self,
        source: str,
        original_error: Optional[Exception] = None,
        reason: Optional[str] = None
    ):
        self.source = source
        self.original_error = original_error

        message = f"Cannot parse {source}"
        if reason:
            message += f": {reason}"
        elif original_error:
            message += f": {original_error}"
        super().__init__(message)


class SkuMappingError(LogicAppError):
    """
    Raised when the App Service Plan's pricing tier has no matching
    Logic App SKU name.

    Example:
        >>> SkuName.parse("PremiumV2")
        SkuMappingError: App Service Plan tier 'PremiumV2' does not map to a Logic App SKU. Allowed: [...]
    """

    def __init__(self, tier: Optional[str], allowed: list[str]):
        self.tier = tier
        self.allowed = allowed
        message = (
            f"App Service Plan tier '{tier}' does not map to a Logic App SKU. "
            f"Allowed: {allowed}"
        )
        super().__init__(message)


class RemoteError(LogicAppError):
    """
    Raised when a call against Azure did not yield a usable result
    without the SDK raising an error of its own.
    """


class ServicePlanNotFoundError(RemoteError):
    """
    Raised when the App Service Plan lookup returns no plan.

    Attributes:
        resource_group: Resource group that was searched
        plan_name: App Service Plan name that was requested
    """

    def __init__(self, resource_group: str, plan_name: str):
        self.resource_group = resource_group
        self.plan_name = plan_name
        super().__init__(
            f"App Service Plan '{plan_name}' not found",
            context=f"resource_group={resource_group}"
        )
