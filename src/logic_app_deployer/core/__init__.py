"""
Core request model and input handling for the Logic App deployer.

Modules:
    models: Enumerations, ContentLink, ServicePlanReference, request types
    documents: Definition/parameters sources and JSON loading
    request_builder: Input validation and request assembly
    config_loader: Credential loading
    exceptions: Custom exception types

Usage:
    from logic_app_deployer.core import NewLogicAppArgs, validate_args
"""

from .exceptions import (
    LogicAppError,
    ValidationError,
    ConfigurationError,
    DocumentReadError,
    DocumentParseError,
    SkuMappingError,
    RemoteError,
    ServicePlanNotFoundError,
)
from .models import (
    ContentLink,
    NewLogicAppArgs,
    ServicePlanReference,
    SkuName,
    WorkflowCreateRequest,
    WorkflowState,
)
from .request_builder import build_create_request, validate_args

__all__ = [
    # Models
    "ContentLink",
    "NewLogicAppArgs",
    "ServicePlanReference",
    "SkuName",
    "WorkflowCreateRequest",
    "WorkflowState",
    # Builder
    "build_create_request",
    "validate_args",
    # Exceptions
    "LogicAppError",
    "ValidationError",
    "ConfigurationError",
    "DocumentReadError",
    "DocumentParseError",
    "SkuMappingError",
    "RemoteError",
    "ServicePlanNotFoundError",
]
