"""
Validation and assembly of the workflow create request.

The builder has no side effects: file reads happen in core.documents and
the App Service Plan lookup happens in providers.azure.service_plans. It
only checks the raw input and combines the resolved pieces.
"""

import logging
from typing import Any, Dict, Optional

from .exceptions import ValidationError
from .models import (
    ContentLink,
    NewLogicAppArgs,
    ServicePlanReference,
    SkuName,
    WorkflowCreateRequest,
    WorkflowState,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("resource_group_name", "name", "app_service_plan")

# Optional string inputs that must not be empty when supplied
NON_EMPTY_IF_GIVEN_FIELDS = (
    "location",
    "definition_file_path",
    "definition_link_uri",
    "definition_link_content_version",
    "parameter_file_path",
    "parameter_link_uri",
    "parameter_link_content_version",
)


def _is_blank(value: Any) -> bool:
    return isinstance(value, str) and not value.strip()


def validate_args(args: NewLogicAppArgs) -> WorkflowState:
    """
    Check raw input before anything touches the filesystem or Azure.

    Args:
        args: Raw invocation fields

    Returns:
        The parsed workflow state

    Raises:
        ValidationError: On a missing required field, an empty optional
            field, or an unsupported state
    """
    for field_name in REQUIRED_FIELDS:
        value = getattr(args, field_name)
        if value is None or _is_blank(value):
            raise ValidationError(f"'{field_name}' is required", field=field_name)

    for field_name in NON_EMPTY_IF_GIVEN_FIELDS:
        if _is_blank(getattr(args, field_name)):
            raise ValidationError(f"'{field_name}' must not be empty", field=field_name)

    for field_name in ("definition", "parameters"):
        if _is_blank(getattr(args, field_name)):
            raise ValidationError(f"'{field_name}' must not be empty", field=field_name)

    return WorkflowState.parse(args.state)


def build_create_request(
    args: NewLogicAppArgs,
    plan: ServicePlanReference,
    state: WorkflowState,
    definition: Any = None,
    definition_link: Optional[ContentLink] = None,
    parameters: Optional[Dict[str, Dict[str, Any]]] = None,
    parameters_link: Optional[ContentLink] = None
) -> WorkflowCreateRequest:
    """
    Assemble the create request from validated input and the plan lookup.

    Location falls back to the plan's region. The SKU name is the plan's
    tier, mapped verbatim.

    Raises:
        SkuMappingError: If the plan's tier is not a known SKU name
        ValidationError: If no location was given and the plan reports none
    """
    sku_name = SkuName.parse(plan.tier)

    location = args.location
    if location is None:
        location = plan.region
        logger.debug(f"No location given, using App Service Plan region '{location}'")
    if not location:
        raise ValidationError(
            "No location given and the App Service Plan reports no region",
            field="location"
        )

    return WorkflowCreateRequest(
        location=location,
        state=state,
        sku_name=sku_name,
        plan_id=plan.id,
        definition=definition,
        definition_link=definition_link,
        parameters=parameters,
        parameters_link=parameters_link,
    )
