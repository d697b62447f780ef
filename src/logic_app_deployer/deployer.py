"""
Logic App create orchestration.

Runs the create pipeline in a fixed order. Every step either succeeds or
raises, and nothing is created unless all steps before the create call
succeeded:

    validate input → resolve definition → resolve parameters
      → look up App Service Plan → build request → create workflow
"""

import logging
from typing import TYPE_CHECKING, Any

from logic_app_deployer.core.documents import resolve_definition, resolve_parameters
from logic_app_deployer.core.models import NewLogicAppArgs
from logic_app_deployer.core.request_builder import build_create_request, validate_args
from logic_app_deployer.providers.azure.service_plans import get_service_plan
from logic_app_deployer.providers.azure.workflows import create_workflow

if TYPE_CHECKING:
    from logic_app_deployer.providers.azure.provider import AzureProvider

logger = logging.getLogger(__name__)


def create_logic_app(
    provider: 'AzureProvider',
    args: NewLogicAppArgs,
    dry_run: bool = False
) -> Any:
    """
    Create a Logic App workflow from raw input.

    Args:
        provider: Initialized AzureProvider
        args: Raw invocation fields
        dry_run: Build the request but do not submit it

    Returns:
        The created workflow resource, or the request body in dry-run mode

    Raises:
        ValidationError: Invalid or missing input
        DocumentReadError: Definition/parameters file unreadable
        DocumentParseError: Definition/parameters not valid JSON
        ServicePlanNotFoundError: App Service Plan lookup returned nothing
        SkuMappingError: App Service Plan tier has no Logic App SKU
        azure.core.exceptions.AzureError: Lookup or create failed
    """
    state = validate_args(args)

    definition, definition_link = resolve_definition(args)
    parameters, parameters_link = resolve_parameters(args)

    plan = get_service_plan(provider, args.resource_group_name, args.app_service_plan)

    request = build_create_request(
        args,
        plan,
        state,
        definition=definition,
        definition_link=definition_link,
        parameters=parameters,
        parameters_link=parameters_link,
    )

    if dry_run:
        logger.info(f"[DRY RUN] Would create Logic App Workflow: {args.name}")
        return request.to_workflow_body()

    return create_workflow(provider, args.resource_group_name, args.name, request)
