"""
App Service Plan lookup.

A new workflow takes its default location and its SKU from an existing
App Service Plan. This module reads that plan through
WebSiteManagementClient and reduces it to a ServicePlanReference.
"""

import logging
from typing import TYPE_CHECKING, Any

from azure.core.exceptions import (
    ClientAuthenticationError,
    HttpResponseError,
)

from logic_app_deployer.core.exceptions import ServicePlanNotFoundError
from logic_app_deployer.core.models import ServicePlanReference

if TYPE_CHECKING:
    from logic_app_deployer.providers.azure.provider import AzureProvider

logger = logging.getLogger(__name__)


def to_service_plan_reference(plan: Any) -> ServicePlanReference:
    """
    Reduce an SDK AppServicePlan to the fields a workflow needs.

    Region is the plan's geo_region, or its location if Azure did not
    report one.
    """
    sku = getattr(plan, "sku", None)
    return ServicePlanReference(
        id=plan.id,
        region=getattr(plan, "geo_region", None) or getattr(plan, "location", None),
        tier=getattr(sku, "tier", None) if sku is not None else None,
    )


def get_service_plan(
    provider: 'AzureProvider',
    resource_group_name: str,
    plan_name: str
) -> ServicePlanReference:
    """
    Look up an App Service Plan by name.

    Args:
        provider: Initialized AzureProvider with a "web" client
        resource_group_name: Resource group containing the plan
        plan_name: App Service Plan name

    Returns:
        ServicePlanReference with id, region and tier

    Raises:
        ValueError: If provider is None
        ServicePlanNotFoundError: If the lookup returns no plan
        ClientAuthenticationError: If permission denied
        HttpResponseError: If the lookup fails
    """
    if provider is None:
        raise ValueError("provider is required")

    provider._log_resource_lookup("App Service Plan", plan_name)

    try:
        plan = provider.clients["web"].app_service_plans.get(
            resource_group_name=resource_group_name,
            name=plan_name
        )
    except ClientAuthenticationError as e:
        logger.error(f"PERMISSION DENIED reading App Service Plan: {e.message}")
        raise
    except HttpResponseError as e:
        logger.error(f"Failed to read App Service Plan: {e.status_code} - {e.message}")
        raise

    # The SDK maps a 404 on this operation to None instead of raising
    if plan is None:
        raise ServicePlanNotFoundError(resource_group_name, plan_name)

    reference = to_service_plan_reference(plan)
    logger.info(f"✓ App Service Plan found: {plan_name} (region={reference.region}, tier={reference.tier})")
    return reference
