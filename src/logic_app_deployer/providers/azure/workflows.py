"""
Logic App workflow create.

Submits an assembled WorkflowCreateRequest as a PUT on the workflow
resource, sent through the LogicManagementClient's own pipeline so that
authentication, retries and ARM error handling stay the SDK's. The body
uses the REST layout of the WORKFLOW_API_VERSION Workflow resource, which
carries sku, definitionLink and parametersLink.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict
from urllib.parse import quote

from azure.core.exceptions import (
    ClientAuthenticationError,
    HttpResponseError,
    ResourceExistsError,
    ResourceNotFoundError,
    map_error,
)
from azure.core.rest import HttpRequest
from azure.mgmt.core.exceptions import ARMErrorFormat

from logic_app_deployer import constants as CONSTANTS
from logic_app_deployer.core.models import WorkflowCreateRequest

if TYPE_CHECKING:
    from logic_app_deployer.providers.azure.provider import AzureProvider

logger = logging.getLogger(__name__)

ERROR_MAP = {
    401: ClientAuthenticationError,
    404: ResourceNotFoundError,
    409: ResourceExistsError,
}


def build_workflow_path(subscription_id: str, resource_group_name: str, workflow_name: str) -> str:
    """Build the ARM resource path of a workflow, URL-quoting every segment."""
    return CONSTANTS.WORKFLOW_PATH_TEMPLATE.format(
        subscription_id=quote(subscription_id, safe=""),
        resource_group_name=quote(resource_group_name, safe=""),
        workflow_name=quote(workflow_name, safe=""),
    )


def create_workflow(
    provider: 'AzureProvider',
    resource_group_name: str,
    workflow_name: str,
    request: WorkflowCreateRequest
) -> Dict[str, Any]:
    """
    Create (or replace) a Logic App workflow.

    Args:
        provider: Initialized AzureProvider with a "logic" client
        resource_group_name: Target resource group
        workflow_name: Name of the workflow
        request: Assembled create request

    Returns:
        The workflow resource returned by Azure, as a dict

    Raises:
        ValueError: If provider or request is None
        ClientAuthenticationError: If permission denied
        HttpResponseError: If creation fails
    """
    if provider is None:
        raise ValueError("provider is required")
    if request is None:
        raise ValueError("request is required")

    provider._log_resource_creation("Logic App Workflow", workflow_name)

    pipeline_client = provider.clients["logic"]._client
    path = build_workflow_path(provider.subscription_id, resource_group_name, workflow_name)
    http_request = HttpRequest(
        "PUT",
        pipeline_client.format_url(path),
        params={"api-version": CONSTANTS.WORKFLOW_API_VERSION},
        json=request.to_workflow_body(),
    )

    try:
        response = pipeline_client.send_request(http_request)
        if response.status_code not in (200, 201):
            map_error(status_code=response.status_code, response=response, error_map=ERROR_MAP)
            raise HttpResponseError(response=response, error_format=ARMErrorFormat)
    except ClientAuthenticationError as e:
        logger.error(f"PERMISSION DENIED creating Logic App Workflow: {e.message}")
        raise
    except HttpResponseError as e:
        logger.error(f"Failed to create Logic App Workflow: {e.status_code} - {e.message}")
        raise

    logger.info(f"✓ Logic App Workflow created: {workflow_name}")
    return response.json()


def workflow_to_dict(workflow: Any) -> Any:
    """Convert an SDK model to a plain dict for output; dicts pass through."""
    if hasattr(workflow, "as_dict"):
        return workflow.as_dict()
    return workflow
