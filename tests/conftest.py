import json

import pytest
from unittest.mock import MagicMock

from logic_app_deployer.core.models import NewLogicAppArgs

PLAN_ID = "/subscriptions/test-subscription-123/resourceGroups/rg1/providers/Microsoft.Web/serverfarms/plan1"


@pytest.fixture(scope="function", autouse=True)
def clear_azure_env_vars(monkeypatch):
    """Remove Azure credentials from the environment to prevent accidental cloud calls."""
    for name in ("AZURE_SUBSCRIPTION_ID", "AZURE_TENANT_ID", "AZURE_CLIENT_ID", "AZURE_CLIENT_SECRET"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_plan():
    """SDK-shaped AppServicePlan in westus on the Standard tier."""
    plan = MagicMock()
    plan.id = PLAN_ID
    plan.name = "plan1"
    plan.geo_region = "westus"
    plan.location = "West US"
    plan.sku.tier = "Standard"
    return plan


@pytest.fixture
def mock_provider(mock_plan):
    """Create a mock AzureProvider whose plan lookup returns mock_plan.

    The logic client's pipeline echoes the PUT body back with the workflow
    name taken from the request URL.
    """
    provider = MagicMock()
    provider.subscription_id = "test-subscription-123"
    provider.clients = {
        "web": MagicMock(),
        "logic": MagicMock(),
    }
    provider.clients["web"].app_service_plans.get.return_value = mock_plan

    pipeline_client = provider.clients["logic"]._client
    pipeline_client.format_url.side_effect = lambda path: "https://management.azure.com" + path

    def _echo(request):
        response = MagicMock()
        response.status_code = 200
        name = request.url.split("?")[0].rsplit("/", 1)[-1]
        response.json.return_value = dict(json.loads(request.content), name=name)
        return response

    pipeline_client.send_request.side_effect = _echo
    return provider


@pytest.fixture
def base_args():
    """Minimal valid input: rg1 / wf1 / plan1, nothing else."""
    return NewLogicAppArgs(
        resource_group_name="rg1",
        name="wf1",
        app_service_plan="plan1",
    )


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON (or raw text) file under tmp_path and return its path as str."""

    def _write(name, content, raw=False, encoding="utf-8"):
        path = tmp_path / name
        text = content if raw else json.dumps(content)
        path.write_text(text, encoding=encoding)
        return str(path)

    return _write
