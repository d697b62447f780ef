"""
Unit tests for the App Service Plan lookup.
"""

import pytest
from azure.core.exceptions import ClientAuthenticationError, HttpResponseError

from logic_app_deployer.core.exceptions import ServicePlanNotFoundError
from logic_app_deployer.providers.azure.service_plans import (
    get_service_plan,
    to_service_plan_reference,
)


class TestGetServicePlan:
    """Tests for get_service_plan."""

    def test_requires_provider(self):
        with pytest.raises(ValueError, match="provider is required"):
            get_service_plan(None, "rg1", "plan1")

    def test_success(self, mock_provider, mock_plan):
        reference = get_service_plan(mock_provider, "rg1", "plan1")

        assert reference.id == mock_plan.id
        assert reference.region == "westus"
        assert reference.tier == "Standard"
        mock_provider.clients["web"].app_service_plans.get.assert_called_once_with(
            resource_group_name="rg1",
            name="plan1"
        )

    def test_not_found(self, mock_provider):
        mock_provider.clients["web"].app_service_plans.get.return_value = None

        with pytest.raises(ServicePlanNotFoundError) as exc_info:
            get_service_plan(mock_provider, "rg1", "plan1")

        assert exc_info.value.plan_name == "plan1"
        assert exc_info.value.resource_group == "rg1"

    def test_reraises_client_authentication_error(self, mock_provider):
        error = ClientAuthenticationError("Permission denied")
        mock_provider.clients["web"].app_service_plans.get.side_effect = error

        with pytest.raises(ClientAuthenticationError) as exc_info:
            get_service_plan(mock_provider, "rg1", "plan1")
        assert exc_info.value is error

    def test_reraises_http_response_error(self, mock_provider):
        error = HttpResponseError("Server error")
        mock_provider.clients["web"].app_service_plans.get.side_effect = error

        with pytest.raises(HttpResponseError) as exc_info:
            get_service_plan(mock_provider, "rg1", "plan1")
        assert exc_info.value is error


class TestToServicePlanReference:
    """Tests for to_service_plan_reference."""

    def test_falls_back_to_location(self, mock_plan):
        mock_plan.geo_region = None
        assert to_service_plan_reference(mock_plan).region == "West US"

    def test_missing_sku(self, mock_plan):
        mock_plan.sku = None
        assert to_service_plan_reference(mock_plan).tier is None
