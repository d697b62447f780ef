"""
Unit tests for the create pipeline.

Covers the full path from raw input to the create call, and that every
failure before the create call leaves Azure untouched.
"""

import dataclasses
import json

import pytest
from azure.core.exceptions import HttpResponseError

from logic_app_deployer.core.exceptions import (
    DocumentParseError,
    DocumentReadError,
    ServicePlanNotFoundError,
    SkuMappingError,
    ValidationError,
)
from logic_app_deployer.deployer import create_logic_app


DEFINITION = {"triggers": {"manual": {"type": "Request", "kind": "Http"}}, "actions": {}}


def _send_request(mock_provider):
    return mock_provider.clients["logic"]._client.send_request


def _submitted_body(mock_provider):
    return json.loads(_send_request(mock_provider).call_args.args[0].content)


class TestCreateLogicApp:
    """Happy-path tests for create_logic_app."""

    def test_minimal_input(self, mock_provider, mock_plan, base_args):
        """rg1/wf1/plan1 with no definition or parameters."""
        result = create_logic_app(mock_provider, base_args)

        mock_provider.clients["web"].app_service_plans.get.assert_called_once_with(
            resource_group_name="rg1",
            name="plan1"
        )
        _send_request(mock_provider).assert_called_once()
        sent = _send_request(mock_provider).call_args.args[0]
        assert sent.method == "PUT"
        assert "/resourceGroups/rg1/providers/Microsoft.Logic/workflows/wf1?" in sent.url
        assert _submitted_body(mock_provider) == {
            "location": "westus",
            "sku": {"name": "Standard", "plan": {"id": mock_plan.id}},
            "properties": {
                "state": "Enabled",
                "definition": None,
                "parameters": None,
                "definitionLink": None,
                "parametersLink": None,
            },
        }
        assert result["name"] == "wf1"

    def test_definition_and_parameters_from_files(self, mock_provider, base_args, write_json):
        args = dataclasses.replace(
            base_args,
            state="Disabled",
            location="northeurope",
            definition='{"actions": {"ignored": {}}}',
            definition_file_path=write_json("definition.json", DEFINITION),
            parameter_file_path=write_json("parameters.json", {"retries": 3}),
        )

        create_logic_app(mock_provider, args)

        body = _submitted_body(mock_provider)
        properties = body["properties"]
        assert properties["definition"] == DEFINITION
        assert properties["definitionLink"] is None
        assert properties["parameters"] == {"retries": {"value": 3}}
        assert properties["parametersLink"] is None
        assert properties["state"] == "Disabled"
        assert body["location"] == "northeurope"

    def test_links(self, mock_provider, base_args):
        args = dataclasses.replace(
            base_args,
            definition_link_uri="https://storage/def.json",
            definition_link_content_version="1.0.0.0",
            parameter_link_uri="https://storage/params.json",
        )

        create_logic_app(mock_provider, args)

        properties = _submitted_body(mock_provider)["properties"]
        assert properties["definition"] is None
        assert properties["definitionLink"] == {"uri": "https://storage/def.json", "contentVersion": "1.0.0.0"}
        assert properties["parameters"] is None
        assert properties["parametersLink"] == {"uri": "https://storage/params.json", "contentVersion": None}

    def test_dry_run(self, mock_provider, base_args):
        args = dataclasses.replace(base_args, definition=DEFINITION)

        body = create_logic_app(mock_provider, args, dry_run=True)

        assert body["properties"]["definition"] == DEFINITION
        assert body["location"] == "westus"
        _send_request(mock_provider).assert_not_called()


class TestCreateLogicAppFailures:
    """Failures stop the pipeline before anything is created."""

    def test_missing_name(self, mock_provider, base_args):
        args = dataclasses.replace(base_args, name="")

        with pytest.raises(ValidationError):
            create_logic_app(mock_provider, args)

        mock_provider.clients["web"].app_service_plans.get.assert_not_called()
        _send_request(mock_provider).assert_not_called()

    def test_wrong_case_state(self, mock_provider, base_args):
        args = dataclasses.replace(base_args, state="enabled")

        with pytest.raises(ValidationError):
            create_logic_app(mock_provider, args)

        mock_provider.clients["web"].app_service_plans.get.assert_not_called()

    def test_unreadable_definition_file(self, mock_provider, base_args, tmp_path):
        args = dataclasses.replace(base_args, definition_file_path=str(tmp_path / "missing.json"))

        with pytest.raises(DocumentReadError):
            create_logic_app(mock_provider, args)

        mock_provider.clients["web"].app_service_plans.get.assert_not_called()
        _send_request(mock_provider).assert_not_called()

    def test_unparsable_parameters(self, mock_provider, base_args):
        args = dataclasses.replace(base_args, parameters="{oops")

        with pytest.raises(DocumentParseError):
            create_logic_app(mock_provider, args)

        _send_request(mock_provider).assert_not_called()

    def test_unknown_tier(self, mock_provider, mock_plan, base_args):
        mock_plan.sku.tier = "Dynamic"

        with pytest.raises(SkuMappingError):
            create_logic_app(mock_provider, base_args)

        mock_provider.clients["web"].app_service_plans.get.assert_called_once()
        _send_request(mock_provider).assert_not_called()

    def test_plan_not_found(self, mock_provider, base_args):
        mock_provider.clients["web"].app_service_plans.get.return_value = None

        with pytest.raises(ServicePlanNotFoundError):
            create_logic_app(mock_provider, base_args)

        _send_request(mock_provider).assert_not_called()

    def test_create_error_propagates_unchanged(self, mock_provider, base_args):
        error = HttpResponseError("WorkflowDefinitionInvalid")
        _send_request(mock_provider).side_effect = error

        with pytest.raises(HttpResponseError) as exc_info:
            create_logic_app(mock_provider, base_args)

        assert exc_info.value is error
        _send_request(mock_provider).assert_called_once()
