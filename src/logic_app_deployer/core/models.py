"""
Data model for a Logic App workflow create request.

Contents:
    - WorkflowState / SkuName: closed enumerations with validated parsing
    - ContentLink: URI + content version of an externally hosted document
    - ServicePlanReference: the App Service Plan facts a workflow needs
    - NewLogicAppArgs: raw invocation fields, one per command-line flag
    - WorkflowCreateRequest: the assembled payload sent to Azure

All objects are built fresh per invocation and are not shared.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from logic_app_deployer import constants as CONSTANTS
from .exceptions import SkuMappingError, ValidationError


class WorkflowState(str, Enum):
    """State a workflow is created in."""

    ENABLED = CONSTANTS.STATE_ENABLED
    DISABLED = CONSTANTS.STATE_DISABLED

    @classmethod
    def allowed(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def parse(cls, value: Optional[str]) -> "WorkflowState":
        """
        Parse a state string. Matching is case-sensitive.

        Args:
            value: State string; None selects the default ("Enabled")

        Returns:
            The matching WorkflowState

        Raises:
            ValidationError: If value is not exactly one of the allowed names
        """
        if value is None:
            return cls(CONSTANTS.DEFAULT_STATE)
        for member in cls:
            if member.value == value:
                return member
        raise ValidationError(
            f"Invalid workflow state '{value}'. Allowed: {cls.allowed()}",
            field="state"
        )


class SkuName(str, Enum):
    """Logic App SKU names an App Service Plan tier can map onto."""

    NOT_SPECIFIED = CONSTANTS.SKU_NOT_SPECIFIED
    FREE = CONSTANTS.SKU_FREE
    SHARED = CONSTANTS.SKU_SHARED
    BASIC = CONSTANTS.SKU_BASIC
    STANDARD = CONSTANTS.SKU_STANDARD
    PREMIUM = CONSTANTS.SKU_PREMIUM

    @classmethod
    def allowed(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def parse(cls, tier: Optional[str]) -> "SkuName":
        """
        Map an App Service Plan tier string onto a SKU name, verbatim.

        Raises:
            SkuMappingError: If the tier is missing or not a known SKU name
        """
        for member in cls:
            if member.value == tier:
                return member
        raise SkuMappingError(tier, cls.allowed())


@dataclass(frozen=True)
class ContentLink:
    """Reference to an externally hosted JSON document."""

    uri: str
    content_version: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"uri": self.uri, "contentVersion": self.content_version}


@dataclass(frozen=True)
class ServicePlanReference:
    """
    App Service Plan facts used to build the request.

    Attributes:
        id: Full ARM resource id of the plan
        region: Geographic region, used as the default workflow location
        tier: Pricing tier string as reported by Azure (e.g. "Standard")
    """

    id: str
    region: Optional[str]
    tier: Optional[str]


@dataclass
class NewLogicAppArgs:
    """
    Raw input for creating a workflow.

    Definition and parameters each accept three alternative sources. When
    more than one is given, a file path overrides an inline value and a
    link is only used if neither of the other two is present.
    """

    resource_group_name: Optional[str]
    name: Optional[str]
    app_service_plan: Optional[str]
    location: Optional[str] = None
    state: Optional[str] = None

    definition: Any = None
    definition_file_path: Optional[str] = None
    definition_link_uri: Optional[str] = None
    definition_link_content_version: Optional[str] = None

    parameters: Any = None
    parameter_file_path: Optional[str] = None
    parameter_link_uri: Optional[str] = None
    parameter_link_content_version: Optional[str] = None


@dataclass
class WorkflowCreateRequest:
    """
    Payload for the Logic Apps workflow PUT.

    At most one of (definition, definition_link) and at most one of
    (parameters, parameters_link) may be set. Neither set is valid.
    """

    location: str
    state: WorkflowState
    sku_name: SkuName
    plan_id: str
    definition: Any = None
    definition_link: Optional[ContentLink] = None
    parameters: Optional[Dict[str, Dict[str, Any]]] = None
    parameters_link: Optional[ContentLink] = None

    def __post_init__(self):
        if self.definition is not None and self.definition_link is not None:
            raise ValidationError(
                "A workflow cannot have both an inline definition and a definition link",
                field="definition"
            )
        if self.parameters is not None and self.parameters_link is not None:
            raise ValidationError(
                "A workflow cannot have both inline parameters and a parameters link",
                field="parameters"
            )

    def to_workflow_body(self) -> Dict[str, Any]:
        """Build the workflow resource body in the Logic Apps REST layout."""
        return {
            "location": self.location,
            "sku": {
                "name": self.sku_name.value,
                "plan": {"id": self.plan_id},
            },
            "properties": {
                "state": self.state.value,
                "definition": self.definition,
                "parameters": self.parameters,
                "definitionLink": self.definition_link.to_dict() if self.definition_link else None,
                "parametersLink": self.parameters_link.to_dict() if self.parameters_link else None,
            },
        }
