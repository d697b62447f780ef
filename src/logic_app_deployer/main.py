"""
Logic App Deployer - CLI Entry Point.

Creates an Azure Logic App workflow and prints the created resource as
JSON on stdout. Log output goes to stderr.

Usage:
    logic-app-deployer -g my-rg -n my-workflow -p my-plan \\
        --definition-file-path definition.json \\
        --parameter-file-path parameters.json
"""

import argparse
import json
import sys
from typing import Optional, Sequence

from azure.core.exceptions import AzureError

from logic_app_deployer import constants as CONSTANTS
from logic_app_deployer.core.config_loader import load_config_file, load_credentials, load_debug_mode
from logic_app_deployer.core.exceptions import LogicAppError
from logic_app_deployer.core.models import NewLogicAppArgs
from logic_app_deployer.core.request_builder import validate_args
from logic_app_deployer.deployer import create_logic_app
from logic_app_deployer.logger import logger, print_stack_trace, setup_logger
from logic_app_deployer.providers.azure.provider import AzureProvider
from logic_app_deployer.providers.azure.workflows import workflow_to_dict


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="logic-app-deployer",
        description="Create an Azure Logic App workflow."
    )

    workflow = parser.add_argument_group("workflow")
    workflow.add_argument("-g", "--resource-group", dest="resource_group_name", required=True,
                          help="The targeted resource group for the workflow.")
    workflow.add_argument("-n", "--name", required=True,
                          help="The name of the workflow.")
    workflow.add_argument("-p", "--app-service-plan", required=True,
                          help="App service plan name.")
    workflow.add_argument("-l", "--location",
                          help="The location of the workflow. Defaults to the App Service Plan's region.")
    workflow.add_argument("--state",
                          help=f"The state of the workflow: {CONSTANTS.STATE_ENABLED} (default) "
                               f"or {CONSTANTS.STATE_DISABLED}.")

    definition = parser.add_argument_group(
        "definition",
        "A file path overrides an inline definition; the link is only used if neither is given."
    )
    definition.add_argument("--definition", help="The definition of the workflow as JSON text.")
    definition.add_argument("--definition-file-path", help="The physical file path of the workflow definition.")
    definition.add_argument("--definition-link-uri", help="The URI link to the workflow definition.")
    definition.add_argument("--definition-link-content-version",
                            help="The content version of the definition link.")

    parameters = parser.add_argument_group(
        "parameters",
        "A file path overrides inline parameters; the link is only used if neither is given."
    )
    parameters.add_argument("--parameters", help="The workflow parameters as JSON text.")
    parameters.add_argument("--parameter-file-path", help="The parameter file path.")
    parameters.add_argument("--parameter-link-uri", help="The parameters link URI.")
    parameters.add_argument("--parameter-link-content-version",
                            help="The parameters link URI content version.")

    azure = parser.add_argument_group("azure")
    azure.add_argument("--subscription-id", help="Azure subscription ID. Overrides the credentials file.")
    azure.add_argument("--credentials-file",
                       help=f"JSON credentials file (e.g. {CONSTANTS.CONFIG_CREDENTIALS_FILE}).")

    parser.add_argument("--dry-run", action="store_true",
                        help="Print the create request instead of submitting it.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    return parser


def to_new_logic_app_args(namespace: argparse.Namespace) -> NewLogicAppArgs:
    return NewLogicAppArgs(
        resource_group_name=namespace.resource_group_name,
        name=namespace.name,
        app_service_plan=namespace.app_service_plan,
        location=namespace.location,
        state=namespace.state,
        definition=namespace.definition,
        definition_file_path=namespace.definition_file_path,
        definition_link_uri=namespace.definition_link_uri,
        definition_link_content_version=namespace.definition_link_content_version,
        parameters=namespace.parameters,
        parameter_file_path=namespace.parameter_file_path,
        parameter_link_uri=namespace.parameter_link_uri,
        parameter_link_content_version=namespace.parameter_link_content_version,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    namespace = build_parser().parse_args(argv)
    setup_logger(debug_mode=namespace.debug)

    try:
        args = to_new_logic_app_args(namespace)
        # Input errors are reported before any credentials are needed
        validate_args(args)

        config = load_config_file(namespace.credentials_file)
        if load_debug_mode(config) and not namespace.debug:
            setup_logger(debug_mode=True)
            logger.debug("Debug mode is active.")

        credentials = load_credentials(namespace.credentials_file, config=config)

        provider = AzureProvider()
        provider.initialize_clients(credentials, subscription_id=namespace.subscription_id)

        result = create_logic_app(provider, args, dry_run=namespace.dry_run)
    except (LogicAppError, AzureError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        print_stack_trace()
        return 1

    print(json.dumps(workflow_to_dict(result), indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
