# ==========================================
# 1. Workflow State
# ==========================================
STATE_ENABLED = "Enabled"
STATE_DISABLED = "Disabled"
DEFAULT_STATE = STATE_ENABLED

# ==========================================
# 2. Logic App SKU Names
# ==========================================
# Tier strings reported by App Service Plans that map onto a Logic App SKU.
SKU_NOT_SPECIFIED = "NotSpecified"
SKU_FREE = "Free"
SKU_SHARED = "Shared"
SKU_BASIC = "Basic"
SKU_STANDARD = "Standard"
SKU_PREMIUM = "Premium"

# ==========================================
# 3. Workflow Parameter Shape
# ==========================================
WORKFLOW_PARAMETER_KEYS = ("type", "value", "metadata", "description")

# ARM parameter files wrap the actual values in a "parameters" object
ARM_PARAMETERS_KEY = "parameters"
ARM_MARKER_KEYS = ("$schema", "contentVersion")

# ==========================================
# 4. Configuration & Credentials
# ==========================================
CONFIG_CREDENTIALS_FILE = "config_credentials.json"
CREDENTIALS_PROVIDER_KEY = "azure"
CONFIG_MODE_KEY = "mode"
DEBUG_MODE = "DEBUG"

# Credential key -> environment variable fallback
CREDENTIAL_ENV_VARS = {
    "azure_subscription_id": "AZURE_SUBSCRIPTION_ID",
    "azure_tenant_id": "AZURE_TENANT_ID",
    "azure_client_id": "AZURE_CLIENT_ID",
    "azure_client_secret": "AZURE_CLIENT_SECRET",
}

# ==========================================
# 5. Logging
# ==========================================
LOGGER_NAME = "logic_app_deployer"

# ==========================================
# 6. Logic Apps REST API
# ==========================================
# The API version whose Workflow resource carries sku, definitionLink
# and parametersLink.
WORKFLOW_API_VERSION = "2015-02-01-preview"
WORKFLOW_PATH_TEMPLATE = (
    "/subscriptions/{subscription_id}/resourceGroups/{resource_group_name}"
    "/providers/Microsoft.Logic/workflows/{workflow_name}"
)
