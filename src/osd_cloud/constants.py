"""Constants used throughout the osd-cloud credential helpers."""

# ============================================================================
# Role names
# ============================================================================
# Intermediate role inside the operator's own account
RH_SRE_CCS_ACCESS_ROLE_NAME = "RH-SRE-CCS-Access"

# Role in the jump account that customer support roles trust
RH_TECHNICAL_SUPPORT_ACCESS_ROLE_NAME = "RH-Technical-Support-Access"

# Well-known role created in every linked account of an organization
ORGANIZATION_ACCOUNT_ACCESS_ROLE_NAME = "OrganizationAccountAccessRole"

# ============================================================================
# Identifiers
# ============================================================================
DEFAULT_PARTITION = "aws"
SESSION_NAME_PREFIX = "RH-SRE-"

# Environment variable holding the jump account id (differs per tier)
JUMPROLE_ACCOUNT_ID_ENV = "JUMPROLE_ACCOUNT_ID"

# ============================================================================
# Backplane HTTP API
# ============================================================================
USER_AGENT = "osdctl"
