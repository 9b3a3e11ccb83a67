"""Application constants - centralized configuration values."""

# =============================================================================
# GitHub endpoints
# =============================================================================
GITHUB_AUTHORIZE_URL = "https://github.com/login/oauth/authorize"
GITHUB_TOKEN_URL = "https://github.com/login/oauth/access_token"
GITHUB_API_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"

# Repository access plus organization administration
GITHUB_OAUTH_SCOPE = "repo,admin:org,read:org"

# =============================================================================
# Webhook headers
# =============================================================================
GITHUB_EVENT_HEADER = "X-GitHub-Event"
GITHUB_DELIVERY_HEADER = "X-GitHub-Delivery"

# =============================================================================
# Timeouts (in seconds)
# =============================================================================
TOKEN_EXCHANGE_TIMEOUT = 5.0

# =============================================================================
# Logging
# =============================================================================
LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
LOGGER_NAME = "octohook"
