HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"

CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_MULTIPART = "multipart/form-data"

ALLOWED_URL_SCHEMES = ("http", "https")

SUCCESS_STATUS_MIN = 200
SUCCESS_STATUS_MAX = 299

ENV_PREFIX = "NETWORK_MANAGER_"
ENV_LOG_BODIES = f"{ENV_PREFIX}LOG_BODIES"
ENV_MAX_WORKERS = f"{ENV_PREFIX}MAX_WORKERS"

REDACTED = "***"
DEFAULT_REDACTED_HEADERS = frozenset(
    {
        "authorization",
        "cookie",
        "proxy-authorization",
        "set-cookie",
        "x-api-key",
    }
)
