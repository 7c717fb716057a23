from config.loader import get_config_loader

# Get the config loader instance
config = get_config_loader()

# Server configuration
PORT = config.get("PORT", 3000)
LOG_LEVEL = config.get("LOG_LEVEL", "info")
BIND_ADDRESS = config.get("BIND_ADDRESS", "0.0.0.0")

# Frontend assets served for every path other than the API
STATIC_DIR = config.get("STATIC_DIR", "static")

# Timeout configuration for outbound Roblox calls
# Connection timeout: Time to establish TCP connection
CONNECT_TIMEOUT = config.get("CONNECT_TIMEOUT", 5.0)
# Request timeout: Total budget for one remote call
REQUEST_TIMEOUT = config.get("REQUEST_TIMEOUT", 10.0)

# Accepted cookie length range (inclusive)
COOKIE_MIN_LENGTH = config.get("COOKIE_MIN_LENGTH", 100)
COOKIE_MAX_LENGTH = config.get("COOKIE_MAX_LENGTH", 5000)

# Refresh strategies in priority order (comma-separated names).
# reauthenticate signs out every other session; keep it last.
REFRESH_STRATEGIES = config.get_list(
    "REFRESH_STRATEGIES",
    ["authentication_ticket", "session_probe", "reauthenticate"],
)

# Roblox endpoints (hardcoded - not user configurable)
AUTH_BASE = "https://auth.roblox.com"
USERS_BASE = "https://users.roblox.com"
WWW_BASE = "https://www.roblox.com"

LOGIN_URL = f"{AUTH_BASE}/v2/login"
AUTH_TICKET_URL = f"{AUTH_BASE}/v1/authentication-ticket"
AUTH_TICKET_REDEEM_URL = f"{AUTH_BASE}/v1/authentication-ticket/redeem"
REAUTHENTICATE_URL = f"{AUTH_BASE}/v2/logoutfromallsessionsandreauthenticate"
AUTHENTICATED_USER_URL = f"{USERS_BASE}/v1/users/authenticated"
SETTINGS_PROBE_URL = f"{WWW_BASE}/my/settings/json"
