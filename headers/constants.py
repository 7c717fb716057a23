"""HTTP Request Headers and Cookie Constants

These values make outbound calls look like they come from a desktop browser
on www.roblox.com. Roblox rejects requests without a browser User-Agent.
"""

from config.loader import get_config_loader

# User-Agent string for every outbound request
USER_AGENT = get_config_loader().get(
    "USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36",
)

ORIGIN = "https://www.roblox.com"
REFERER = "https://www.roblox.com/"

# Marker Roblox requires on authentication-ticket calls
NEGOTIATION_HEADER = "RBXAuthenticationNegotiation"

CSRF_HEADER = "X-CSRF-TOKEN"
TICKET_HEADER = "rbx-authentication-ticket"

SESSION_COOKIE_NAME = ".ROBLOSECURITY"

# Every real session cookie carries this publicly documented warning
WARNING_PREFIX = "_|WARNING:-DO-NOT-SHARE-THIS.--"
