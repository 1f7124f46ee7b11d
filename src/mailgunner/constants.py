"""Default configuration constants for the Mailgunner SDK."""

VERSION = "0.1.0"

# Public Mailgun API host; every request goes over HTTPS
DEFAULT_HOST = "api.mailgun.net"
API_VERSION = "v2"

# Basic auth username, the API key is the password
AUTH_USERNAME = "api"

USER_AGENT = f"mailgunner-python/{VERSION}"

JSON_CONTENT_TYPE = "application/json"
