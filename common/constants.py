DEFAULT_API_BASE_URL = "http://localhost:8080"
DEFAULT_TIMEOUT      = (10, 20)          # (connect, read) seconds
USER_AGENT           = "matchlog-client/1.0"

# Persisted browser state (cookies)
TOKEN_KEY = "matchlog_auth_token"
USER_KEY  = "matchlog_user_data"

# Match endpoints
MATCHES_PATH = "/api/matches"
EVENTS_PATH  = "/api/events"
COMMENTS_PATH = "/api/comments"
AUTH_PATH    = "/api/auth"

MATCH_STATUSES = [
    "SCHEDULED", "TIMED", "IN_PLAY", "PAUSED", "FINISHED",
    "SUSPENDED", "POSTPONED", "CANCELLED", "AWARDED",
]
UPCOMING_STATUSES = {"SCHEDULED", "TIMED"}
LIVE_STATUSES     = {"IN_PLAY", "PAUSED"}

DEFAULT_ROLES = ["USER"]
TBD           = "TBD"
VS            = "vs"

# Form limits
MIN_QUERY_LENGTH    = 2
MIN_PASSWORD_LENGTH = 6
MAX_COMMENT_LENGTH  = 1000
