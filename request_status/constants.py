"""Request status constants."""

DEFAULT_USERS_NEEDED = 2
PROJECT_REQUEST_TYPE = "project"
STATUS_TIME_FORMAT = "%X"

VALID_LOG_LEVELS = {
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
}
