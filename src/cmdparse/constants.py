"""Literal constants used by cmdparse."""

APP_NAME = "cmdparse"

# Default capacities of the option table and the positional list.
MAX_OPTIONS = 64
MAX_POSITIONALS = 64

DEBUG_ENV_VAR = "CMDPARSE_DEBUG"
LOG_FILE_ENV_VAR = "CMDPARSE_LOG_FILE"

ERROR_PREFIX = "ERROR:"
