"""Shared configuration for gcal_tokens."""

# Environment variables
TOKEN_PATH_ENV = "GOOGLE_CALENDAR_MCP_TOKEN_PATH"
XDG_CONFIG_HOME_ENV = "XDG_CONFIG_HOME"
ACCOUNT_MODE_ENV = "GOOGLE_ACCOUNT_MODE"
RUNTIME_ENV = "NODE_ENV"

# Token storage layout (<config-dir>/google-calendar-mcp/tokens.json)
APP_DIR_NAME = "google-calendar-mcp"
TOKEN_FILENAME = "tokens.json"
DEFAULT_CONFIG_SUBDIR = ".config"

# Pre-XDG token file, kept in the working directory
LEGACY_TOKEN_FILENAME = ".gcp-saved-tokens.json"

# Account modes
ACCOUNT_MODE_TEST = "test"
ACCOUNT_MODE_NORMAL = "normal"
ACCOUNT_MODES = (ACCOUNT_MODE_TEST, ACCOUNT_MODE_NORMAL)
