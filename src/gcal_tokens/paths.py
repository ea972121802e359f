"""Token path and account-mode resolution.

Every resolver reads the process environment by default, but accepts an
explicit ``env`` mapping (and ``cwd`` / ``home`` where relevant) so callers
and tests can resolve against a snapshot instead.
"""

import logging
import os
from pathlib import Path
from typing import Literal, Mapping

from gcal_tokens.config import (
    ACCOUNT_MODE_ENV,
    ACCOUNT_MODE_NORMAL,
    ACCOUNT_MODE_TEST,
    ACCOUNT_MODES,
    APP_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    LEGACY_TOKEN_FILENAME,
    RUNTIME_ENV,
    TOKEN_FILENAME,
    TOKEN_PATH_ENV,
    XDG_CONFIG_HOME_ENV,
)

logger = logging.getLogger(__name__)

AccountMode = Literal["test", "normal"]


def _absolute(path: str, cwd: str | None) -> str:
    if cwd is None:
        return os.path.abspath(path)
    return os.path.normpath(os.path.join(cwd, path))


# ---------------------------------------------------------------------------
# Token paths
# ---------------------------------------------------------------------------

def get_secure_token_path(
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
    home: str | None = None,
) -> str:
    """Return the absolute path of the current-format token store.

    Priority order:

    1. ``GOOGLE_CALENDAR_MCP_TOKEN_PATH`` (made absolute against *cwd*)
    2. ``$XDG_CONFIG_HOME/google-calendar-mcp/tokens.json``
    3. ``~/.config/google-calendar-mcp/tokens.json``

    Nothing is checked or created on disk.
    """
    if env is None:
        env = os.environ

    custom_path = env.get(TOKEN_PATH_ENV)
    if custom_path:
        logger.debug("Using token path from %s: %s", TOKEN_PATH_ENV, custom_path)
        return _absolute(custom_path, cwd)

    config_dir = env.get(XDG_CONFIG_HOME_ENV)
    if not config_dir:
        if home is None:
            home = str(Path.home())
        config_dir = os.path.join(home, DEFAULT_CONFIG_SUBDIR)

    return _absolute(os.path.join(config_dir, APP_DIR_NAME, TOKEN_FILENAME), cwd)


def get_legacy_token_path(
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
) -> str:
    """Return where the old token file lived (for migration checks only)."""
    if cwd is None:
        cwd = os.getcwd()
    return _absolute(LEGACY_TOKEN_FILENAME, cwd)


# ---------------------------------------------------------------------------
# Account mode
# ---------------------------------------------------------------------------

def get_account_mode(env: Mapping[str, str] | None = None) -> AccountMode:
    """Return the account mode: ``"test"`` or ``"normal"``.

    An explicit ``GOOGLE_ACCOUNT_MODE`` wins (case-insensitive). Values other
    than test/normal are ignored rather than rejected. Failing that,
    ``NODE_ENV=test`` selects test mode, and everything else is normal.
    """
    if env is None:
        env = os.environ

    explicit_mode = env.get(ACCOUNT_MODE_ENV)
    if explicit_mode is not None:
        explicit_mode = explicit_mode.lower()
        if explicit_mode in ACCOUNT_MODES:
            return explicit_mode  # type: ignore[return-value]
        logger.debug(
            "Ignoring unrecognised %s=%r", ACCOUNT_MODE_ENV, env[ACCOUNT_MODE_ENV]
        )

    if env.get(RUNTIME_ENV) == "test":
        return ACCOUNT_MODE_TEST

    return ACCOUNT_MODE_NORMAL


def is_test_mode(env: Mapping[str, str] | None = None) -> bool:
    return get_account_mode(env) == ACCOUNT_MODE_TEST
