"""Application entry point: report where tokens live and which account is active."""

import logging
import os
from typing import Any, Mapping

from gcal_tokens.config import LEGACY_TOKEN_FILENAME
from gcal_tokens.paths import (
    get_account_mode,
    get_legacy_token_path,
    get_secure_token_path,
)

logger = logging.getLogger(__name__)


def describe_token_locations(
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
    home: str | None = None,
) -> dict[str, Any]:
    """Resolve the token paths and account mode in one place.

    The existence flags only stat the paths; nothing is read or created.
    """
    secure_path = get_secure_token_path(env=env, cwd=cwd, home=home)
    legacy_path = get_legacy_token_path(env=env, cwd=cwd)
    return {
        "account_mode": get_account_mode(env=env),
        "secure_token_path": secure_path,
        "legacy_token_path": legacy_path,
        "secure_token_exists": os.path.exists(secure_path),
        "legacy_token_exists": os.path.exists(legacy_path),
    }


def main() -> None:
    """Print the resolved token locations."""
    info = describe_token_locations()

    print(f"Account mode:  {info['account_mode']}")
    print(f"Token path:    {info['secure_token_path']}"
          f"{'' if info['secure_token_exists'] else '  (not found)'}")
    print(f"Legacy path:   {info['legacy_token_path']}"
          f"{'  (found)' if info['legacy_token_exists'] else ''}")

    if info["legacy_token_exists"] and not info["secure_token_exists"]:
        logger.warning(
            "Found legacy %s but no token at %s; re-authenticate or move it "
            "to migrate.",
            LEGACY_TOKEN_FILENAME,
            info["secure_token_path"],
        )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    main()
