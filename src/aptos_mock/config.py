from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from aptos_mock.constants import TOKEN_ENV_VAR

logger = logging.getLogger(__name__)


def load_dotenv(path: Path) -> dict[str, str]:
    """
    Minimal .env loader:
    - supports KEY=VALUE (an optional leading `export ` is ignored)
    - strips surrounding quotes
    - ignores blank lines and `#` comments
    - does not expand variables
    """
    out: dict[str, str] = {}
    if not path.exists():
        return out

    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        if line.startswith("export "):
            line = line[len("export ") :]
        key, value = (part.strip() for part in line.split("=", 1))
        if not key:
            continue
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]
        out[key] = value
    return out


def resolve_token(
    cli_token: str | None,
    *,
    env: Mapping[str, str] | None = None,
    env_file: Path | None = None,
) -> str | None:
    """
    Pick the bearer token for the RPC endpoint.

    Precedence: --token flag, then APTOS_API_TOKEN, then the .env file.
    Blank values are treated as unset.
    """
    if cli_token and cli_token.strip():
        return cli_token.strip()

    env = os.environ if env is None else env
    from_env = env.get(TOKEN_ENV_VAR, "").strip()
    if from_env:
        return from_env

    if env_file is not None:
        from_file = load_dotenv(env_file).get(TOKEN_ENV_VAR, "").strip()
        if from_file:
            logger.debug(f"Using {TOKEN_ENV_VAR} from {env_file}")
            return from_file
    return None
