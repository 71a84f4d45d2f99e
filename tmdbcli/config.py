import logging
import os
import pathlib
from typing import Mapping, Optional, Union

from dotenv.parser import parse_stream


ACCESS_TOKEN_VAR = "TMDB_ACCESS_TOKEN"
DEFAULT_ENV_FILE = ".env"

logger = logging.getLogger(__name__)


def token_from_env_file(env_file: Union[str, pathlib.Path]) -> Optional[str]:
    path = pathlib.Path(env_file)
    if not path.is_file():
        return None

    # Bindings come back in file order; comments and blank lines have no key.
    with open(path, encoding="utf-8") as f:
        for binding in parse_stream(f):
            if binding.key is not None and binding.key.strip().upper() == ACCESS_TOKEN_VAR:
                # A bare `KEY` line parses to None; treat it like a blank value.
                value = (binding.value or "").strip()
                return value or None

    return None


def load_access_token(
    env_file: Union[str, pathlib.Path] = DEFAULT_ENV_FILE,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """
    Find the TMDB access token.

    The environment variable TMDB_ACCESS_TOKEN wins; failing that, the first
    TMDB_ACCESS_TOKEN entry in `env_file` (matched case-insensitively) is
    used. Blank values are treated as absent.
    """
    if environ is None:
        environ = os.environ

    if (token := (environ.get(ACCESS_TOKEN_VAR) or "").strip()):
        logger.debug("using %s from the environment", ACCESS_TOKEN_VAR)
        return token

    if (token := token_from_env_file(env_file)) is not None:
        logger.debug("using %s from %s", ACCESS_TOKEN_VAR, env_file)
        return token

    return None
