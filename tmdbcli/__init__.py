import click
import logging
import sys
from typing import NoReturn, Optional

from .client import (
    TMDBAuthorizationError,
    TMDBClient,
    TMDBError,
    TMDBNetworkError,
    TMDBNotFoundError,
    TMDBRateLimitError,
)
from .commands import endpoint_for, is_help, normalize, usage
from .config import ACCESS_TOKEN_VAR, DEFAULT_ENV_FILE, load_access_token
from .table import print_table


def fail(message: str) -> NoReturn:
    print(message, file=sys.stderr)
    sys.exit(1)


def configure_logging(verbose: bool) -> None:
    # Replace rather than add, so repeated invocations in one process log once
    # and always to the current stderr.
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    logger = logging.getLogger(__name__)
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


class VerbCommand(click.Command):
    """A command whose usage errors end in one line on stderr and exit status 1."""

    def parse_args(self, ctx: click.Context, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as err:
            fail(f"error: {err.format_message()}")


# Only the first positional argument selects the list; anything else is ignored.
@click.command(
    cls=VerbCommand,
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
@click.argument("command", required=False)
@click.option(
    "--env-file",
    type=click.Path(dir_okay=False),
    default=DEFAULT_ENV_FILE,
    show_default=True,
    help=f"File to read {ACCESS_TOKEN_VAR} from when it is not in the environment",
)
@click.option("-v", "--verbose", is_flag=True, help="Log HTTP activity to stderr")
def tmdbcli(command: Optional[str], env_file: str, verbose: bool) -> None:
    """
    List TMDB movies that are now playing, popular, top rated or upcoming.
    """
    configure_logging(verbose)

    # A bare invocation is a usage error; asking for help is not.
    if not normalize(command) or is_help(command):
        print(usage())
        sys.exit(0 if is_help(command) else 1)

    if (type_of_movie := endpoint_for(command)) is None:
        print(f"error: Unknown command: '{command}'", file=sys.stderr)
        print(usage())
        sys.exit(1)

    # Read in the access token.
    if (token := load_access_token(env_file)) is None:
        fail(f"error: TMDB access token not configured (set {ACCESS_TOKEN_VAR})")

    # Fetch the list and print it.
    tmdb = TMDBClient(token)
    try:
        movies = tmdb.movie_list(type_of_movie)
    except (TMDBNotFoundError, TMDBAuthorizationError, TMDBRateLimitError) as err:
        fail(f"error: {err}")
    except TMDBNetworkError as err:
        fail(f"Network/API error: {err}")
    except TMDBError as err:
        fail(f"Unexpected error: {err}")

    print_table(movies.results)
