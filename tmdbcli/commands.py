from typing import Dict, Optional


ENDPOINTS: Dict[str, str] = {
    "playing": "now_playing",
    "popular": "popular",
    "top": "top_rated",
    "upcoming": "upcoming",
}

DESCRIPTIONS: Dict[str, str] = {
    "playing": "List movies that are now playing in theatres",
    "popular": "List popular movies",
    "top": "List top-rated movies",
    "upcoming": "List upcoming movies",
}


def normalize(verb: Optional[str]) -> str:
    return (verb or "").strip().lower()


def is_help(verb: Optional[str]) -> bool:
    return normalize(verb) == "help"


def endpoint_for(verb: Optional[str]) -> Optional[str]:
    """
    Map a command verb to the TMDB endpoint type it selects, or None if the
    verb is not recognized.
    """
    return ENDPOINTS.get(normalize(verb))


def usage(prog: str = "tmdbcli") -> str:
    width = max(len(v) for v in ENDPOINTS) + 2
    commands = "\n".join(f"  {verb:<{width}}{DESCRIPTIONS[verb]}" for verb in ENDPOINTS)
    examples = "\n".join(f"  {prog} {verb}" for verb in ENDPOINTS)

    return f"""Usage:
  {prog} [OPTIONS] <command>

Commands:
{commands}
  {"help":<{width}}Show this message

Options:
  --env-file PATH  File to read TMDB_ACCESS_TOKEN from (default: .env)
  -v, --verbose    Log HTTP activity to stderr

Examples:
{examples}"""
