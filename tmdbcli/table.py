from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional, TextIO

from .models import Movie


TITLE_WIDTH = 40
YEAR_WIDTH = 6
RATING_WIDTH = 6
VOTES_WIDTH = 10

EMPTY_MESSAGE = "No movies to display."


def truncate(title: str, width: int = TITLE_WIDTH) -> str:
    if len(title) > width:
        return title[: width - 3] + "..."

    return title


def format_row(title: str, year: str, rating: str, votes: str) -> str:
    return f"{title:<{TITLE_WIDTH}} {year:>{YEAR_WIDTH}} {rating:>{RATING_WIDTH}} {votes:>{VOTES_WIDTH}}"


def format_rating(rating: float) -> str:
    # Halves round away from zero (7.25 -> 7.3).
    return str(Decimal(str(rating)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def display(m: Movie) -> str:
    year = str(m.release_date.year) if m.release_date is not None else ""

    return format_row(truncate(m.title), year, format_rating(m.vote_average), f"{m.vote_count:,}")


def render_table(movies: Iterable[Movie]) -> str:
    movies = list(movies)
    if not movies:
        return EMPTY_MESSAGE

    rule = "-" * (TITLE_WIDTH + YEAR_WIDTH + RATING_WIDTH + VOTES_WIDTH + 3)
    lines: List[str] = [format_row("Title", "Year", "Rating", "Votes"), rule]
    lines += [display(m) for m in movies]

    return "\n".join(lines)


def print_table(movies: Iterable[Movie], file: Optional[TextIO] = None) -> None:
    print(render_table(movies), file=file)
