import datetime
import pydantic
from typing import Any, List, Optional


class TMDBModel(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True, extra="ignore")

    # TMDB field names are matched without regard to case.
    @pydantic.model_validator(mode="before")
    @classmethod
    def lowercase_keys(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k.lower() if isinstance(k, str) else k: v for k, v in data.items()}

        return data


class Movie(TMDBModel):
    title: str
    release_date: Optional[datetime.date] = None
    vote_average: float = pydantic.Field(default=0.0, ge=0, le=10)
    vote_count: int = pydantic.Field(default=0, ge=0)

    @pydantic.field_validator("release_date", mode="before")
    @classmethod
    def blank_date(cls, value: Any) -> Any:
        # Unreleased titles come back with an empty string.
        if isinstance(value, str) and not value.strip():
            return None

        return value


class DateRange(TMDBModel):
    minimum: datetime.date
    maximum: datetime.date


class MovieListResponse(TMDBModel):
    page: int = 1
    results: List[Movie] = []
    total_pages: int = 0
    total_results: int = 0
    dates: Optional[DateRange] = None
