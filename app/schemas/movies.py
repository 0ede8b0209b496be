"""Pydantic schemas for movies: request body, persisted record and the external catalog entry."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MovieFields(BaseModel):
    """The seven fields every movie carries. All are required on create and update."""

    title: str = Field(..., min_length=1, max_length=512)
    episode_id: int
    opening_crawl: str
    director: str = Field(..., max_length=512)
    producer: str = Field(..., max_length=512)
    release_date: str = Field(..., max_length=64)
    url: str = Field(..., max_length=2048)


class MovieRequest(MovieFields):
    """Body for create-movie and update-movie."""

    model_config = ConfigDict(extra="ignore")


class MovieResponse(MovieFields):
    """Persisted movie with its id and timestamps."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime
    updated_at: datetime


class StarWarsFilm(MovieFields):
    """One entry of the external catalog's films list; extra upstream keys are ignored."""

    model_config = ConfigDict(extra="ignore")
