"""Pydantic request/response schemas."""

from app.schemas.auth import (
    ChangeUserRoleRequest,
    ChangeUserRoleResponse,
    SignInRequest,
    SignUpInResponse,
    SignUpRequest,
    TokenPair,
)
from app.schemas.envelope import ClientResponse, failure_from_exception
from app.schemas.health import HealthResponse
from app.schemas.movies import MovieRequest, MovieResponse, StarWarsFilm

__all__ = [
    "ChangeUserRoleRequest",
    "ChangeUserRoleResponse",
    "ClientResponse",
    "HealthResponse",
    "MovieRequest",
    "MovieResponse",
    "SignInRequest",
    "SignUpInResponse",
    "SignUpRequest",
    "StarWarsFilm",
    "TokenPair",
    "failure_from_exception",
]
