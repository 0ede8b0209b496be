"""Movie endpoints. All require a bearer access token; role checks happen in MovieService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from app.api.v1.auth import envelope_response, get_current_user_id
from app.core.database import SessionFactory, get_session_factory
from app.schemas.envelope import ClientResponse
from app.schemas.movies import MovieRequest, MovieResponse
from app.services.movies import MovieService

router = APIRouter()


def get_movie_service(
    session_factory: Annotated[SessionFactory, Depends(get_session_factory)],
) -> MovieService:
    return MovieService(session_factory)


@router.get("/get-movies", response_model=ClientResponse[list[MovieResponse] | MovieResponse])
def get_movies(
    user_id: Annotated[str, Depends(get_current_user_id)],
    service: Annotated[MovieService, Depends(get_movie_service)],
    id: Annotated[str | None, Query(description="Fetch a single movie (regular users only)")] = None,
) -> JSONResponse:
    """List every movie, or fetch one by id."""
    return envelope_response(service.get_movies(user_id, id))


@router.post("/create-movie", response_model=ClientResponse[MovieResponse])
def create_movie(
    body: MovieRequest,
    user_id: Annotated[str, Depends(get_current_user_id)],
    service: Annotated[MovieService, Depends(get_movie_service)],
) -> JSONResponse:
    return envelope_response(service.create_movie(user_id, body))


@router.patch("/update-movie", response_model=ClientResponse[MovieResponse])
def update_movie(
    body: MovieRequest,
    user_id: Annotated[str, Depends(get_current_user_id)],
    service: Annotated[MovieService, Depends(get_movie_service)],
    id: Annotated[str, Query(description="Movie id")],
) -> JSONResponse:
    return envelope_response(service.update_movie(user_id, body, id))


@router.delete("/delete-movie", response_model=ClientResponse[MovieResponse])
def delete_movie(
    user_id: Annotated[str, Depends(get_current_user_id)],
    service: Annotated[MovieService, Depends(get_movie_service)],
    id: Annotated[str, Query(description="Movie id")],
) -> JSONResponse:
    return envelope_response(service.delete_movie(user_id, id))


@router.post("/seeding-database", response_model=ClientResponse[dict])
def seeding_database(
    user_id: Annotated[str, Depends(get_current_user_id)],
    service: Annotated[MovieService, Depends(get_movie_service)],
) -> JSONResponse:
    """One-time import of the external catalog into an empty movies table (admin only)."""
    return envelope_response(service.seed_catalog(user_id))
