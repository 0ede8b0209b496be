"""Movie catalog: listing, admin-only CRUD and the one-time seed from the external catalog."""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import SessionFactory, transaction
from app.core.exceptions import ControlledError
from app.core.rbac import Action, ensure_permission
from app.models import Movie
from app.schemas.envelope import ClientResponse, failure_from_exception
from app.schemas.movies import MovieFields, MovieResponse, StarWarsFilm
from app.services import star_wars, users

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

NOT_ALLOWED_TO_GET = "You are not allowed to get a movie"
NOT_ALLOWED_TO_CREATE = "You are not allowed to create a new movie"
NOT_ALLOWED_TO_UPDATE = "You are not allowed to update a movie"
NOT_ALLOWED_TO_DELETE = "You are not allowed to delete a movie"
NOT_ALLOWED_TO_SEED = "You are not allowed to seeding database"
MOVIE_NOT_FOUND = "The movie does not exist"
ALREADY_SEEDED = "Database already seeded with movies"


def _movie_values(fields: MovieFields) -> dict[str, Any]:
    """The seven movie columns from a request or external film, nothing else."""
    return fields.model_dump(include=set(MovieFields.model_fields))


class MovieService:
    """
    Every write opens a transaction, checks the caller's role, checks existence
    where relevant, mutates and commits. Failures roll back and come back as an
    envelope.
    """

    def __init__(
        self,
        session_factory: SessionFactory,
        settings: "Settings | None" = None,
        fetch_films: Callable[[], list[StarWarsFilm]] | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._settings = settings or get_settings()
        self._fetch_films = fetch_films or (lambda: star_wars.fetch_films(self._settings))

    def _ensure_caller(self, session: Session, caller_id: str, action: Action, message: str) -> None:
        caller = users.find_by_id(session, caller_id)
        ensure_permission(caller.role if caller else None, action, message)

    def get_movies(
        self,
        caller_id: str,
        movie_id: str | None = None,
    ) -> ClientResponse[list[MovieResponse] | MovieResponse]:
        """
        Without movie_id, list every movie for any caller.

        With movie_id, only a REGULAR_USER may fetch it; an ADMIN is refused.
        """
        try:
            with self._session_factory() as session:
                if movie_id is None:
                    movies = session.query(Movie).order_by(Movie.created_at, Movie.id).all()
                    data: list[MovieResponse] | MovieResponse = [
                        MovieResponse.model_validate(m) for m in movies
                    ]
                else:
                    self._ensure_caller(session, caller_id, Action.GET_MOVIE, NOT_ALLOWED_TO_GET)
                    movie = session.get(Movie, movie_id)
                    if movie is None:
                        raise ControlledError(MOVIE_NOT_FOUND)
                    data = MovieResponse.model_validate(movie)
            return ClientResponse.ok(data, "Request successfully!")
        except Exception as e:
            return failure_from_exception(e)

    def create_movie(self, caller_id: str, fields: MovieFields) -> ClientResponse[MovieResponse]:
        try:
            with transaction(self._session_factory) as session:
                self._ensure_caller(session, caller_id, Action.CREATE_MOVIE, NOT_ALLOWED_TO_CREATE)
                movie = Movie(**_movie_values(fields))
                session.add(movie)
                session.flush()
                if movie.id is None:
                    raise ControlledError("Error while creating Movie", 500)
                data = MovieResponse.model_validate(movie)
            logger.info("Movie created: id=%s by=%s", data.id, caller_id)
            return ClientResponse.ok(data, "Movie created successfully!")
        except Exception as e:
            return failure_from_exception(e)

    def update_movie(
        self,
        caller_id: str,
        fields: MovieFields,
        movie_id: str,
    ) -> ClientResponse[MovieResponse]:
        """Replace all seven fields of an existing movie."""
        try:
            with transaction(self._session_factory) as session:
                self._ensure_caller(session, caller_id, Action.UPDATE_MOVIE, NOT_ALLOWED_TO_UPDATE)
                movie = session.get(Movie, movie_id)
                if movie is None:
                    raise ControlledError(MOVIE_NOT_FOUND)

                updated_count = (
                    session.query(Movie)
                    .filter(Movie.id == movie_id)
                    .update(_movie_values(fields), synchronize_session=False)
                )
                if updated_count == 0:
                    raise ControlledError("Error while updating Movie", 500)
                session.refresh(movie)
                data = MovieResponse.model_validate(movie)
            logger.info("Movie updated: id=%s by=%s", movie_id, caller_id)
            return ClientResponse.ok(data, "Movie updated successfully!")
        except Exception as e:
            return failure_from_exception(e)

    def delete_movie(self, caller_id: str, movie_id: str) -> ClientResponse[MovieResponse]:
        """Delete a movie; the envelope carries the record as it was before deletion."""
        try:
            with transaction(self._session_factory) as session:
                self._ensure_caller(session, caller_id, Action.DELETE_MOVIE, NOT_ALLOWED_TO_DELETE)
                movie = session.get(Movie, movie_id)
                if movie is None:
                    raise ControlledError(MOVIE_NOT_FOUND)
                data = MovieResponse.model_validate(movie)

                deleted_count = (
                    session.query(Movie)
                    .filter(Movie.id == movie_id)
                    .delete(synchronize_session=False)
                )
                if deleted_count == 0:
                    raise ControlledError("Error while delete Movie", 500)
            logger.info("Movie deleted: id=%s by=%s", movie_id, caller_id)
            return ClientResponse.ok(data, "Movie deleted successfully!")
        except Exception as e:
            return failure_from_exception(e)

    def seed_catalog(self, caller_id: str) -> ClientResponse[dict]:
        """
        Import the external catalog into an empty movies table.

        All inserts share the seed transaction, so a failure part way through
        leaves the catalog empty.
        """
        try:
            with transaction(self._session_factory) as session:
                self._ensure_caller(session, caller_id, Action.SEED_MOVIES, NOT_ALLOWED_TO_SEED)
                if session.query(Movie.id).first() is not None:
                    raise ControlledError(ALREADY_SEEDED)

                films = self._fetch_films()
                session.add_all([Movie(**_movie_values(film)) for film in films])
                session.flush()
            logger.info("Catalog seeded: movies=%s by=%s", len(films), caller_id)
            return ClientResponse.ok({}, "DataBase seeded successfully!")
        except Exception as e:
            return failure_from_exception(e)
