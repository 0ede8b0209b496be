"""Client for the external Star Wars films catalog used to seed the movies table."""

import logging
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from app.core.exceptions import StarWarsApiError
from app.schemas.movies import StarWarsFilm

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


def _get_films(client: httpx.Client, url: str, timeout: float) -> list[StarWarsFilm]:
    try:
        resp = client.get(url, timeout=timeout)
    except httpx.TimeoutException as e:
        raise StarWarsApiError(f"Movie catalog request timed out after {timeout}s.", 500) from e
    except httpx.HTTPError as e:
        raise StarWarsApiError(f"Movie catalog unreachable: {e}", 500) from e

    if resp.status_code != 200:
        logger.warning("Movie catalog returned %s for %s", resp.status_code, url)
        raise StarWarsApiError("Request processed with errors", 400)

    try:
        body = resp.json()
    except ValueError as e:
        raise StarWarsApiError("Movie catalog returned invalid JSON.", 500) from e
    results = body.get("results") if isinstance(body, dict) else None
    if not isinstance(results, list):
        raise StarWarsApiError("Movie catalog response missing results.", 500)

    try:
        return [StarWarsFilm.model_validate(item) for item in results]
    except ValidationError as e:
        raise StarWarsApiError(f"Movie catalog returned an invalid film: {e}", 500) from e


def fetch_films(settings: "Settings", client: httpx.Client | None = None) -> list[StarWarsFilm]:
    """
    GET {STAR_WARS_URL}/films and return the films list.

    Raises StarWarsApiError: status 400 for a non-200 response, 500 for transport
    failures or a malformed body.
    """
    url = f"{settings.STAR_WARS_URL.rstrip('/')}/films"
    timeout = settings.STAR_WARS_REQUEST_TIMEOUT_SEC
    if client is not None:
        return _get_films(client, url, timeout)
    with httpx.Client() as owned:
        return _get_films(owned, url, timeout)
