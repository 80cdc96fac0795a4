"""One-time asynchronous load of the canonical film collection.

The dataset is a JSON array of film objects, read either from a local file
or fetched over HTTP(S). Any failure here is fatal to rendering: callers get
a DatasetLoadError and nothing is retried.
"""

import json
import logging
from pathlib import Path
from typing import Any

import httpx
from pydantic import ValidationError

from film_explorer import __version__
from film_explorer.models import Film, FilmCollection

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class DatasetLoadError(Exception):
    """Raised when the dataset is unreachable or unparsable."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load films from {source}: {reason}")


def is_remote(source: str) -> bool:
    """Check whether a dataset source is an HTTP(S) URL."""
    return source.startswith(("http://", "https://"))


def parse_films(raw: Any, source: str = "<data>") -> FilmCollection:
    """Validate decoded JSON into a film collection.

    Args:
        raw: Decoded dataset, expected to be a list of film objects.
        source: Where the data came from, for error messages.

    Returns:
        Immutable collection in dataset order.

    Raises:
        DatasetLoadError: If the data is not a list or a record is malformed.
    """
    if not isinstance(raw, list):
        raise DatasetLoadError(source, f"expected a JSON array, got {type(raw).__name__}")

    films: list[Film] = []
    for index, item in enumerate(raw):
        try:
            films.append(Film.model_validate(item))
        except ValidationError as e:
            raise DatasetLoadError(source, f"invalid film record at index {index}: {e}") from e

    return FilmCollection(films)


async def _fetch_remote(url: str, timeout: float) -> str:
    """Fetch the dataset body from a URL."""
    headers = {"Accept": "application/json", "User-Agent": f"film-explorer/{__version__}"}
    try:
        async with httpx.AsyncClient(
            timeout=timeout, headers=headers, follow_redirects=True
        ) as client:
            response = await client.get(url)
            response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise DatasetLoadError(url, f"HTTP {e.response.status_code}") from e
    except httpx.HTTPError as e:
        raise DatasetLoadError(url, f"request failed: {e}") from e

    return response.text


def _read_local(path: Path) -> str:
    """Read the dataset body from a file."""
    if not path.exists():
        raise DatasetLoadError(str(path), "file not found")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DatasetLoadError(str(path), str(e)) from e


async def load_films(source: str | Path, timeout: float = DEFAULT_TIMEOUT) -> FilmCollection:
    """Load the canonical film collection.

    Args:
        source: Local JSON file path or http(s) URL.
        timeout: Request timeout in seconds for remote sources.

    Returns:
        Immutable collection of validated films.

    Raises:
        DatasetLoadError: If the source is unreachable, not JSON, or malformed.
    """
    source_str = str(source)
    logger.info("Loading films from %s", source_str)

    if is_remote(source_str):
        body = await _fetch_remote(source_str, timeout)
    else:
        body = _read_local(Path(source_str))

    try:
        raw = json.loads(body)
    except json.JSONDecodeError as e:
        raise DatasetLoadError(source_str, f"invalid JSON: {e}") from e

    collection = parse_films(raw, source_str)
    logger.info("Loaded %d films", len(collection))
    return collection
