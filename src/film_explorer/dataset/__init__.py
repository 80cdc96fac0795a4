"""Dataset loading for the canonical film collection."""

from film_explorer.dataset.loader import DatasetLoadError, load_films, parse_films

__all__ = ["DatasetLoadError", "load_films", "parse_films"]
