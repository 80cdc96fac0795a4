"""Chart data generation functions for Chart.js visualization."""

import logging
from collections.abc import Sequence
from typing import Any

from film_explorer.metrics.aggregations import DirectorRevenue
from film_explorer.report.views.table_view import format_box_office

logger = logging.getLogger(__name__)

__all__ = [
    "BACKGROUND_COLORS",
    "BORDER_COLORS",
    "director_tooltip_label",
    "generate_country_chart",
    "generate_director_chart",
]

BACKGROUND_COLORS = [
    "rgba(93, 64, 55, 0.6)",
    "rgba(141, 110, 99, 0.6)",
    "rgba(188, 170, 164, 0.6)",
    "rgba(215, 204, 200, 0.6)",
    "rgba(239, 235, 233, 0.6)",
]

BORDER_COLORS = [
    "rgba(93, 64, 55, 1)",
    "rgba(141, 110, 99, 1)",
    "rgba(188, 170, 164, 1)",
    "rgba(215, 204, 200, 1)",
    "rgba(239, 235, 233, 1)",
]


def _palette(colors: list[str], size: int) -> list[str]:
    """Repeat the palette so every slice gets a color."""
    return [colors[i % len(colors)] for i in range(size)]


def _pie_options() -> dict[str, Any]:
    return {
        "responsive": True,
        "aspectRatio": 1.5,
        "plugins": {"legend": {"display": True, "position": "bottom"}},
    }


def director_tooltip_label(entry: DirectorRevenue) -> str:
    """Tooltip text for a director slice, e.g. "Jane Doe: $1,000 (2 films)"."""
    return f"{entry.director}: {format_box_office(entry.revenue)} ({entry.film_count} films)"


def generate_country_chart(distribution: dict[str, int]) -> dict[str, Any]:
    """Generate the country distribution pie chart config.

    Labels follow the mapping's iteration order.

    Args:
        distribution: Country to film count mapping.

    Returns:
        Chart.js configuration dict.
    """
    labels = list(distribution)
    return {
        "type": "pie",
        "data": {
            "labels": labels,
            "datasets": [
                {
                    "label": "Number of Films",
                    "data": [distribution[label] for label in labels],
                    "backgroundColor": _palette(BACKGROUND_COLORS, len(labels)),
                    "borderColor": _palette(BORDER_COLORS, len(labels)),
                    "borderWidth": 1,
                }
            ],
        },
        "options": _pie_options(),
    }


def generate_director_chart(top_directors: Sequence[DirectorRevenue]) -> dict[str, Any]:
    """Generate the top directors pie chart config.

    Slices are sized by revenue. Tooltip labels carry revenue and film count
    under ``tooltipLabels`` for the page script to look up by slice index.

    Args:
        top_directors: Ranked director buckets.

    Returns:
        Chart.js configuration dict.
    """
    size = len(top_directors)
    return {
        "type": "pie",
        "data": {
            "labels": [entry.director for entry in top_directors],
            "datasets": [
                {
                    "data": [entry.revenue for entry in top_directors],
                    "backgroundColor": _palette(BACKGROUND_COLORS, size),
                    "borderColor": _palette(BORDER_COLORS, size),
                    "borderWidth": 1,
                }
            ],
        },
        "options": _pie_options(),
        "tooltipLabels": [director_tooltip_label(entry) for entry in top_directors],
    }
