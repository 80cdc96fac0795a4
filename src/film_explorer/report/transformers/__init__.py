"""Data transformation functions for report generation.

Modules:
    charts: Chart.js configuration for the summary charts
"""

from .charts import director_tooltip_label, generate_country_chart, generate_director_chart

__all__ = [
    "director_tooltip_label",
    "generate_country_chart",
    "generate_director_chart",
]
