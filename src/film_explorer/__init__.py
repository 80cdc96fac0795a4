"""Film catalogue explorer: filterable film table and summary charts."""

__version__ = "0.1.0"
