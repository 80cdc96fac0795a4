"""Report view helpers."""

from film_explorer.report.views.table_view import TableRow, build_table_rows, format_box_office

__all__ = ["TableRow", "build_table_rows", "format_box_office"]
