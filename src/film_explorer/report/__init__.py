"""Report rendering: terminal tables and the static site."""
