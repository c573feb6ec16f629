"""Block rendering."""
