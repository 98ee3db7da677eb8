"""Data access for Pointmap records."""
