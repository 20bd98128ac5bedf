"""Output file utilities."""
