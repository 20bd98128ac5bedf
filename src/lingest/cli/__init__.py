"""Command-line interface for lingest."""
