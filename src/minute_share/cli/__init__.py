"""Command-line interface for Minute Share."""
