"""Command-line interface for Star Battle."""
