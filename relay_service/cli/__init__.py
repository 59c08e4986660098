"""Command-line interface for relay-service."""
