"""Command-line interface for gcm."""
