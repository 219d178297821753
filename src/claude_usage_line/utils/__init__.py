"""Helpers for credentials, the usage API, colors and formatting."""
