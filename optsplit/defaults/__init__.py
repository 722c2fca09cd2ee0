"""Bundled default settings."""
