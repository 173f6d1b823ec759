"""Packaged JSON schemas for structured selector documents."""
