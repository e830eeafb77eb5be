"""Presentation layer: ``toolgate-cli`` and the FastAPI service."""
