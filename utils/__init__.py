"""Shared utilities: constants, input resolution, friction factor correlations and JSON helpers."""
