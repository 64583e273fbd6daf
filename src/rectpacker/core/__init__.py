"""Geometry, free-space tracking, models and layout validation."""
