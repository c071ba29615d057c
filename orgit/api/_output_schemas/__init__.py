"""Pydantic output schemas for orgit commands."""
