"""orgit: links into repository views and their public web URLs."""

__all__ = []
