"""Composite: treat single objects and trees of objects the same way."""
