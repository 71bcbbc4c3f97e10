"""Facade: one simple entry point in front of a complicated subsystem."""
