"""Prototype: create new objects by cloning a configured instance."""
