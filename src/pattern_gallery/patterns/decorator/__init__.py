"""Decorator: add behaviour to an object by wrapping it."""
