"""Singleton: one shared instance with a global access point."""
