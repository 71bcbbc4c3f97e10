"""Command: turn requests into objects that can be queued and undone."""
