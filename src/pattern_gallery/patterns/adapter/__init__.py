"""Adapter: make an incompatible interface usable without changing it."""
