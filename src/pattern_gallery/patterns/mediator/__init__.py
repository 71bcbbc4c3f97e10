"""Mediator: route interactions between objects through one coordinator."""
