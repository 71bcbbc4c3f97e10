"""Application layer: DTOs, CQRS handlers and services."""
