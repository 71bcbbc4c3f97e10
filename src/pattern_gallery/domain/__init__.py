"""Domain layer: catalog model and shared base types."""
