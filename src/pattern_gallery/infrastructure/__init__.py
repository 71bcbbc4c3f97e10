"""Infrastructure layer: logging, DI, buses, console adapters, registries and error handling."""
