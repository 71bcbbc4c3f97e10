"""Catalog-specific exceptions."""
from pattern_gallery.domain.base.exceptions import DomainException, EntityNotFoundError


class PatternNotFoundError(EntityNotFoundError):
    """Raised when a pattern name is not part of the gallery."""

    def __init__(self, pattern: str):
        super().__init__("Pattern", pattern)


class ExampleNotFoundError(EntityNotFoundError):
    """Raised when a pattern has no example with the requested slug."""

    def __init__(self, pattern: str, slug: str):
        super().__init__("Example", f"{pattern}/{slug}")
        self.pattern = pattern
        self.slug = slug


class VariantNotAvailableError(DomainException):
    """Raised when an example does not ship the requested variant."""

    def __init__(self, pattern: str, slug: str, variant: str):
        message = f"Example {pattern}/{slug} has no '{variant}' variant"
        super().__init__(message, "VARIANT_NOT_AVAILABLE", {
            "pattern": pattern,
            "slug": slug,
            "variant": variant,
        })


class InvalidExampleModuleError(DomainException):
    """Raised when an example module does not expose a run(context) entry point."""

    def __init__(self, module_path: str):
        super().__init__(
            f"Example module {module_path} does not define run(context)",
            "INVALID_EXAMPLE_MODULE",
            {"module": module_path},
        )
