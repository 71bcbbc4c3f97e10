"""Example catalog - registry of every example package in the gallery."""
import importlib
import pkgutil
import threading
from typing import Callable, Dict, List, Optional, Union

from pattern_gallery.domain.base.exceptions import ConfigurationError
from pattern_gallery.domain.catalog import (
    DemoContext,
    ExampleDescriptor,
    ExampleNotFoundError,
    InvalidExampleModuleError,
    PatternName,
    PatternNotFoundError,
    Variant,
)
from pattern_gallery.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

DEFAULT_EXAMPLES_PACKAGE = "pattern_gallery.patterns"
DESCRIPTOR_ATTRIBUTE = "EXAMPLE"

DemoRunner = Callable[[DemoContext], None]


def parse_pattern(pattern: Union[str, PatternName]) -> PatternName:
    """
    Turn user input into a :class:`PatternName`.

    Raises:
        PatternNotFoundError: If the name is not one of the gallery's patterns
    """
    if isinstance(pattern, PatternName):
        return pattern
    try:
        return PatternName(str(pattern).strip().lower())
    except ValueError:
        raise PatternNotFoundError(str(pattern)) from None


class ExampleCatalog:
    """
    Registry of example descriptors keyed by ``pattern/slug``.

    Descriptors are found by walking the examples package: every
    subpackage exposing an ``EXAMPLE`` descriptor is registered.
    """

    def __init__(self, base_package: str = DEFAULT_EXAMPLES_PACKAGE):
        self._base_package = base_package
        self._examples: Dict[str, ExampleDescriptor] = {}
        self._lock = threading.RLock()
        self._discovered = False

    def register(self, descriptor: ExampleDescriptor) -> None:
        """
        Register one example descriptor.

        Raises:
            ConfigurationError: If an example with the same key already exists
        """
        with self._lock:
            existing = self._examples.get(descriptor.key)
            if existing is not None and existing != descriptor:
                raise ConfigurationError(f"Duplicate example registration: {descriptor.key}",
                                         {"package": descriptor.package,
                                          "existing_package": existing.package})
            self._examples[descriptor.key] = descriptor
        logger.debug(f"Registered example {descriptor.key}")

    def discover(self) -> int:
        """Import example packages and register their descriptors. Returns the count."""
        with self._lock:
            if self._discovered:
                return len(self._examples)
            package = importlib.import_module(self._base_package)
            for module_info in pkgutil.walk_packages(package.__path__, prefix=f"{package.__name__}."):
                if not module_info.ispkg:
                    continue
                module = importlib.import_module(module_info.name)
                descriptor = getattr(module, DESCRIPTOR_ATTRIBUTE, None)
                if isinstance(descriptor, ExampleDescriptor):
                    self.register(descriptor)
            self._discovered = True
            logger.debug(f"Discovered {len(self._examples)} examples in {self._base_package}")
            return len(self._examples)

    def _ensure_discovered(self) -> None:
        if not self._discovered:
            self.discover()

    def list_patterns(self) -> Dict[PatternName, List[ExampleDescriptor]]:
        """Every pattern, in declaration order, with its examples sorted by slug."""
        self._ensure_discovered()
        return {pattern: self.list_examples(pattern) for pattern in PatternName}

    def list_examples(self, pattern: Optional[Union[str, PatternName]] = None) -> List[ExampleDescriptor]:
        self._ensure_discovered()
        order = {name: index for index, name in enumerate(PatternName)}
        selected = parse_pattern(pattern) if pattern is not None else None
        examples = [
            descriptor for descriptor in self._examples.values()
            if selected is None or descriptor.pattern == selected
        ]
        return sorted(examples, key=lambda d: (order[d.pattern], d.slug))

    def get_example(self, pattern: Union[str, PatternName], slug: str) -> ExampleDescriptor:
        """
        Look up one example.

        Raises:
            PatternNotFoundError: Unknown pattern name
            ExampleNotFoundError: Known pattern without that slug
        """
        self._ensure_discovered()
        name = parse_pattern(pattern)
        descriptor = self._examples.get(f"{name.value}/{slug}")
        if descriptor is None:
            raise ExampleNotFoundError(name.value, slug)
        return descriptor

    def load_runner(self, descriptor: ExampleDescriptor, variant: Variant) -> DemoRunner:
        """
        Import a variant module and return its ``run(context)`` function.

        Raises:
            VariantNotAvailableError: The example does not ship ``variant``
            InvalidExampleModuleError: The module has no callable ``run``
        """
        module_path = descriptor.module_path(variant)
        module = importlib.import_module(module_path)
        runner = getattr(module, "run", None)
        if not callable(runner):
            raise InvalidExampleModuleError(module_path)
        return runner

    def resolve_runner(self, pattern: Union[str, PatternName], slug: str,
                       variant: Variant) -> DemoRunner:
        """Look up an example and return the ``run`` function of one variant."""
        return self.load_runner(self.get_example(pattern, slug), variant)

    def __len__(self) -> int:
        self._ensure_discovered()
        return len(self._examples)


def get_example_catalog() -> ExampleCatalog:
    """Get the singleton example catalog instance."""
    from pattern_gallery.infrastructure.patterns import get_singleton

    return get_singleton(ExampleCatalog)
