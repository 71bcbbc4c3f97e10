"""Pattern Gallery - Root Package.

A teaching collection of paired examples for fourteen classic design
patterns. Every example ships a *basic* program that shows the problem and a
*refactored* program that applies the pattern to the same toy domain.

Key Components:
    - patterns: the example programs, one subpackage per example
    - domain: catalog model, shared exceptions, events and ports
    - application: CQRS queries and commands for browsing and running examples
    - infrastructure: logging, DI, buses, console adapters and registries
    - cli: the ``pattern-gallery`` command line tool
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME

__all__ = ["__version__", "PACKAGE_NAME"]
