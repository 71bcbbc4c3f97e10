"""Package metadata and naming constants."""

PACKAGE_NAME = "pattern-gallery"
PACKAGE_NAME_SHORT = "pattern_gallery"
__version__ = "1.0.0"
VERSION = __version__
DESCRIPTION = "Paired before/after examples of classic object-oriented design patterns"
ENV_PREFIX = "PATTERN_GALLERY_"
