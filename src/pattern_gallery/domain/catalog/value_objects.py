"""Catalog value objects."""
from enum import Enum
from typing import Dict


class PatternCategory(str, Enum):
    """Gang-of-four pattern families."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"


class PatternName(str, Enum):
    """Design patterns covered by the gallery."""
    ADAPTER = "adapter"
    BUILDER = "builder"
    COMMAND = "command"
    COMPOSITE = "composite"
    DECORATOR = "decorator"
    FACADE = "facade"
    FACTORY = "factory"
    ITERATOR = "iterator"
    MEDIATOR = "mediator"
    OBSERVER = "observer"
    PROTOTYPE = "prototype"
    PROXY = "proxy"
    SINGLETON = "singleton"
    STRATEGY = "strategy"

    @property
    def category(self) -> PatternCategory:
        return PATTERN_CATEGORIES[self]


PATTERN_CATEGORIES: Dict[PatternName, PatternCategory] = {
    PatternName.ADAPTER: PatternCategory.STRUCTURAL,
    PatternName.BUILDER: PatternCategory.CREATIONAL,
    PatternName.COMMAND: PatternCategory.BEHAVIORAL,
    PatternName.COMPOSITE: PatternCategory.STRUCTURAL,
    PatternName.DECORATOR: PatternCategory.STRUCTURAL,
    PatternName.FACADE: PatternCategory.STRUCTURAL,
    PatternName.FACTORY: PatternCategory.CREATIONAL,
    PatternName.ITERATOR: PatternCategory.BEHAVIORAL,
    PatternName.MEDIATOR: PatternCategory.BEHAVIORAL,
    PatternName.OBSERVER: PatternCategory.BEHAVIORAL,
    PatternName.PROTOTYPE: PatternCategory.CREATIONAL,
    PatternName.PROXY: PatternCategory.STRUCTURAL,
    PatternName.SINGLETON: PatternCategory.CREATIONAL,
    PatternName.STRATEGY: PatternCategory.BEHAVIORAL,
}


class Variant(str, Enum):
    """Which side of a before/after pair to run."""
    BASIC = "basic"
    REFACTORED = "refactored"
