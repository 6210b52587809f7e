# lexis\__init__.py
"""
Lexis - Morphological Data Model for Classical Languages.

This package contains the entities used to represent morphological analyses
of Latin, Greek and Arabic words (features, inflections, lemmas, lexemes,
homonyms) and the grouping engine that arranges a flat list of inflections
into a nested display hierarchy.

It follows the Hexagonal Architecture (Ports & Adapters) layout:
- lexis.core: pure domain logic, ports and use cases.
- lexis.shared: configuration, logging, tracing and dependency wiring.
"""

__version__ = "1.0.0"

from lexis.core.domain import (
    Feature,
    FeatureKind,
    FeatureRegistry,
    FeatureType,
    Inflection,
    InflectionGroup,
    InflectionGroupingKey,
    group_for_display,
)

__all__ = [
    "Feature",
    "FeatureKind",
    "FeatureRegistry",
    "FeatureType",
    "Inflection",
    "InflectionGroup",
    "InflectionGroupingKey",
    "group_for_display",
]
