# lexis\core\domain\__init__.py
"""
Domain Entities and Value Objects.

This package defines the core data structures of the morphology model:
features and feature types, inflections, lemmas, lexemes and homonyms,
the language models, and the grouping engine that arranges inflections
for display.
"""

from .exceptions import (
    ConsistencyError,
    DomainError,
    ImportedValueNotFoundError,
    UnsupportedLanguageError,
    ValidationError,
)
from .feature import Feature, FeatureKind
from .feature_registry import FeatureRegistry
from .feature_type import FeatureList, FeatureType
from .grouping import (
    InflectionGroup,
    InflectionGroupingKey,
    MemberKind,
    group_for_display,
    sort_groups,
)
from .importer import FeatureImporter
from .inflection import Inflection, InflectionRecord
from .language_models import (
    ArabicLanguageModel,
    GreekLanguageModel,
    LanguageModel,
    LanguageModelRegistry,
    LatinLanguageModel,
    default_language_registry,
)
from .lexeme import Homonym, Lemma, Lexeme, Translation

__all__ = [
    "ArabicLanguageModel",
    "ConsistencyError",
    "DomainError",
    "Feature",
    "FeatureImporter",
    "FeatureKind",
    "FeatureList",
    "FeatureRegistry",
    "FeatureType",
    "GreekLanguageModel",
    "Homonym",
    "ImportedValueNotFoundError",
    "Inflection",
    "InflectionGroup",
    "InflectionGroupingKey",
    "InflectionRecord",
    "LanguageModel",
    "LanguageModelRegistry",
    "LatinLanguageModel",
    "Lemma",
    "Lexeme",
    "MemberKind",
    "Translation",
    "UnsupportedLanguageError",
    "ValidationError",
    "default_language_registry",
    "group_for_display",
    "sort_groups",
]
