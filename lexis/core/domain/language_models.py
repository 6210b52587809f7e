# lexis/core/domain/language_models.py
"""
Language models and the registry that maps language codes to them.

A language model carries the script-level behaviour of a source language:
text direction, whether words are space separated, which punctuation
delimits words, and how a word is normalized for comparison. It does not
enumerate grammatical feature values; those live in a FeatureRegistry.

Models register themselves under the codes they handle:

    @register_language_model(LANG_CODE_LAT, LANG_CODE_LA)
    class LatinLanguageModel(LanguageModel):
        ...

`LanguageModelRegistry` is the object handed to inflections (it implements
the ILanguageSupport port). It can expose every registered model or only a
configured subset.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Type

import structlog

from .constants import (
    DEFAULT_PUNCTUATION,
    LANG_CODE_AR,
    LANG_CODE_ARA,
    LANG_CODE_GRC,
    LANG_CODE_LA,
    LANG_CODE_LAT,
    BaseUnit,
    LanguageId,
    TextDirection,
)
from .exceptions import UnsupportedLanguageError, ValidationError

logger = structlog.get_logger()


# ---------------------------------------------------------------------------
# Base model
# ---------------------------------------------------------------------------


class LanguageModel:
    """
    Base class for language-specific behaviour.

    Subclasses set `source_language` and `codes` and override the hooks
    below where the language differs from the defaults.
    """

    source_language: Optional[LanguageId] = None
    codes: Tuple[str, ...] = ()
    direction: TextDirection = TextDirection.LTR
    base_unit: BaseUnit = BaseUnit.WORD
    context_forward: int = 0
    context_backward: int = 0

    def can_inflect(self) -> bool:
        """Whether an inflection table can be produced for this language."""
        return False

    def normalize_word(self, word: str) -> str:
        """Return a form of `word` suitable for equality comparison."""
        return word

    @property
    def punctuation(self) -> str:
        return DEFAULT_PUNCTUATION

    def to_code(self) -> Optional[str]:
        """Preferred language code of this model."""
        return self.codes[0] if self.codes else None

    def supports_code(self, code: str) -> bool:
        return code in self.codes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LanguageModel):
            return NotImplemented
        return self.source_language == other.source_language

    def __hash__(self) -> int:
        return hash(self.source_language)

    def __str__(self) -> str:
        return self.source_language.value if self.source_language else ""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(codes={self.codes!r})"


# ---------------------------------------------------------------------------
# Model registry
# ---------------------------------------------------------------------------

MODEL_REGISTRY: Dict[str, Type[LanguageModel]] = {}
"""
Mapping of language code -> LanguageModel subclass.

Example keys: "lat", "la", "grc", "ara", "ar".
"""


def register_language_model(*codes: str) -> Callable[[Type[LanguageModel]], Type[LanguageModel]]:
    """
    Class decorator registering a LanguageModel subclass under one or more
    language codes. The first code becomes the model's preferred code.
    """
    if not codes:
        raise ValueError("At least one language code is required")

    def decorator(cls: Type[LanguageModel]) -> Type[LanguageModel]:
        if not issubclass(cls, LanguageModel):
            raise TypeError("Only LanguageModel subclasses can be registered")

        for code in codes:
            if code in MODEL_REGISTRY:
                raise ValueError(f"Language model already registered for code '{code}'")
            MODEL_REGISTRY[code] = cls
        cls.codes = tuple(codes)
        return cls

    return decorator


# ---------------------------------------------------------------------------
# Concrete models
# ---------------------------------------------------------------------------


@register_language_model(LANG_CODE_LAT, LANG_CODE_LA)
class LatinLanguageModel(LanguageModel):
    source_language = LanguageId.LATIN

    def can_inflect(self) -> bool:
        return True


@register_language_model(LANG_CODE_GRC)
class GreekLanguageModel(LanguageModel):
    source_language = LanguageId.GREEK

    def can_inflect(self) -> bool:
        return True


# Stages applied by ArabicLanguageModel.alternate_word_encodings, in order.
_ARABIC_STAGES: Tuple[Tuple[str, "re.Pattern[str]", str], ...] = (
    # tanwin (fathatan, dammatan, kasratan) and tatweel
    ("tanwin", re.compile("[\u064B\u064C\u064D\u0640]"), ""),
    # alef with madda / hamza above / hamza below -> bare alef
    ("hamza", re.compile("[\u0622\u0623\u0625]"), "\u0627"),
    # harakat: fatha, damma, kasra, superscript alef, alef wasla
    ("harakat", re.compile("[\u064E\u064F\u0650\u0670\u0671]"), ""),
    ("shadda", re.compile("\u0651"), ""),
    ("sukun", re.compile("\u0652"), ""),
    ("alef", re.compile("\u0627"), ""),
)


@register_language_model(LANG_CODE_ARA, LANG_CODE_AR)
class ArabicLanguageModel(LanguageModel):
    source_language = LanguageId.ARABIC
    direction = TextDirection.RTL

    def alternate_word_encodings(self, word: str) -> List[str]:
        """
        Progressively less vocalized spellings of `word`.

        Each stage strips one more class of marks from the result of the
        previous stage; a stage is emitted only if it changed something.
        Used to retry a dictionary lookup when the fully vocalized form
        is not found.
        """
        alternates: List[str] = []
        current = word
        for _name, pattern, replacement in _ARABIC_STAGES:
            stripped = pattern.sub(replacement, current)
            if stripped != current:
                alternates.append(stripped)
            current = stripped
        return alternates


# ---------------------------------------------------------------------------
# Registry object (ILanguageSupport)
# ---------------------------------------------------------------------------


class LanguageModelRegistry:
    """
    Instance-level view of the registered language models.

    Args:
        enabled_codes: Optional subset of codes to expose. Empty or None
            means every registered code.
    """

    def __init__(self, enabled_codes: Optional[Iterable[str]] = None) -> None:
        codes = list(enabled_codes or [])
        unknown = [c for c in codes if c not in MODEL_REGISTRY]
        if unknown:
            raise ValidationError(f"Cannot enable unregistered language codes: {', '.join(unknown)}.")

        self._models: Dict[str, Type[LanguageModel]] = {
            code: cls for code, cls in MODEL_REGISTRY.items() if not codes or code in codes
        }
        logger.debug("language_registry_built", codes=list(self._models))

    def supports_language(self, code: str) -> bool:
        return code in self._models

    def codes(self) -> List[str]:
        return list(self._models)

    def get_model(self, code: str) -> LanguageModel:
        """
        Instantiate the model handling `code`.

        Raises:
            UnsupportedLanguageError: if the code is unknown or not enabled.
        """
        try:
            cls = self._models[code]
        except KeyError as exc:
            raise UnsupportedLanguageError(code) from exc
        return cls()


_DEFAULT_REGISTRY: Optional[LanguageModelRegistry] = None


def default_language_registry() -> LanguageModelRegistry:
    """
    Registry over every registered model.

    Rebuilt when a model has been registered since the last call.
    """
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None or _DEFAULT_REGISTRY.codes() != list(MODEL_REGISTRY):
        _DEFAULT_REGISTRY = LanguageModelRegistry()
    return _DEFAULT_REGISTRY
