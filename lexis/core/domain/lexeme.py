# lexis/core/domain/lexeme.py
"""
Lemma, Lexeme, Homonym and Translation entities.

These wrap inflections into the structure returned by a morphological
analyzer for one clicked word: a Homonym groups the Lexemes that share the
written form, and each Lexeme pairs a Lemma with its Inflections.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence

from ..ports.language_support import ILanguageSupport
from .exceptions import ConsistencyError, ValidationError
from .grouping import InflectionGroup, group_for_display
from .inflection import Inflection


@dataclass
class Lemma:
    """Canonical (dictionary) form of a word."""

    word: str
    language: str

    def __post_init__(self) -> None:
        if not self.word:
            raise ValidationError("Word should not be empty.")
        if not self.language:
            raise ValidationError("Language should not be empty.")

    @classmethod
    def read_object(cls, data: Mapping[str, Any]) -> "Lemma":
        return cls(data.get("word", ""), data.get("language", ""))


class Lexeme:
    """
    A unit of lexical meaning: one Lemma and its Inflections.

    Args:
        lemma: The headword.
        inflections: List of Inflection objects (may be empty).
        meaning: Optional short definition.
    """

    def __init__(self, lemma: Lemma, inflections: Sequence[Inflection], meaning: str = "") -> None:
        if not lemma:
            raise ValidationError("Lemma should not be empty.")
        if not isinstance(lemma, Lemma):
            raise ValidationError("Lemma should be of Lemma object type.")
        if inflections is None:
            raise ValidationError("Inflections data should not be empty.")
        if not isinstance(inflections, (list, tuple)):
            raise ValidationError("Inflection data should be provided in a list.")
        for inflection in inflections:
            if not isinstance(inflection, Inflection):
                raise ValidationError("All inflection data should be of Inflection object type.")

        self.lemma = lemma
        self.inflections: List[Inflection] = list(inflections)
        self.meaning = meaning

    @classmethod
    def read_object(cls, data: Mapping[str, Any], languages: Optional[ILanguageSupport] = None) -> "Lexeme":
        lemma = Lemma.read_object(data.get("lemma") or {})
        inflections = [Inflection.read_object(i, languages) for i in data.get("inflections") or []]
        return cls(lemma, inflections, data.get("meaning", ""))

    def grouped_inflections(self) -> List[InflectionGroup]:
        """The inflections of this lexeme arranged for display."""
        return group_for_display(self.inflections)

    def __repr__(self) -> str:
        return f"Lexeme({self.lemma.word!r}, inflections={len(self.inflections)})"


class Homonym:
    """
    Lexemes sharing one written form.

    Args:
        lexemes: List of Lexeme objects.
        form: The word form that produced the homonyms.
    """

    def __init__(self, lexemes: Sequence[Lexeme], form: Optional[str] = None) -> None:
        if lexemes is None:
            raise ValidationError("Lexemes data should not be empty.")
        if not isinstance(lexemes, (list, tuple)):
            raise ValidationError("Lexeme data should be provided in a list.")
        for lexeme in lexemes:
            if not isinstance(lexeme, Lexeme):
                raise ValidationError("All lexeme data should be of Lexeme object type.")

        self.lexemes: List[Lexeme] = list(lexemes)
        self.target_word = form

    @classmethod
    def read_object(cls, data: Mapping[str, Any], languages: Optional[ILanguageSupport] = None) -> "Homonym":
        lexemes = [Lexeme.read_object(lx, languages) for lx in data.get("lexemes") or []]
        return cls(lexemes, data.get("targetWord"))

    @property
    def language(self) -> str:
        """
        Language of the homonym, taken from the first lemma.

        All lemmas and inflections of one homonym are assumed to share it.
        """
        if self.lexemes:
            return self.lexemes[0].lemma.language
        raise ConsistencyError("Homonym has not been initialized properly. Unable to obtain language information.")


@dataclass
class Translation:
    """Translations of a lemma into a destination language."""

    input: str
    map: str
    translations: List[str] = field(default_factory=list)

    @classmethod
    def read_object(cls, data: Mapping[str, Any]) -> "Translation":
        return cls(data.get("in", ""), data.get("map", ""), list(data.get("translations") or []))
