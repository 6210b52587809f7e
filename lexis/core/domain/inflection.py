# lexis/core/domain/inflection.py
"""
Inflection entity.

Hierarchical structure of the output of a morphological analyzer:

    Homonym (words written the same way)
        Lexeme 1 (a unit of lexical meaning)
            Lemma (headword, canonical form)
            Inflection 1
                Stem
                Suffix (ending)
            Inflection 2
                ...
        Lexeme 2
            ...

An Inflection holds one attested stem + affix combination and the
grammatical features that describe it. Features are attached per category:
each FeatureKind owns one slot holding an ordered list of Features, so that
a form can be, for instance, masculine *and* feminine at once.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..ports.language_support import ILanguageSupport
from .exceptions import ConsistencyError, UnsupportedLanguageError, ValidationError
from .feature import Feature, FeatureKind
from .language_models import default_language_registry


class InflectionRecord(BaseModel):
    """
    Plain-object form of an inflection, as found in analyzer output.
    Features are not part of this form; attach them with add_feature().
    """
    model_config = ConfigDict(extra="ignore")

    stem: str = Field(..., min_length=1)
    language: str = Field(..., min_length=1)
    suffix: Optional[str] = None
    prefix: Optional[str] = None
    example: Optional[str] = None


class Inflection:
    """
    One inflected form of a lemma.

    Attributes:
        stem: Required, non-empty.
        language: Required language code, validated against the language
            support collaborator.
        suffix, prefix, example: Optional strings (None when absent).
    """

    def __init__(
        self,
        stem: str,
        language: str,
        suffix: Optional[str] = None,
        prefix: Optional[str] = None,
        example: Optional[str] = None,
        *,
        languages: Optional[ILanguageSupport] = None,
    ) -> None:
        if not stem:
            raise ValidationError("Stem should not be empty.")
        if not language:
            raise ValidationError("Language should not be empty.")

        support = languages if languages is not None else default_language_registry()
        if not support.supports_language(language):
            raise UnsupportedLanguageError(language)

        self.stem = stem
        self.language = language
        self.suffix = suffix
        self.prefix = prefix
        self.example = example
        self._features: Dict[FeatureKind, List[Feature]] = {}

    @classmethod
    def read_object(
        cls,
        data: Mapping[str, Any],
        languages: Optional[ILanguageSupport] = None,
    ) -> "Inflection":
        """Build an Inflection from `{stem, language, suffix?, prefix?, example?}`."""
        try:
            record = InflectionRecord.model_validate(data)
        except PydanticValidationError as exc:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
            raise ValidationError(f"Invalid inflection record ({fields}): {exc.error_count()} error(s).") from exc
        return cls(
            record.stem,
            record.language,
            suffix=record.suffix,
            prefix=record.prefix,
            example=record.example,
            languages=languages,
        )

    # ------------------------------------------------------------------
    # Features
    # ------------------------------------------------------------------

    def add_feature(self, data: Union[Feature, Sequence[Feature]]) -> None:
        """
        Set the slot of one grammatical category.

        Accepts a single Feature or a list of Features of the same category
        (multi-valued attributes such as masculine + feminine). The slot
        named by the features' category is replaced, not extended.

        Raises:
            ValidationError: empty input, non-Feature items, or a list that
                mixes categories.
            ConsistencyError: a feature language differs from the
                inflection language.
        """
        if data is None or (not isinstance(data, Feature) and not data):
            raise ValidationError("Inflection feature data cannot be empty.")
        if isinstance(data, Feature):
            items: List[Any] = [data]
        elif isinstance(data, (list, tuple)):
            items = list(data)
        else:
            items = [data]

        for element in items:
            if not isinstance(element, Feature):
                raise ValidationError(f"Inflection feature data must be a Feature object, got {element!r}.")
            if element.language != self.language:
                raise ConsistencyError(
                    f'Language "{element.language}" of a feature does not match a language '
                    f'"{self.language}" of an Inflection object.'
                )

        kind = items[0].type
        mixed = [f.type.value for f in items if f.type != kind]
        if mixed:
            raise ValidationError(
                f'Features of one call must share a type; got "{kind.value}" mixed with {", ".join(mixed)}.'
            )

        self._features[kind] = items

    def get_features(self, kind: Union[str, FeatureKind]) -> Tuple[Feature, ...]:
        """Features of one category; empty tuple when the category is unset."""
        return tuple(self._features.get(FeatureKind.parse(kind), ()))

    def has_feature(self, kind: Union[str, FeatureKind]) -> bool:
        return bool(self._features.get(FeatureKind.parse(kind)))

    def feature_values(self, kind: Union[str, FeatureKind]) -> List[str]:
        """Flat list of value strings for one category."""
        return [v for f in self.get_features(kind) for v in f.values]

    @property
    def features(self) -> Dict[FeatureKind, Tuple[Feature, ...]]:
        return {kind: tuple(items) for kind, items in self._features.items()}

    def feature_match(self, kind: Union[str, FeatureKind], other: "Inflection") -> bool:
        """
        True if both inflections share at least one Feature of category `kind`.

        Used for agreement checks (e.g. same gender). False when either side
        has no feature of that category.
        """
        mine = self.get_features(kind)
        theirs = other.get_features(kind)
        return any(f == g for f in mine for g in theirs)

    # ------------------------------------------------------------------
    # Misc
    # ------------------------------------------------------------------

    @property
    def form(self) -> str:
        """Surface form: prefix + stem + suffix."""
        return f"{self.prefix or ''}{self.stem}{self.suffix or ''}"

    def __repr__(self) -> str:
        feats = "; ".join(
            f"{kind.value}={'/'.join(str(f) for f in items)}" for kind, items in self._features.items()
        )
        return f"Inflection({self.form!r}, {self.language!r}{', ' + feats if feats else ''})"


def languages_of(inflections: Iterable[Inflection]) -> List[str]:
    """Distinct languages of `inflections`, in first-seen order."""
    seen: List[str] = []
    for infl in inflections:
        if infl.language not in seen:
            seen.append(infl.language)
    return seen
