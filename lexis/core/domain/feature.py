# lexis/core/domain/feature.py
"""
Grammatical feature value objects.

A Feature is a single grammatical attribute attached to an inflection,
e.g. ("nominative", case, "lat"). Some features legitimately carry more
than one value at once (a form that is both masculine and feminine); those
are stored as a tuple of strings and compared element-wise.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Tuple, Union

from .exceptions import ValidationError


FeatureValue = Union[str, Tuple[str, ...]]


class FeatureKind(str, Enum):
    """Closed set of grammatical categories a Feature may belong to."""
    PART = "part of speech"
    NUMBER = "number"
    CASE = "case"
    DECLENSION = "declension"
    GENDER = "gender"
    TYPE = "type"  # verb type: regular / irregular
    CONJUGATION = "conjugation"
    COMPARISON = "comparison"
    TENSE = "tense"
    VOICE = "voice"
    MOOD = "mood"
    PERSON = "person"
    FREQUENCY = "frequency"
    MEANING = "meaning"
    SOURCE = "source"
    FOOTNOTE = "footnote"
    DIALECT = "dialect"
    SORT = "sort"
    WORD = "word"

    @classmethod
    def is_allowed(cls, value: object) -> bool:
        try:
            cls(value)
        except ValueError:
            return False
        return True

    @classmethod
    def parse(cls, value: Union[str, "FeatureKind"]) -> "FeatureKind":
        """
        Return the FeatureKind matching `value` (a member or its tag string).

        Raises:
            ValidationError: if the tag is not a recognized category.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as exc:
            raise ValidationError(f'Features of "{value}" type are not supported.') from exc


def _freeze_value(value: Union[str, Sequence[str]]) -> FeatureValue:
    if isinstance(value, str):
        if not value:
            raise ValidationError("Feature should have a non-empty value.")
        return value
    if isinstance(value, (list, tuple)):
        if len(value) == 0:
            raise ValidationError("Feature should have a non-empty value.")
        for element in value:
            if not isinstance(element, str) or not element:
                raise ValidationError(
                    f"Every value of a multi-valued feature must be a non-empty string, got {element!r}."
                )
        return tuple(value)
    if not value:
        raise ValidationError("Feature should have a non-empty value.")
    raise ValidationError(f"Feature value must be a string or a sequence of strings, got {type(value).__name__}.")


@dataclass(frozen=True)
class Feature:
    """
    Immutable (value, type, language) triple.

    Attributes:
        value:
            A single value string, or a tuple of strings for multi-valued
            features. Lists are accepted and frozen into tuples.
        type:
            The grammatical category. Tag strings such as "case" are
            converted to FeatureKind.
        language:
            Language code of the feature (e.g. "lat").
        sort_order:
            Optional rank used when ordering groups for display. Not part of
            equality.
    """

    value: FeatureValue
    type: FeatureKind
    language: str
    sort_order: Optional[int] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        # Type before value before language.
        if not self.type:
            raise ValidationError("Feature should have a non-empty type.")
        object.__setattr__(self, "type", FeatureKind.parse(self.type))
        object.__setattr__(self, "value", _freeze_value(self.value))
        if not isinstance(self.language, str) or not self.language:
            raise ValidationError("Feature constructor requires a language.")
        if self.sort_order is not None and (
            isinstance(self.sort_order, bool) or not isinstance(self.sort_order, int)
        ):
            raise ValidationError(f"Feature sort order must be an integer, got {self.sort_order!r}.")

    @property
    def values(self) -> Tuple[str, ...]:
        """All values as a tuple, one element for single-valued features."""
        if isinstance(self.value, tuple):
            return self.value
        return (self.value,)

    @property
    def is_multiple(self) -> bool:
        return isinstance(self.value, tuple)

    def has_value(self, value: str) -> bool:
        return value in self.values

    def is_equal(self, other: "Feature") -> bool:
        """Structural equality on value (element-wise), type and language."""
        return self == other

    def __str__(self) -> str:
        return ",".join(self.values)
