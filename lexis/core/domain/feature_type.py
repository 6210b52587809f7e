# lexis/core/domain/feature_type.py
"""
Feature type definitions.

A FeatureType describes one grammatical category for one language: the
values it admits and the order in which those values are sorted and
grouped for display. It also acts as a Feature generator.

Sort order
----------
The order of `values` given at construction is the default sort order.
Values that should share a rank are wrapped in a nested list:

    FeatureType(FeatureKind.GENDER, [["masculine", "feminine"], "neuter"], "lat")

Here masculine and feminine both get rank 0 and neuter gets rank 1. The
order can later be changed with `set_order()` (or `order = ...`), which only
accepts Features that are already registered on this type.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Sequence, Union

from .exceptions import ConsistencyError, ValidationError
from .feature import Feature, FeatureKind
from .importer import FeatureImporter


OrderEntry = Union[str, List[str]]


class FeatureType:
    """
    Registry of the legal values of one grammatical category in one language.

    Attributes:
        type: The FeatureKind this registry describes.
        language: Language code shared by every Feature it generates.
    """

    def __init__(
        self,
        type: Union[str, FeatureKind],
        values: Sequence[Union[str, Sequence[str]]],
        language: str,
    ) -> None:
        self.type = FeatureKind.parse(type)
        if values is None or not isinstance(values, (list, tuple)):
            raise ValidationError("Values should be a list (or an empty list) of values.")
        if not language:
            raise ValidationError("FeatureType constructor requires a language.")
        self.language = language

        self._features: Dict[str, Feature] = {}
        self._order_index: List[OrderEntry] = []
        self._order_lookup: Dict[str, int] = {}
        self._importers: Dict[str, FeatureImporter] = {}

        for index, entry in enumerate(values):
            if isinstance(entry, (list, tuple)):
                if not entry:
                    raise ValidationError(f"A group of co-equal values at position {index} should not be empty.")
                group = [str(v) for v in entry]
                for element in group:
                    self._register(element, index)
                self._order_index.append(group)
            else:
                self._register(entry, index)
                self._order_index.append(entry)

    def _register(self, value: str, index: int) -> None:
        self._features[value] = Feature(value, self.type, self.language)
        self._order_lookup[value] = index

    # ------------------------------------------------------------------
    # Feature generation
    # ------------------------------------------------------------------

    def get(self, value: Union[str, Sequence[str]], sort_order: Optional[int] = None) -> Feature:
        """
        Return a Feature of this type with an arbitrary value.

        The value does not have to be registered; this is how open-ended
        categories such as footnotes produce their features.
        """
        if not value:
            raise ValidationError("A non-empty value should be provided.")
        return Feature(value, self.type, self.language, sort_order=sort_order)

    def __getitem__(self, value: str) -> Feature:
        return self._features[value]

    def __contains__(self, value: object) -> bool:
        return value in self._features

    def __iter__(self) -> Iterator[Feature]:
        return iter(self._features.values())

    def add_importer(self, name: str) -> FeatureImporter:
        """Return the importer called `name`, creating it on first use."""
        if not name:
            raise ValidationError("Importer should have a non-empty name.")
        if name not in self._importers:
            self._importers[name] = FeatureImporter()
        return self._importers[name]

    def importer(self, name: str) -> Optional[FeatureImporter]:
        return self._importers.get(name)

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    @property
    def ordered_values(self) -> List[OrderEntry]:
        """
        Values in sort order. Co-equal values come back as a nested list,
        e.g. [["masculine", "feminine"], "neuter"].
        """
        return [list(e) if isinstance(e, list) else e for e in self._order_index]

    @property
    def ordered_features(self) -> List[Feature]:
        """Same as ordered_values but as Features; co-equal groups become multi-valued Features."""
        return [Feature(v, self.type, self.language) for v in self.ordered_values]

    @property
    def order_lookup(self) -> Dict[str, int]:
        """Value -> rank. Co-equal values share a rank."""
        return dict(self._order_lookup)

    @property
    def order(self) -> List[OrderEntry]:
        return self.ordered_values

    @order.setter
    def order(self, values: Union[Feature, Sequence[Union[Feature, Sequence[Feature]]]]) -> None:
        self.set_order(values)

    def set_order(self, values: Union[Feature, Sequence[Union[Feature, Sequence[Feature]]]]) -> None:
        """
        Replace the sort order.

        Args:
            values: A Feature, or a list whose entries are Features or lists
                of Features sharing one rank, e.g.
                [[gender["masculine"], gender["feminine"]], gender["neuter"]].

        Raises:
            ValidationError: if the list is empty or holds non-Features.
            ConsistencyError: if a Feature is not registered on this type,
                or its type or language differ.
        """
        if isinstance(values, Feature):
            values = [values]
        if not values:
            raise ValidationError("A non-empty list of values should be provided.")

        for entry in values:
            group = entry if isinstance(entry, (list, tuple)) else [entry]
            for element in group:
                self._check_orderable(element)

        self._order_lookup = {}
        self._order_index = []
        for index, entry in enumerate(values):
            if isinstance(entry, (list, tuple)):
                elements = []
                for element in entry:
                    self._order_lookup[element.value] = index
                    elements.append(element.value)
                self._order_index.append(elements)
            else:
                self._order_lookup[entry.value] = index
                self._order_index.append(entry.value)

    def _check_orderable(self, element: object) -> None:
        if not isinstance(element, Feature):
            raise ValidationError(f"Only Feature objects can be ordered, got {element!r}.")
        if element.type != self.type:
            raise ConsistencyError(
                f'Trying to order an element with type "{element.type.value}" '
                f'that is different from "{self.type.value}".'
            )
        if element.language != self.language:
            raise ConsistencyError(
                f'Trying to order an element with language "{element.language}" '
                f'that is different from "{self.language}".'
            )
        if element.is_multiple or element.value not in self._features:
            raise ConsistencyError(
                f'Trying to order an element with "{element}" value '
                f'that is not stored in a "{self.type.value}" type.'
            )

    def __repr__(self) -> str:
        return f"FeatureType(type={self.type.value!r}, language={self.language!r}, values={self._order_index!r})"


class FeatureList:
    """
    Ordered list of FeatureTypes with lookup by category.

    Used to describe which categories characterize a language unit, e.g. the
    columns of an inflection table.
    """

    def __init__(self, features: Optional[Sequence[FeatureType]] = None) -> None:
        self._features: List[FeatureType] = []
        self._types: Dict[FeatureKind, FeatureType] = {}
        self.add(features if features is not None else [])

    def add(self, features: Sequence[FeatureType]) -> None:
        if features is None or not isinstance(features, (list, tuple)):
            raise ValidationError("Features must be defined and must come in a list.")
        for feature in features:
            if not isinstance(feature, FeatureType):
                raise ValidationError(f"FeatureList accepts FeatureType objects only, got {feature!r}.")
            self._features.append(feature)
            self._types[feature.type] = feature

    @property
    def items(self) -> List[FeatureType]:
        return list(self._features)

    def __iter__(self) -> Iterator[FeatureType]:
        return iter(self._features)

    def __len__(self) -> int:
        return len(self._features)

    def of_type(self, kind: Union[str, FeatureKind]) -> Optional[FeatureType]:
        return self._types.get(FeatureKind.parse(kind))

    def has_type(self, kind: Union[str, FeatureKind]) -> bool:
        return FeatureKind.parse(kind) in self._types

