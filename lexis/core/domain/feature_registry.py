# lexis/core/domain/feature_registry.py
"""
Explicit container for the FeatureTypes of one or more languages.

Instead of hanging FeatureTypes off per-language singletons, callers build a
FeatureRegistry once (at startup, or per test) and pass it to whatever needs
to sort or generate features. Several registries can coexist.

    registry = FeatureRegistry()
    registry.register(FeatureType(FeatureKind.CASE, ["nominative", "genitive"], "lat"))
    registry.get("lat", FeatureKind.CASE).get("nominative")
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple, Union

from .exceptions import ConsistencyError, ValidationError
from .feature import FeatureKind
from .feature_type import FeatureList, FeatureType


class FeatureRegistry:
    def __init__(self, feature_types: Optional[Iterable[FeatureType]] = None) -> None:
        self._types: Dict[Tuple[str, FeatureKind], FeatureType] = {}
        for ft in feature_types or []:
            self.register(ft)

    def register(self, feature_type: FeatureType) -> FeatureType:
        """Add (or replace) the FeatureType for its language and category."""
        if not isinstance(feature_type, FeatureType):
            raise ValidationError(f"Only FeatureType objects can be registered, got {feature_type!r}.")
        self._types[(feature_type.language, feature_type.type)] = feature_type
        return feature_type

    def find(self, language: str, kind: Union[str, FeatureKind]) -> Optional[FeatureType]:
        return self._types.get((language, FeatureKind.parse(kind)))

    def get(self, language: str, kind: Union[str, FeatureKind]) -> FeatureType:
        feature_type = self.find(language, kind)
        if feature_type is None:
            raise ConsistencyError(
                f'No "{FeatureKind.parse(kind).value}" feature type is registered for language "{language}".'
            )
        return feature_type

    def for_language(self, language: str) -> FeatureList:
        return FeatureList([ft for (lang, _), ft in self._types.items() if lang == language])

    def languages(self) -> List[str]:
        seen: List[str] = []
        for lang, _ in self._types:
            if lang not in seen:
                seen.append(lang)
        return seen

    def __contains__(self, key: object) -> bool:
        return key in self._types

    def __len__(self) -> int:
        return len(self._types)
