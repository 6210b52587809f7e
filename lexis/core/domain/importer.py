# lexis/core/domain/importer.py
"""
Mapping table from values found in external data (analyzer output,
dictionary files) to the library's canonical feature values.

    importer = FeatureImporter()
    importer.map("nom", "nominative").map("acc", "accusative")
    importer.get("nom")  # -> "nominative"
"""

from __future__ import annotations

from typing import Any, Dict

from .exceptions import ImportedValueNotFoundError, ValidationError


class FeatureImporter:
    def __init__(self) -> None:
        self._hash: Dict[str, Any] = {}

    def map(self, imported_value: str, library_value: Any) -> "FeatureImporter":
        """
        Map an external value to one or more library values.

        An existing mapping for `imported_value` is overwritten.
        """
        if not imported_value:
            raise ValidationError("Imported value should not be empty.")
        if not library_value:
            raise ValidationError("Library value should not be empty.")
        self._hash[imported_value] = library_value
        return self

    def has(self, imported_value: str) -> bool:
        return imported_value in self._hash

    def get(self, imported_value: str) -> Any:
        try:
            return self._hash[imported_value]
        except KeyError as exc:
            raise ImportedValueNotFoundError(imported_value) from exc

    def __contains__(self, imported_value: object) -> bool:
        return imported_value in self._hash

    def __len__(self) -> int:
        return len(self._hash)
