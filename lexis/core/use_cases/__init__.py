# lexis\core\use_cases\__init__.py
"""
Application use cases built on the core domain.
"""

from .group_inflections import GroupInflectionsForDisplay

__all__ = ["GroupInflectionsForDisplay"]
