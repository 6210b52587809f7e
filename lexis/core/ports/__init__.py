# lexis\core\ports\__init__.py
"""
Core Ports (Interfaces).

This package defines the Protocols that collaborators of the domain must
implement. They let the grouping engine and the entities validate input
without knowing where language data comes from.
"""

from .language_support import ILanguageSupport

__all__ = [
    "ILanguageSupport",
]
