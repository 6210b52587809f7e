# lexis\core\ports\language_support.py
from typing import Protocol, List, runtime_checkable


@runtime_checkable
class ILanguageSupport(Protocol):
    """
    Port answering "is this language code handled by the system?".

    Inflection construction consumes it to validate its `language`.
    Implementations:
    - LanguageModelRegistry (all registered language models, or a subset
      enabled through settings)
    """

    def supports_language(self, code: str) -> bool:
        """Returns True if `code` is a known language code."""
        ...

    def codes(self) -> List[str]:
        """Returns every supported language code."""
        ...
