# lexis/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Validation Errors ---

class ValidationError(DomainError, ValueError):
    """Raised at construction or mutation time when a required field is empty or a value is not recognized."""
    pass

class UnsupportedLanguageError(ValidationError):
    """Raised when a language code is not known to the language model registry."""
    def __init__(self, lang_code: str):
        self.lang_code = lang_code
        super().__init__(f"Language '{lang_code}' is not supported.")

# --- Consistency Errors ---

class ConsistencyError(DomainError):
    """Raised when objects disagree with each other (e.g. a feature language differs from its inflection)."""
    pass

# --- Lookup Errors ---

class ImportedValueNotFoundError(DomainError, LookupError):
    """Raised when an importer is asked for an external value it has no mapping for."""
    def __init__(self, imported_value: str):
        self.imported_value = imported_value
        super().__init__(f"A value '{imported_value}' is not found in the importer.")
