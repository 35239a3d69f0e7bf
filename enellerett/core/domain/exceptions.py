# enellerett/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Startup Errors ---

class LexiconLoadError(DomainError):
    """Raised when a word list cannot be opened or read. Startup must abort."""
    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Failed to load word list '{path}': {reason}")

class EmptyLexiconError(DomainError):
    """Raised when the quiz is asked for a word but the lexicon has no entries."""
    def __init__(self):
        super().__init__("The lexicon contains no words.")

# --- Invariant Violations ---

class KeyNotFoundError(DomainError):
    """
    Raised when a key that a previous read guaranteed to exist is missing.

    This is a programmer fault, not a user error: lookup misses are reported
    as messages and never raise.
    """
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Key '{key}' is not present in the lexicon.")
