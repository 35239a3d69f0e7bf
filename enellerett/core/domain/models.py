# enellerett/core/domain/models.py
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

# --- Message Templates ---

EN_MESSAGE = "En {word}\n"
ETT_MESSAGE = "Ett {word}\n"
AMBIGUOUS_MESSAGE = "En eller ett {word} beroende på kontext\n"
NOT_FOUND_MESSAGE = "Kunde inte hitta substantivet '{query}'\n"

# --- Enums ---

class Gender(str, Enum):
    """Swedish indefinite-article gender."""
    EN = "en"
    ETT = "ett"

# --- Entities ---

class LexiconEntry(BaseModel):
    """
    Classification of a single noun.

    Immutable: a hit increment produces a new entry, so a snapshot handed to
    a caller never changes underneath it.
    """
    model_config = ConfigDict(frozen=True)

    has_en: bool = False
    has_ett: bool = False
    message: str = Field(..., description="Precomputed answer, e.g. 'En stol\\n'")
    hit_count: int = Field(0, ge=0)

    @model_validator(mode="after")
    def _require_gender(self) -> "LexiconEntry":
        if not (self.has_en or self.has_ett):
            raise ValueError("LexiconEntry needs at least one of has_en / has_ett")
        return self

    @property
    def is_ambiguous(self) -> bool:
        return self.has_en and self.has_ett

    @classmethod
    def en(cls, word: str) -> "LexiconEntry":
        return cls(has_en=True, has_ett=False, message=EN_MESSAGE.format(word=word))

    @classmethod
    def ett(cls, word: str) -> "LexiconEntry":
        return cls(has_en=False, has_ett=True, message=ETT_MESSAGE.format(word=word))

    @classmethod
    def ambiguous(cls, word: str) -> "LexiconEntry":
        return cls(has_en=True, has_ett=True, message=AMBIGUOUS_MESSAGE.format(word=word))

    def with_hit(self) -> "LexiconEntry":
        return self.model_copy(update={"hit_count": self.hit_count + 1})
