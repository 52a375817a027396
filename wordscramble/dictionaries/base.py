from __future__ import annotations
from typing import Dict, Type

# ---- Global dictionary registry ----
REGISTRY: Dict[str, Type["BaseDictionary"]] = {}


def register(cls: Type["BaseDictionary"]) -> Type["BaseDictionary"]:
    """
    Decorator: @register on a dictionary class adds it to REGISTRY by its `id`.
    """
    did = getattr(cls, "id", None)
    if not did:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if did in REGISTRY:
        raise ValueError(f"Duplicate dictionary id: {did}")
    REGISTRY[did] = cls
    return cls


# ---- Base class that dictionaries inherit ----
class BaseDictionary:
    id = "base"
    name = "Base"

    def is_real_word(self, word: str, language: str) -> bool:
        raise NotImplementedError("Override in subclass")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"
