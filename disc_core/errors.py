from __future__ import annotations
from typing import Iterable, Tuple


class DiscError(ValueError):
    """Base for scoring errors surfaced to callers."""


class IncompleteInput(DiscError):
    def __init__(self, missing: Iterable[int]):
        self.missing: Tuple[int, ...] = tuple(missing)
        super().__init__(f"incomplete or invalid answers for: {', '.join(str(m) for m in self.missing)}")


class SchemaMismatch(DiscError):
    # answer references a group, label or question index the schema does not define
    def __init__(self, message: str, *, key: object = None):
        self.key = key
        super().__init__(message)


__all__ = ["DiscError", "IncompleteInput", "SchemaMismatch"]
