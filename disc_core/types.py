from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Optional, Tuple, Literal

Mode = Literal["forced_choice", "likert"]
Convention = Literal["forced_choice", "likert"]
MODES: Tuple[str, ...] = ("forced_choice", "likert")


class Dimension(str, Enum):
    D = "D"
    I = "I"
    S = "S"
    C = "C"

    @property
    def canonical_index(self) -> int:
        return CANONICAL_ORDER.index(self)


CANONICAL_ORDER: Tuple[Dimension, ...] = (Dimension.D, Dimension.I, Dimension.S, Dimension.C)
ScoreVector = Dict[Dimension, int]


def zero_vector() -> ScoreVector:
    return {d: 0 for d in CANONICAL_ORDER}


@dataclass(frozen=True)
class Choice:
    label: str; dim: Dimension


@dataclass(frozen=True)
class QuestionGroup:
    id: int
    items: Tuple[Choice, ...]

    def __post_init__(self):
        if len(self.items) != 4:
            raise ValueError(f"group {self.id}: expected 4 items, got {len(self.items)}")
        labels = [c.label for c in self.items]
        if len(set(labels)) != 4:
            raise ValueError(f"group {self.id}: labels must be unique")
        if {c.dim for c in self.items} != set(CANONICAL_ORDER):
            raise ValueError(f"group {self.id}: needs exactly one item per dimension")

    def label_map(self) -> Dict[str, Dimension]:
        return {c.label: c.dim for c in self.items}


@dataclass(frozen=True)
class LikertBlock:
    dim: Dimension; start: int; end: int

    def __post_init__(self):
        if self.start < 1 or self.end < self.start:
            raise ValueError(f"block {self.dim.value}: invalid range [{self.start},{self.end}]")

    @property
    def size(self) -> int:
        return self.end - self.start + 1

    def indices(self) -> range:
        return range(self.start, self.end + 1)


@dataclass(frozen=True)
class ForcedChoiceSchema:
    """Immutable group definitions plus the label->dimension lookup per group.

    The lookup is built once at construction so scoring never searches the
    group items by label.
    """
    groups: Tuple[QuestionGroup, ...]
    lookup: Mapping[int, Mapping[str, Dimension]] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        ids = [g.id for g in self.groups]
        if len(set(ids)) != len(ids):
            raise ValueError("duplicate group ids")
        object.__setattr__(self, "lookup", {g.id: g.label_map() for g in self.groups})

    @property
    def mode(self) -> str:
        return "forced_choice"

    @property
    def group_ids(self) -> List[int]:
        return sorted(self.lookup)


@dataclass(frozen=True)
class LikertSchema:
    blocks: Tuple[LikertBlock, ...]
    statements: Mapping[int, str] = field(default_factory=dict, compare=False)
    index_to_dim: Mapping[int, Dimension] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if sorted(b.dim for b in self.blocks) != sorted(CANONICAL_ORDER):
            raise ValueError("likert schema needs exactly one block per dimension")
        idx: Dict[int, Dimension] = {}
        for b in self.blocks:
            for i in b.indices():
                if i in idx:
                    raise ValueError(f"question {i} appears in more than one block")
                idx[i] = b.dim
        object.__setattr__(self, "index_to_dim", idx)

    @property
    def mode(self) -> str:
        return "likert"

    @property
    def question_ids(self) -> List[int]:
        return sorted(self.index_to_dim)

    def block_for(self, dim: Dimension) -> LikertBlock:
        return next(b for b in self.blocks if b.dim == dim)


@dataclass(frozen=True)
class Selection:
    most: Optional[str] = None
    least: Optional[str] = None


ForcedChoiceResponses = Mapping[int, Selection]
LikertResponses = Mapping[int, object]


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    missing_or_invalid: Tuple[int, ...] = ()


@dataclass(frozen=True)
class Aggregate:
    scores: ScoreVector
    high_counts: ScoreVector
    most_counts: ScoreVector = field(default_factory=zero_vector)
    least_counts: ScoreVector = field(default_factory=zero_vector)


@dataclass(frozen=True)
class RankedEntry:
    dim: Dimension; score: int; tiebreak: int


RankedResult = Tuple[RankedEntry, ...]


@dataclass(frozen=True)
class ClassificationResult:
    primary_label: str
    type_order: str
    raw_vector: ScoreVector
    convention: Convention
    secondary: Optional[Dimension] = None


@dataclass(frozen=True)
class Evaluation:
    mode: Mode
    aggregate: Aggregate
    ranked: RankedResult
    classification: ClassificationResult

    @property
    def scores(self) -> ScoreVector:
        return self.aggregate.scores
