from __future__ import annotations
from .types import CANONICAL_ORDER, ClassificationResult, Convention, RankedResult

BALANCED = "Balanced"


def type_order(ranked: RankedResult, separator: str = ">") -> str:
    return separator.join(e.dim.value for e in ranked)


def forced_choice_label(ranked: RankedResult) -> str:
    """Label from raw top-score ties: one leader gives "High X", 2-3 give letters, 4 give Balanced."""
    top = ranked[0].score
    tied = [e.dim.value for e in ranked if e.score == top]
    if len(tied) == 1:
        return f"High {tied[0]}"
    if len(tied) == len(CANONICAL_ORDER):
        return BALANCED
    return "".join(tied)


def classify(ranked: RankedResult, convention: Convention = "forced_choice", separator: str = ">") -> ClassificationResult:
    if len(ranked) != 4 or {e.dim for e in ranked} != set(CANONICAL_ORDER):
        raise ValueError("ranked result must be a permutation of D, I, S, C")
    vector = {d: 0 for d in CANONICAL_ORDER}
    for e in ranked:
        vector[e.dim] = e.score
    order = type_order(ranked, separator)
    if convention == "forced_choice":
        return ClassificationResult(primary_label=forced_choice_label(ranked), type_order=order,
                                    raw_vector=vector, convention=convention)
    if convention == "likert":
        # ranker already broke every tie, so no collapsing here
        return ClassificationResult(primary_label=ranked[0].dim.value, type_order=order,
                                    raw_vector=vector, convention=convention, secondary=ranked[1].dim)
    raise ValueError(f"unknown convention {convention!r}")
