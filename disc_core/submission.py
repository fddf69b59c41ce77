"""Hidden form-field payloads for the form-capture backend."""
from __future__ import annotations

from typing import Dict
import json

from .types import CANONICAL_ORDER, Evaluation, ScoreVector


def _vector_json(vec: ScoreVector) -> str:
    return json.dumps({d.value: int(vec[d]) for d in CANONICAL_ORDER}, separators=(",", ":"))


def forced_choice_fields(ev: Evaluation) -> Dict[str, str]:
    """score_D..score_C, primary_type, type_order and the most/least debug vector."""

    out: Dict[str, str] = {f"score_{d.value}": str(ev.scores[d]) for d in CANONICAL_ORDER}
    out["primary_type"] = ev.classification.primary_label
    out["type_order"] = ev.classification.type_order
    debug = {
        "most": {d.value: ev.aggregate.most_counts[d] for d in CANONICAL_ORDER},
        "least": {d.value: ev.aggregate.least_counts[d] for d in CANONICAL_ORDER},
    }
    out["debug_vector"] = json.dumps(debug, separators=(",", ":"))
    return out


def likert_fields(ev: Evaluation) -> Dict[str, str]:
    out: Dict[str, str] = {f"total_{d.value}": str(ev.scores[d]) for d in CANONICAL_ORDER}
    cls = ev.classification
    out["primary_style"] = cls.primary_label
    out["secondary_style"] = cls.secondary.value if cls.secondary is not None else ""
    out["style_vector"] = _vector_json(ev.scores)
    return out


def to_fields(ev: Evaluation) -> Dict[str, str]:
    if ev.mode == "likert":
        return likert_fields(ev)
    return forced_choice_fields(ev)


__all__ = ["forced_choice_fields", "likert_fields", "to_fields"]
