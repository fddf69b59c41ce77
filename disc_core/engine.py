# disc_core/engine.py
from __future__ import annotations
from typing import Any, Dict, Mapping, Optional, Union
import logging

from .types import (
    Convention, Evaluation, ForcedChoiceSchema, LikertSchema, Selection,
)
from .errors import IncompleteInput, SchemaMismatch
from .validators import validate
from .scoring import aggregate
from .ranking import rank
from .classify import classify
from .config import DEBUG_TRACE, separator_for

log = logging.getLogger(__name__)

Schema = Union[ForcedChoiceSchema, LikertSchema]


def _int_key(key: Any) -> int:
    try:
        return int(key)
    except (TypeError, ValueError):
        raise SchemaMismatch(f"response key {key!r} is not a group or question number", key=key) from None


def _label(value: Any) -> Optional[str]:
    # non-string picks (lists, numbers) read as unanswered so the validator flags the group
    return value if isinstance(value, str) and value else None


def coerce_forced_choice(raw: Mapping[Any, Any]) -> Dict[int, Selection]:
    """Accept JSON-shaped answers ({"1": {"most": ..., "least": ...}}) as Selections."""
    out: Dict[int, Selection] = {}
    for k, v in (raw or {}).items():
        if v is None: continue
        if isinstance(v, Selection):
            out[_int_key(k)] = v; continue
        get = v.get if isinstance(v, Mapping) else (lambda name: getattr(v, name, None))
        out[_int_key(k)] = Selection(most=_label(get("most")), least=_label(get("least")))
    return out


def coerce_likert(raw: Mapping[Any, Any]) -> Dict[int, object]:
    out: Dict[int, object] = {}
    for k, v in (raw or {}).items():
        if v is None: continue
        # form posts carry "4"; anything that is not a clean integer stays as-is for the validator
        if isinstance(v, str):
            try:
                v = int(v.strip())
            except ValueError:
                pass
        out[_int_key(k)] = v
    return out


def coerce(raw: Mapping[Any, Any], schema: Schema) -> Dict[int, Any]:
    if isinstance(schema, ForcedChoiceSchema):
        return coerce_forced_choice(raw)
    return coerce_likert(raw)


def evaluate(
    responses: Mapping,
    schema: Schema,
    *,
    separator: Optional[str] = None,
    convention: Optional[Convention] = None,
) -> Evaluation:
    """Validate, aggregate, rank and classify one complete response set.

    Raises IncompleteInput when any group or question fails validation, and
    SchemaMismatch when an answer points outside the schema. The mode's own
    labelling convention and separator apply unless overridden.
    """
    mode = schema.mode
    res = validate(responses, schema)
    if not res.valid:
        raise IncompleteInput(res.missing_or_invalid)
    agg = aggregate(responses, schema)
    # high-answer counts only break ties in Likert mode
    ranked = rank(agg.scores, agg.high_counts if mode == "likert" else None)
    sep = separator if separator is not None else separator_for(mode)
    result = classify(ranked, convention or mode, sep)
    if DEBUG_TRACE:
        log.debug("mode=%s order=%s primary=%s", mode, result.type_order, result.primary_label)
    return Evaluation(mode=mode, aggregate=agg, ranked=ranked, classification=result)


__all__ = ["coerce", "coerce_forced_choice", "coerce_likert", "evaluate"]
