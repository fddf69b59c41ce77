from __future__ import annotations
from typing import Mapping, Union
import logging

from .types import (
    Aggregate, Dimension, ForcedChoiceSchema, LikertSchema, Selection, zero_vector,
)
from .errors import IncompleteInput, SchemaMismatch
from .config import DEBUG_TRACE, HIGH_ANSWER_VALUES
from .validators import _likert_value

log = logging.getLogger(__name__)


def _dim_for(schema: ForcedChoiceSchema, gid: int, label: str) -> Dimension:
    labels = schema.lookup[gid]
    try:
        return labels[label]
    except (KeyError, TypeError):
        raise SchemaMismatch(f"group {gid}: unknown label {label!r}", key=(gid, label)) from None


def aggregate_forced_choice(responses: Mapping[int, Selection], schema: ForcedChoiceSchema) -> Aggregate:
    """+1 for each "most" pick, -1 for each "least" pick.

    Absent answers contribute nothing; answers naming a group or label the
    schema does not define raise SchemaMismatch.
    """
    scores = zero_vector(); most = zero_vector(); least = zero_vector()
    unknown = sorted(gid for gid in responses if gid not in schema.lookup)
    if unknown:
        raise SchemaMismatch(f"unknown group id {unknown[0]}", key=unknown[0])
    for gid in schema.group_ids:
        sel = responses.get(gid)
        if sel is None: continue
        if sel.most:
            d = _dim_for(schema, gid, sel.most)
            scores[d] += 1; most[d] += 1
        if sel.least:
            d = _dim_for(schema, gid, sel.least)
            scores[d] -= 1; least[d] += 1
        if DEBUG_TRACE:
            log.debug("group=%s most=%s least=%s scores=%s", gid, sel.most, sel.least,
                      {k.value: v for k, v in scores.items()})
    return Aggregate(scores=scores, high_counts=zero_vector(), most_counts=most, least_counts=least)


def aggregate_likert(responses: Mapping[int, object], schema: LikertSchema) -> Aggregate:
    scores = zero_vector(); highs = zero_vector()
    unknown = sorted(qid for qid in responses if qid not in schema.index_to_dim)
    if unknown:
        raise SchemaMismatch(f"unknown question index {unknown[0]}", key=unknown[0])
    for block in schema.blocks:
        for qid in block.indices():
            raw = responses.get(qid)
            if raw is None: continue
            v = _likert_value(raw)
            if v is None:
                raise IncompleteInput([qid])
            scores[block.dim] += v
            if v in HIGH_ANSWER_VALUES:
                highs[block.dim] += 1
    if DEBUG_TRACE:
        log.debug("likert scores=%s high=%s", {k.value: v for k, v in scores.items()},
                  {k.value: v for k, v in highs.items()})
    return Aggregate(scores=scores, high_counts=highs)


def aggregate(responses: Mapping, schema: Union[ForcedChoiceSchema, LikertSchema]) -> Aggregate:
    if isinstance(schema, ForcedChoiceSchema):
        return aggregate_forced_choice(responses, schema)
    return aggregate_likert(responses, schema)
