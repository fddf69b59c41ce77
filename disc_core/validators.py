from __future__ import annotations
from typing import List, Mapping, Union
from .types import ForcedChoiceSchema, LikertSchema, Selection, ValidationResult
from .config import LIKERT_MIN, LIKERT_MAX


def _likert_value(raw: object) -> int | None:
    # bool is an int subclass; True must not pass as a 1
    if isinstance(raw, bool) or not isinstance(raw, int): return None
    return raw if LIKERT_MIN <= raw <= LIKERT_MAX else None


def validate_forced_choice(responses: Mapping[int, Selection], schema: ForcedChoiceSchema) -> ValidationResult:
    bad: List[int] = []
    for gid in schema.group_ids:
        sel = responses.get(gid)
        if sel is None or not sel.most or not sel.least:
            bad.append(gid); continue
        if sel.most == sel.least:
            bad.append(gid)
    return ValidationResult(valid=not bad, missing_or_invalid=tuple(bad))


def validate_likert(responses: Mapping[int, object], schema: LikertSchema) -> ValidationResult:
    bad = [qid for qid in schema.question_ids if _likert_value(responses.get(qid)) is None]
    return ValidationResult(valid=not bad, missing_or_invalid=tuple(bad))


def validate(responses: Mapping, schema: Union[ForcedChoiceSchema, LikertSchema]) -> ValidationResult:
    """Check every group or question and report all failing ids, ascending."""
    if isinstance(schema, ForcedChoiceSchema):
        return validate_forced_choice(responses, schema)
    return validate_likert(responses, schema)
