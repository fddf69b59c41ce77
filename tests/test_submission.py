from __future__ import annotations

import json

from disc_core.engine import evaluate
from disc_core.submission import forced_choice_fields, likert_fields, to_fields
from disc_core.types import Selection


def test_forced_choice_hidden_fields(single_group):
    ev = evaluate({1: Selection(most="Decisive", least="Patient")}, single_group)
    fields = forced_choice_fields(ev)
    assert fields["score_D"] == "1"
    assert fields["score_S"] == "-1"
    assert fields["primary_type"] == "High D"
    assert fields["type_order"] == "D>I>C>S"
    debug = json.loads(fields["debug_vector"])
    assert debug == {"most": {"D": 1, "I": 0, "S": 0, "C": 0}, "least": {"D": 0, "I": 0, "S": 1, "C": 0}}
    assert to_fields(ev) == fields


def test_likert_hidden_fields(likert_schema):
    responses = {qid: 3 for qid in likert_schema.question_ids}
    for qid in range(19, 25):
        responses[qid] = 5
    ev = evaluate(responses, likert_schema)
    fields = likert_fields(ev)
    assert fields["total_C"] == "30"
    assert fields["total_D"] == "18"
    assert fields["primary_style"] == "C"
    assert fields["secondary_style"] == "D"
    assert json.loads(fields["style_vector"]) == {"D": 18, "I": 18, "S": 18, "C": 30}
    assert to_fields(ev) == fields
    assert all(isinstance(v, str) for v in fields.values())
