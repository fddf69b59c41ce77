from __future__ import annotations

import copy

from disc_core.types import Selection
from disc_core.validators import validate
from tests.conftest import pick


def test_complete_forced_choice_is_valid(forced_schema):
    responses = {gid: pick(forced_schema, gid, "D", "C") for gid in forced_schema.group_ids}
    res = validate(responses, forced_schema)
    assert res.valid
    assert res.missing_or_invalid == ()


def test_forced_choice_reports_every_failing_group_in_order(forced_schema):
    responses = {
        1: pick(forced_schema, 1, "D", "S"),
        2: Selection(most="Competitive"),
        3: Selection(most="Direct", least="Direct"),
        5: Selection(least="Thorough"),
    }
    res = validate(responses, forced_schema)
    assert not res.valid
    assert res.missing_or_invalid == (2, 3, 4, 5)


def test_empty_forced_choice_lists_all_groups(forced_schema):
    res = validate({}, forced_schema)
    assert res.missing_or_invalid == (1, 2, 3, 4, 5)


def test_forced_choice_validation_does_not_mutate(forced_schema):
    responses = {1: Selection(most="Decisive", least="Decisive")}
    before = copy.deepcopy(responses)
    validate(responses, forced_schema)
    assert responses == before


def test_likert_rejects_missing_and_out_of_range(likert_schema):
    responses = {qid: 3 for qid in likert_schema.question_ids}
    responses[2] = 0
    responses[9] = 6
    del responses[17]
    responses[24] = None
    res = validate(responses, likert_schema)
    assert not res.valid
    assert res.missing_or_invalid == (2, 9, 17, 24)


def test_likert_rejects_non_integer_answers(likert_schema):
    responses = {qid: 4 for qid in likert_schema.question_ids}
    responses[1] = "4"
    responses[2] = True
    responses[3] = 4.0
    res = validate(responses, likert_schema)
    assert res.missing_or_invalid == (1, 2, 3)


def test_likert_full_range_accepted(likert_schema):
    responses = {qid: (qid % 5) + 1 for qid in likert_schema.question_ids}
    assert validate(responses, likert_schema).valid
