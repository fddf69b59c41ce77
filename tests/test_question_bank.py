from __future__ import annotations

import pytest

from disc_core.question_bank import (
    audit_forced_choice,
    audit_likert,
    build_forced_choice_schema,
    build_likert_schema,
    load_forced_choice_schema,
    load_likert_scale,
    load_likert_schema,
    load_raw,
)
from disc_core.types import Dimension as Dim


def test_packaged_forced_choice_bank_is_clean():
    schema = load_forced_choice_schema()
    assert schema.group_ids == list(range(1, 16))
    assert schema.lookup[1]["Decisive"] is Dim.D
    assert audit_forced_choice(load_raw("disc_items.json")) == []


def test_packaged_likert_bank_is_clean():
    schema = load_likert_schema()
    assert schema.question_ids == list(range(1, 25))
    assert [(b.dim, b.start, b.end) for b in schema.blocks] == [
        (Dim.D, 1, 6), (Dim.I, 7, 12), (Dim.S, 13, 18), (Dim.C, 19, 24),
    ]
    assert all(schema.block_for(d).size == 6 for d in Dim)
    assert audit_likert(load_raw("likert_items.json")) == []
    assert load_likert_scale()[5] == "Strongly agree"


def test_schema_is_loaded_once():
    assert load_forced_choice_schema() is load_forced_choice_schema()


def _group(gid, dims="DISC", labels=("A", "B", "C", "D")):
    return {"id": gid, "items": [{"label": l, "dim": d} for l, d in zip(labels, dims)]}


def test_group_needs_one_item_per_dimension():
    with pytest.raises(ValueError):
        build_forced_choice_schema([_group(1, dims="DDSC")])


def test_group_labels_must_be_unique():
    with pytest.raises(ValueError):
        build_forced_choice_schema([_group(1, labels=("A", "A", "B", "C"))])


def test_duplicate_group_ids_rejected():
    with pytest.raises(ValueError):
        build_forced_choice_schema([_group(1), _group(1)])


def test_overlapping_likert_blocks_rejected():
    raw = {"blocks": [
        {"dim": "D", "start": 1, "end": 6},
        {"dim": "I", "start": 6, "end": 12},
        {"dim": "S", "start": 13, "end": 18},
        {"dim": "C", "start": 19, "end": 24},
    ]}
    with pytest.raises(ValueError):
        build_likert_schema(raw)
    assert any("question 6" in p for p in audit_likert(raw))


def test_audit_reports_structural_problems():
    raw = [_group(1), _group(3, dims="DISS"), {"id": 3, "items": []}]
    problems = audit_forced_choice(raw)
    assert any("expected id 2" in p for p in problems)
    assert any("DIS" in p and "expected one each" in p for p in problems)
    assert any("duplicate id" in p for p in problems)
    assert any("0 items" in p for p in problems)


def test_audit_checks_group_count_and_block_size():
    raw = [_group(1), _group(2)]
    assert any("2 groups (expected 15)" in p for p in audit_forced_choice(raw))
    assert audit_forced_choice(raw, expected_groups=None) == []
    likert = {"blocks": [
        {"dim": "D", "start": 1, "end": 5},
        {"dim": "I", "start": 6, "end": 11},
        {"dim": "S", "start": 12, "end": 17},
        {"dim": "C", "start": 18, "end": 23},
    ]}
    problems = audit_likert(likert)
    assert problems == ["block D: 5 questions (expected 6)"]
    assert audit_likert(likert, block_size=None) == []
