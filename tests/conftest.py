from __future__ import annotations

import pytest

from disc_core.question_bank import build_forced_choice_schema, build_likert_schema
from disc_core.types import ForcedChoiceSchema, LikertSchema, Selection

WORDS = {
    "D": ["Decisive", "Competitive", "Direct", "Bold", "Determined"],
    "I": ["Enthusiastic", "Persuasive", "Sociable", "Optimistic", "Outgoing"],
    "S": ["Patient", "Loyal", "Calm", "Supportive", "Consistent"],
    "C": ["Precise", "Analytical", "Systematic", "Careful", "Thorough"],
}


def build_synthetic_groups(n: int = 5) -> ForcedChoiceSchema:
    """Deterministic forced-choice bank; group k uses the k-th word of each dimension."""

    raw = []
    for gid in range(1, n + 1):
        raw.append(
            {
                "id": gid,
                "items": [
                    {"label": WORDS[dim][(gid - 1) % len(WORDS[dim])], "dim": dim}
                    for dim in ("D", "I", "S", "C")
                ],
            }
        )
    return build_forced_choice_schema(raw)


def build_synthetic_likert(block_size: int = 6) -> LikertSchema:
    blocks = []
    for pos, dim in enumerate(("D", "I", "S", "C")):
        start = pos * block_size + 1
        blocks.append({"dim": dim, "start": start, "end": start + block_size - 1})
    return build_likert_schema({"blocks": blocks})


def pick(schema: ForcedChoiceSchema, gid: int, most: str, least: str) -> Selection:
    """Selection by dimension letters, resolved to the group's labels."""

    by_dim = {dim.value: label for label, dim in schema.lookup[gid].items()}
    return Selection(most=by_dim[most], least=by_dim[least])


@pytest.fixture
def single_group() -> ForcedChoiceSchema:
    return build_synthetic_groups(1)


@pytest.fixture
def forced_schema() -> ForcedChoiceSchema:
    return build_synthetic_groups(5)


@pytest.fixture
def likert_schema() -> LikertSchema:
    return build_synthetic_likert(6)
