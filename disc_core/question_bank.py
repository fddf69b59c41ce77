from __future__ import annotations
import json, importlib.resources as ir
from functools import lru_cache
from typing import Any, Dict, List
from .config import FORCED_CHOICE_GROUPS, LIKERT_BLOCK_SIZE
from .types import Choice, Dimension, ForcedChoiceSchema, LikertBlock, LikertSchema, QuestionGroup, CANONICAL_ORDER
DIMENSIONS = [d.value for d in CANONICAL_ORDER]


def load_raw(name: str) -> Any:
    data = ir.files(__package__).joinpath(f"data/{name}").read_text(encoding="utf-8")
    return json.loads(data)


def build_forced_choice_schema(raw: List[Dict[str, Any]]) -> ForcedChoiceSchema:
    groups = []
    for r in raw:
        items = tuple(Choice(label=str(it["label"]), dim=Dimension(it["dim"])) for it in r["items"])
        groups.append(QuestionGroup(id=int(r["id"]), items=items))
    return ForcedChoiceSchema(groups=tuple(groups))


def build_likert_schema(raw: Dict[str, Any]) -> LikertSchema:
    blocks = tuple(LikertBlock(dim=Dimension(b["dim"]), start=int(b["start"]), end=int(b["end"])) for b in raw["blocks"])
    statements = {int(k): str(v) for k, v in (raw.get("statements") or {}).items()}
    return LikertSchema(blocks=blocks, statements=statements)


@lru_cache(maxsize=None)
def load_forced_choice_schema() -> ForcedChoiceSchema:
    return build_forced_choice_schema(load_raw("disc_items.json"))


@lru_cache(maxsize=None)
def load_likert_schema() -> LikertSchema:
    return build_likert_schema(load_raw("likert_items.json"))


def load_schema(mode: str):
    if mode == "forced_choice": return load_forced_choice_schema()
    if mode == "likert": return load_likert_schema()
    raise KeyError(mode)


def load_likert_scale() -> Dict[int, str]:
    return {int(k): v for k, v in (load_raw("likert_items.json").get("scale") or {}).items()}


def audit_forced_choice(raw: List[Dict[str, Any]], expected_groups: int | None = FORCED_CHOICE_GROUPS) -> List[str]:
    """Structural problems in a raw group list; empty when the bank is usable.

    Pass expected_groups=None to skip the group-count check.
    """
    problems: List[str] = []
    if expected_groups is not None and len(raw) != expected_groups:
        problems.append(f"{len(raw)} groups (expected {expected_groups})")
    seen_ids = set()
    for pos, r in enumerate(raw, start=1):
        gid = r.get("id")
        if gid in seen_ids:
            problems.append(f"group {gid}: duplicate id")
        seen_ids.add(gid)
        items = r.get("items") or []
        if len(items) != 4:
            problems.append(f"group {gid}: {len(items)} items (expected 4)")
        labels = [it.get("label") for it in items]
        if len(set(labels)) != len(labels):
            problems.append(f"group {gid}: duplicate labels")
        dims = sorted(str(it.get("dim")) for it in items)
        if dims != sorted(DIMENSIONS):
            problems.append(f"group {gid}: dimensions {''.join(dims)} (expected one each of DISC)")
        if gid != pos:
            problems.append(f"group {gid}: expected id {pos} (ids run 1..N in order)")
    return problems


def audit_likert(raw: Dict[str, Any], block_size: int | None = LIKERT_BLOCK_SIZE) -> List[str]:
    problems: List[str] = []
    blocks = raw.get("blocks") or []
    dims = sorted(str(b.get("dim")) for b in blocks)
    if dims != sorted(DIMENSIONS):
        problems.append(f"blocks cover {''.join(dims)} (expected one each of DISC)")
    covered: Dict[int, str] = {}
    for b in blocks:
        start, end = int(b.get("start", 0)), int(b.get("end", -1))
        if start < 1 or end < start:
            problems.append(f"block {b.get('dim')}: invalid range [{start},{end}]")
            continue
        if block_size is not None and end - start + 1 != block_size:
            problems.append(f"block {b.get('dim')}: {end - start + 1} questions (expected {block_size})")
        for i in range(start, end + 1):
            if i in covered:
                problems.append(f"question {i}: in blocks {covered[i]} and {b.get('dim')}")
            covered[i] = str(b.get("dim"))
    statements = {int(k) for k in (raw.get("statements") or {})}
    missing = sorted(set(covered) - statements)
    if statements and missing:
        problems.append(f"no statement text for questions {missing}")
    return problems
