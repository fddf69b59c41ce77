from __future__ import annotations
from fastapi import FastAPI, HTTPException, Body
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, field_validator
import logging, os, re, typing as t

# ---- Engine imports ----
from disc_core import config
from disc_core.descriptions import style_description, type_description
from disc_core.engine import coerce, evaluate
from disc_core.errors import IncompleteInput, SchemaMismatch
from disc_core.question_bank import load_likert_scale, load_schema
from disc_core.submission import to_fields
from disc_core.types import MODES, Evaluation, ForcedChoiceSchema
from disc_core.validators import validate
from . import relay

log = logging.getLogger(__name__)

app = FastAPI(title="DISC Profile API")


@app.get("/")
def root():
    return {"status": "ok", "service": "disc-profile-api"}


ALLOWED_ORIGINS = [
    o.strip() for o in os.getenv("ALLOWED_ORIGINS", "http://localhost:3000,http://localhost:8888").split(",") if o.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=False,
)

_EMAIL_RX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


# ---- Schemas ----
class CandidateInfo(BaseModel):
    full_name: str
    email: str
    role_applied_for: str

    @field_validator("full_name", "role_applied_for")
    @classmethod
    def _required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("is required")
        return v

    @field_validator("email")
    @classmethod
    def _email(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Email is required")
        if not _EMAIL_RX.match(v):
            raise ValueError("Please enter a valid email address")
        return v


class ValidateReq(BaseModel):
    responses: dict[str, t.Any] = {}


class ScoreReq(BaseModel):
    candidate: CandidateInfo
    responses: dict[str, t.Any]
    separator: str | None = None  # None -> mode default from config

    @field_validator("separator")
    @classmethod
    def _separator(cls, v: str | None) -> str | None:
        # letters or digits would make the order string ambiguous
        if v is not None and (len(v) > 2 or any(ch.isalnum() or ch.isspace() for ch in v)):
            raise ValueError("separator must be at most 2 punctuation characters")
        return v


# ---- Helpers ----
def _mode(mode: str) -> str:
    m = mode.replace("-", "_").lower()
    if m not in MODES:
        raise HTTPException(404, f"unknown mode {mode!r}")
    return m


def _serialize_schema(schema) -> dict[str, t.Any]:
    if isinstance(schema, ForcedChoiceSchema):
        return {
            "mode": schema.mode,
            "groups": [
                {"id": g.id, "items": [{"label": c.label, "dim": c.dim.value} for c in g.items]}
                for g in schema.groups
            ],
        }
    return {
        "mode": schema.mode,
        "scale": load_likert_scale(),
        "blocks": [{"dim": b.dim.value, "start": b.start, "end": b.end} for b in schema.blocks],
        "questions": [{"id": qid, "text": schema.statements.get(qid, "")} for qid in schema.question_ids],
    }


def _serialize_evaluation(ev: Evaluation) -> dict[str, t.Any]:
    cls = ev.classification
    out: dict[str, t.Any] = {
        "mode": ev.mode,
        "scores": {d.value: v for d, v in ev.scores.items()},
        "type_order": cls.type_order,
        "primary_label": cls.primary_label,
        "ranked": [{"dim": e.dim.value, "score": e.score, "high_count": e.tiebreak} for e in ev.ranked],
    }
    if cls.secondary is not None:
        out["secondary"] = cls.secondary.value
    return out


def _score(mode: str, raw: dict[str, t.Any], separator: str | None) -> Evaluation:
    schema = load_schema(mode)
    try:
        return evaluate(coerce(raw, schema), schema, separator=separator)
    except IncompleteInput as exc:
        raise HTTPException(422, {"error": "incomplete", "missing": list(exc.missing)}) from exc
    except SchemaMismatch as exc:
        log.warning("schema mismatch in %s submission: %s", mode, exc)
        raise HTTPException(400, {"error": "schema_mismatch", "message": str(exc)}) from exc


# ---- Health ----
@app.get("/health")
def health():
    return {
        "default_mode": config.DEFAULT_MODE,
        "separators": {"forced_choice": config.separator_for("forced_choice"), "likert": config.separator_for("likert")},
        "webhook_configured": config.webhook_url() is not None,
    }


# ---- Question bank ----
@app.get("/schema/{mode}")
def get_schema(mode: str):
    return _serialize_schema(load_schema(_mode(mode)))


@app.get("/schema")
def get_default_schema():
    return get_schema(config.DEFAULT_MODE)


# ---- Assessment ----
@app.post("/assessments/{mode}/validate")
def validate_responses(mode: str, req: ValidateReq):
    m = _mode(mode)
    schema = load_schema(m)
    try:
        res = validate(coerce(req.responses, schema), schema)
    except SchemaMismatch as exc:
        raise HTTPException(400, {"error": "schema_mismatch", "message": str(exc)}) from exc
    return {"valid": res.valid, "missing": list(res.missing_or_invalid)}


@app.post("/assessments/validate")
def validate_default(req: ValidateReq):
    return validate_responses(config.DEFAULT_MODE, req)


@app.post("/assessments/{mode}/score")
def score(mode: str, req: ScoreReq):
    m = _mode(mode)
    ev = _score(m, req.responses, req.separator)
    body = _serialize_evaluation(ev)
    body["candidate"] = req.candidate.model_dump()
    body["fields"] = to_fields(ev)
    if config.SHOW_RESULTS:
        cls = ev.classification
        if cls.convention == "likert":
            body["description"] = style_description(cls.primary_label)
        else:
            body["description"] = type_description(cls.primary_label)
    return body


@app.post("/assessments/score")
def score_default(req: ScoreReq):
    return score(config.DEFAULT_MODE, req)


# ---- Webhook relay ----
@app.post("/webhook/relay")
def webhook_relay(submission: dict[str, t.Any] = Body(...)):
    status, payload = relay.forward(submission)
    return JSONResponse(status_code=status, content=payload)
