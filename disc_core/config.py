from __future__ import annotations
import os, json, pathlib


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


def _env_str(name: str, default: str) -> str:
    # empty string is a legitimate value (no separator), so only None falls back
    raw = os.getenv(name)
    return default if raw is None else raw


_DEFAULTS: dict[str, str] = {
    "DISC_MODE": "forced_choice",
    "FORCED_CHOICE_SEPARATOR": ">",
    "LIKERT_SEPARATOR": ">",
}

LIKERT_MIN: int = 1
LIKERT_MAX: int = 5
HIGH_ANSWER_VALUES: frozenset[int] = frozenset({4, 5})

FORCED_CHOICE_GROUPS: int = 15
LIKERT_BLOCK_SIZE: int = 6

DEFAULT_FORM_NAME: str = "disc-assessment"
RELAY_USER_AGENT: str = "DISC-Webhook-Relay/1.0"
WEBHOOK_TIMEOUT_SEC: float = 10.0
WEBHOOK_LOG_PREFIX: int = 30

SHOW_RESULTS: bool = True
DEBUG_TRACE: bool = False

# // env overrides for staging/ops; defaults remain conservative.
WEBHOOK_TIMEOUT_SEC = _env_float("WEBHOOK_TIMEOUT_SEC", WEBHOOK_TIMEOUT_SEC)
WEBHOOK_LOG_PREFIX = _env_int("WEBHOOK_LOG_PREFIX", WEBHOOK_LOG_PREFIX)
SHOW_RESULTS = _env_bool("SHOW_RESULTS", SHOW_RESULTS)
DEBUG_TRACE = _env_bool("DEBUG_TRACE", False)


def load_config() -> dict:
    """Defaults, then config.json, then env; env wins."""
    cfg = dict(_DEFAULTS)
    p = pathlib.Path("config.json")
    if p.exists():
        try: file_cfg = json.loads(p.read_text(encoding="utf-8"))
        except (OSError, ValueError): file_cfg = {}
        if isinstance(file_cfg, dict):
            cfg.update({k: str(v) for k, v in file_cfg.items() if k in _DEFAULTS})
    e = os.environ
    if e.get("DISC_MODE"): cfg["DISC_MODE"] = e["DISC_MODE"].strip()
    for k in ("FORCED_CHOICE_SEPARATOR", "LIKERT_SEPARATOR"):
        cfg[k] = _env_str(k, cfg[k])
    return cfg


# mode and separators are resolved once; scoring and /health both read these
_CFG = load_config()
DEFAULT_MODE: str = _CFG["DISC_MODE"]
FORCED_CHOICE_SEPARATOR: str = _CFG["FORCED_CHOICE_SEPARATOR"]
LIKERT_SEPARATOR: str = _CFG["LIKERT_SEPARATOR"]


def separator_for(mode: str) -> str:
    return LIKERT_SEPARATOR if mode == "likert" else FORCED_CHOICE_SEPARATOR


def webhook_url() -> str | None:
    # read per call so the relay picks up deploy-time env changes
    url = (os.getenv("WEBHOOK_URL") or "").strip()
    return url or None
