"""Forward form-capture submissions to an external webhook.

The form backend calls ``POST /webhook/relay`` for each new submission; we
reshape it into a small JSON envelope and POST it to ``WEBHOOK_URL``
(Zapier, Make, Airtable and friends). When no URL is configured the relay is
a logged no-op so local deployments keep working.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

import httpx

from disc_core.config import DEFAULT_FORM_NAME, RELAY_USER_AGENT, WEBHOOK_LOG_PREFIX, WEBHOOK_TIMEOUT_SEC, webhook_url

log = logging.getLogger(__name__)


def make_client() -> httpx.Client:
    return httpx.Client(timeout=WEBHOOK_TIMEOUT_SEC)


def build_envelope(submission: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "submissionId": submission.get("id") or "unknown",
        "formName": submission.get("form_name") or DEFAULT_FORM_NAME,
        "timestamp": submission.get("created_at") or datetime.now(timezone.utc).isoformat(),
        "data": submission.get("data") or {},
    }


def forward(submission: Dict[str, Any], url: Optional[str] = None) -> Tuple[int, Dict[str, Any]]:
    """Relay one submission; returns (status_code, body) for the caller to send back."""

    target = url or webhook_url()
    if not target:
        log.warning("WEBHOOK_URL environment variable not set. Skipping webhook relay.")
        return 200, {"message": "Webhook not configured. Set WEBHOOK_URL environment variable to enable."}

    payload = build_envelope(submission)
    log.info(
        "Forwarding submission to webhook: submission=%s url=%s...",
        payload["submissionId"],
        target[:WEBHOOK_LOG_PREFIX],
    )
    try:
        with make_client() as client:
            resp = client.post(
                target,
                json=payload,
                headers={"Content-Type": "application/json", "User-Agent": RELAY_USER_AGENT},
            )
            resp.raise_for_status()
    except httpx.HTTPStatusError as exc:
        log.error("Webhook responded with status: %s", exc.response.status_code)
        return 500, {
            "error": "Failed to forward submission",
            "message": f"Webhook responded with status: {exc.response.status_code}",
        }
    except httpx.HTTPError as exc:
        log.error("Error forwarding submission: %s", exc)
        return 500, {"error": "Failed to forward submission", "message": str(exc)}

    log.info("Successfully forwarded submission to webhook")
    return 200, {"message": "Submission forwarded successfully", "submissionId": payload["submissionId"]}


__all__ = ["build_envelope", "forward", "make_client"]
