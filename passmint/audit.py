"""Generation metadata log.

Records which options were used and how strong the result scored, so usage
can be analysed without ever seeing a password.  Records go to an HTTP
endpoint, a JSON-lines file, or both.  Every sink is best-effort: a failing
sink is reported through :mod:`logging` and never raised to the caller.
"""

import json
import logging
import uuid
from collections.abc import Iterable
from datetime import datetime, timezone

import requests

from passmint import resolve_classes
from passmint.config import Config

logger = logging.getLogger(__name__)


def new_user_id() -> str:
    """Return a fresh anonymous user id."""
    return uuid.uuid4().hex


def build_record(user_id: str, length: int, classes: Iterable[str], report: dict) -> dict:
    """Build the metadata record for one generated password.

    Takes the strength *report* rather than the password itself, so the
    password has no way into the record.
    """
    return {
        "user_id": user_id,
        "length": length,
        "classes": resolve_classes(classes),
        "strength_score": report["score"],
        "created_at": datetime.now(timezone.utc).isoformat(),
    }


def _post(
    record: dict, url: str, timeout: float, session: requests.Session | None = None,
) -> None:
    http = session or requests
    resp = http.post(url, json=record, timeout=timeout)
    resp.raise_for_status()


def _append(record: dict, path: str) -> None:
    with open(path, "a", encoding="utf-8") as f:
        f.write(json.dumps(record, sort_keys=True) + "\n")


def log_generation(
    record: dict,
    *,
    config: Config | None = None,
    session: requests.Session | None = None,
) -> bool:
    """Append *record* to every configured sink.

    Returns True only if at least one sink is configured and all of them
    accepted the record.
    """
    if config is None:
        try:
            config = Config()
        except ValueError as exc:
            logger.warning("Metadata log misconfigured, record dropped: %s", exc)
            return False
    if not config.logging_enabled:
        logger.debug("No metadata sink configured, record dropped")
        return False

    ok = True

    if config.log_url:
        try:
            _post(record, config.log_url, config.log_timeout, session)
            logger.debug("Metadata record sent to %s", config.log_url)
        except requests.RequestException as exc:
            logger.warning("Could not send metadata record to %s: %s", config.log_url, exc)
            ok = False

    if config.log_file:
        try:
            _append(record, config.log_file)
            logger.debug("Metadata record appended to %s", config.log_file)
        except OSError as exc:
            logger.warning("Could not append metadata record to %s: %s", config.log_file, exc)
            ok = False

    return ok
