"""Load FAQ entries from local JSON files or a GitHub repository."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, List

from view_components.errors import InvalidConfiguration
from view_components.faq import QnA
from view_components.github_backend import GitHubBackend

logger = logging.getLogger(__name__)


def _clean_text(value: Any) -> str:
    """Return ``value`` converted to a trimmed string."""

    if isinstance(value, str):
        return value.strip()
    if value is None:
        return ""
    return str(value).strip()


def normalise_faq_entries(payload: Any) -> List[QnA]:
    """Return :class:`QnA` entries from a decoded JSON ``payload``.

    The payload is either a list of ``{"question": ..., "answer": ...}``
    objects or a mapping holding such a list under ``"entries"``. Entries with
    neither a question nor an answer are skipped.
    """

    if isinstance(payload, Mapping):
        payload = payload.get("entries")
    if not isinstance(payload, list):
        raise InvalidConfiguration("FAQ source must contain a list of entries")

    entries: List[QnA] = []
    for raw in payload:
        if not isinstance(raw, Mapping):
            raise InvalidConfiguration(f"FAQ entry must be an object, got {raw!r}")
        question = _clean_text(raw.get("question"))
        answer = _clean_text(raw.get("answer"))
        if not question and not answer:
            continue
        entries.append(QnA(question, answer))
    return entries


def load_faq_entries(path: Path) -> List[QnA]:
    """Load FAQ entries from the JSON file at ``path``."""

    with path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    entries = normalise_faq_entries(payload)
    logger.info("Loaded %d FAQ entries from %s", len(entries), path)
    return entries


def load_remote_faq_entries(backend: GitHubBackend) -> List[QnA]:
    """Load FAQ entries from the JSON file ``backend`` points at."""

    entries = normalise_faq_entries(backend.read_json())
    logger.info("Loaded %d FAQ entries from %s:%s", len(entries), backend.repo, backend.path)
    return entries


__all__ = ["load_faq_entries", "load_remote_faq_entries", "normalise_faq_entries"]
