"""Showcase configuration read from Streamlit secrets."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from view_components.github_backend import GitHubBackend
from view_components.log import parse_level
from view_components.scripts import DEFAULT_SCRIPT_SOURCES, JQUERY_SCRIPT, PROTOTYPE_SCRIPT

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_FAQ_PATH = PROJECT_ROOT / "faq" / "faq_entries.json"
DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


def _ensure_mapping(value: Any) -> Dict[str, Any]:
    """Return ``value`` if it is a mapping, otherwise an empty dict."""

    return dict(value) if isinstance(value, Mapping) else {}


def _clean_text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _log_level(value: Any) -> str:
    """Return ``value`` as an upper-case level name, or the default if unknown."""

    text = _clean_text(value)
    if not text:
        return DEFAULT_LOG_LEVEL
    try:
        parse_level(text)
    except ValueError:
        logger.warning("Unknown log level %r in settings; using %s", text, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return text.upper()


@dataclass(frozen=True)
class ComponentSettings:
    """Settings used by the showcase pages."""

    log_level: str = DEFAULT_LOG_LEVEL
    faq_path: Path = DEFAULT_FAQ_PATH
    script_sources: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_SCRIPT_SOURCES))
    github: Optional[GitHubBackend] = None


def github_backend_from_mapping(github: Mapping[str, Any]) -> Optional[GitHubBackend]:
    """Return a backend for the ``[github]`` secrets table, if it is complete."""

    repo = _clean_text(github.get("repo"))
    path = _clean_text(github.get("path"))
    if not repo or not path:
        return None
    return GitHubBackend(
        repo=repo,
        path=path,
        token=_clean_text(github.get("token")) or None,
        branch=_clean_text(github.get("branch")) or "main",
        api_url=_clean_text(github.get("api_url")) or "https://api.github.com",
    )


def settings_from_mapping(
    components: Optional[Mapping[str, Any]] = None,
    github: Optional[Mapping[str, Any]] = None,
) -> ComponentSettings:
    """Build :class:`ComponentSettings` from the secrets tables."""

    components = _ensure_mapping(components)
    sources = dict(DEFAULT_SCRIPT_SOURCES)
    prototype_url = _clean_text(components.get("prototype_url"))
    if prototype_url:
        sources[PROTOTYPE_SCRIPT] = prototype_url
    jquery_url = _clean_text(components.get("jquery_url"))
    if jquery_url:
        sources[JQUERY_SCRIPT] = jquery_url

    faq_path = _clean_text(components.get("faq_path"))
    resolved_path = Path(faq_path) if faq_path else DEFAULT_FAQ_PATH
    if not resolved_path.is_absolute():
        resolved_path = PROJECT_ROOT / resolved_path

    return ComponentSettings(
        log_level=_log_level(components.get("log_level")),
        faq_path=resolved_path,
        script_sources=sources,
        github=github_backend_from_mapping(_ensure_mapping(github)),
    )


__all__ = [
    "ComponentSettings",
    "DEFAULT_FAQ_PATH",
    "github_backend_from_mapping",
    "settings_from_mapping",
]
