"""Collects script includes and inline script text for a rendered page."""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape as html_escape
from typing import Dict, List

PROTOTYPE_SCRIPT = "Ajax"
JQUERY_SCRIPT = "jQuery"

DEFAULT_SCRIPT_SOURCES: Dict[str, str] = {
    PROTOTYPE_SCRIPT: "https://ajax.googleapis.com/ajax/libs/prototype/1.7.3.0/prototype.js",
    JQUERY_SCRIPT: "https://code.jquery.com/jquery-3.7.1.min.js",
}


@dataclass
class ScriptHelper:
    """Gather the scripts that rendered components depend on.

    Components call :meth:`include_standard_scripts` for the library they need
    and :meth:`insert_separate_text` for statements that must run once the
    markup exists. :meth:`render` emits everything as ``<script>`` tags, each
    library at most once.
    """

    sources: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_SCRIPT_SOURCES))
    includes: List[str] = field(default_factory=list)
    separate_text: List[str] = field(default_factory=list)

    def include_standard_scripts(self, name: str) -> None:
        if name not in self.sources:
            raise KeyError(f"Unknown standard script: {name}")
        if name not in self.includes:
            self.includes.append(name)

    def insert_separate_text(self, text: str) -> None:
        self.separate_text.append(text)

    def render(self) -> str:
        """Return the include tags followed by one inline script block."""

        tags = [
            f'<script type="text/javascript" src="{html_escape(self.sources[name])}"></script>'
            for name in self.includes
        ]
        if self.separate_text:
            body = "\n".join(self.separate_text)
            tags.append(f'<script type="text/javascript">\n{body}\n</script>')
        return "\n".join(tags)


__all__ = [
    "DEFAULT_SCRIPT_SOURCES",
    "JQUERY_SCRIPT",
    "PROTOTYPE_SCRIPT",
    "ScriptHelper",
]
