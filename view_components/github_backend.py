"""Read JSON documents through GitHub's Contents API."""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests


@dataclass
class GitHubBackend:
    """GitHub Contents API wrapper for reading a JSON file."""

    repo: str
    path: str
    token: Optional[str] = None
    branch: str = "main"
    api_url: str = "https://api.github.com"

    def _headers(self) -> Dict[str, str]:
        """Build request headers for the GitHub API."""

        headers = {"Accept": "application/vnd.github+json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _url(self) -> str:
        """Construct the contents URL for the configured repository."""

        return f"{self.api_url.rstrip('/')}/repos/{self.repo}/contents/{self.path}"

    def read_json(self) -> Any:
        """Read a JSON file from GitHub and return its contents."""

        response = requests.get(
            self._url(),
            headers=self._headers(),
            params={"ref": self.branch},
            timeout=10,
        )
        response.raise_for_status()
        payload = response.json()
        content = payload.get("content", "")
        encoding = payload.get("encoding", "base64")
        if encoding != "base64":
            raise ValueError(f"Unsupported encoding: {encoding}")

        decoded = base64.b64decode(content).decode("utf-8")
        return json.loads(decoded)


__all__ = ["GitHubBackend"]
