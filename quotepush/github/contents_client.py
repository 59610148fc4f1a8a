"""GitHub REST client for reading and writing repository files."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import requests

GITHUB_API_URL = "https://api.github.com"

logger = logging.getLogger(__name__)


class GitHubContentsError(RuntimeError):
    """Raised when GitHub rejects a contents write."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class GitHubContentsClient:
    """Small helper around GitHub's contents API (`/repos/{repo}/contents/{path}`)."""

    def __init__(
        self,
        token: Optional[str],
        api_url: str = GITHUB_API_URL,
        timeout: Optional[float] = None,
        dry_run: bool = False,
    ) -> None:
        if not token and not dry_run:
            raise ValueError("GitHub token is required unless dry_run is True")

        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.dry_run = dry_run or not token
        self._session = requests.Session()
        if token:
            self._session.headers.update(
                {
                    "Authorization": f"token {token}",
                    "Accept": "application/vnd.github.v3+json",
                }
            )

    def contents_url(self, repo: str, path: str) -> str:
        return f"{self.api_url}/repos/{repo}/contents/{path}"

    def get_file_sha(self, repo: str, path: str) -> Optional[str]:
        """Returns the blob sha of an existing file, or None when it does not exist.

        Any failure (404, other error statuses, network problems) counts as
        "not there yet": the caller then creates the file instead of updating it.
        """

        if self.dry_run:
            print(f"[dry-run] Would look up {repo}/{path}")
            return None

        try:
            response = self._session.get(self.contents_url(repo, path), timeout=self.timeout)
        except requests.RequestException as exc:
            logger.info("Could not read %s in %s, will create it: %s", path, repo, exc)
            return None

        if not response.ok:
            logger.info(
                "File %s not found in %s (HTTP %s), will create new file",
                path,
                repo,
                response.status_code,
            )
            return None

        try:
            data = response.json()
        except ValueError:
            logger.info("Unreadable metadata for %s in %s, will create it", path, repo)
            return None

        if isinstance(data, dict):
            return data.get("sha")
        return None

    def put_file(
        self,
        repo: str,
        path: str,
        message: str,
        content_b64: str,
        sha: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        """Creates (sha=None) or updates (sha given) a file.

        Returns the decoded response body, or None in dry-run mode or when
        GitHub sends no JSON body.
        Raises:
            GitHubContentsError: when GitHub answers with a non-2xx status.
            requests.RequestException: on transport failures.
            ValueError: when an error body is not JSON.
        """

        payload = self._build_payload(message, content_b64, sha)
        logger.debug("prepared contents payload for %s/%s: sha=%s", repo, path, sha)

        if self.dry_run:
            print(f"[dry-run] Would PUT {self.contents_url(repo, path)}:")
            print(json.dumps(payload, ensure_ascii=False, indent=2))
            return None

        response = self._session.put(
            self.contents_url(repo, path),
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )
        if not response.ok:
            data = response.json()
            logger.error("GitHub API error: %s", data)
            message = data.get("message") if isinstance(data, dict) else None
            raise GitHubContentsError(str(message), status_code=response.status_code)

        try:
            return response.json()
        except ValueError:
            logger.debug("Write to %s/%s succeeded with no JSON body", repo, path)
            return None

    @staticmethod
    def _build_payload(message: str, content_b64: str, sha: Optional[str]) -> Dict[str, Any]:
        return {"message": message, "content": content_b64, "sha": sha}
