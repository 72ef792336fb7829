# app/services/partners_client.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from app.core.config import get_settings

logger = logging.getLogger(__name__)


class PartnersClientError(RuntimeError):
    """
    Raised when the partners API cannot be reached, responds with a non-2xx
    status, or returns a body that is not valid JSON.
    """


class PartnersClientNotConfigured(PartnersClientError):
    """
    Raised when hostname, endpoints or user key are missing from settings.
    """


@dataclass
class PostResult:
    status_code: int
    body: Any


class PartnersClient:
    """
    Minimal client for the partner dataset and results API.

    Responsibilities
    ----------------
    - GET the partner dataset.
    - POST the computed countries payload.
    - Pass the opaque user key through as the `userKey` query parameter.

    Notes
    -----
    - No retries; failures surface as PartnersClientError.
    - A fresh httpx.AsyncClient is opened per request.
    """

    def __init__(
        self,
        hostname: str,
        dataset_path: str,
        result_path: str,
        user_key: str,
        timeout_seconds: float = 10.0,
        scheme: str = "https",
    ) -> None:
        if not hostname or not dataset_path or not result_path or not user_key:
            raise ValueError("hostname, dataset_path, result_path and user_key are required")

        self._base_url = f"{scheme}://{hostname.strip('/')}"
        self._dataset_path = dataset_path
        self._result_path = result_path
        self._user_key = user_key
        self._timeout_seconds = timeout_seconds

    @property
    def dataset_url(self) -> str:
        return self._url(self._dataset_path)

    @property
    def result_url(self) -> str:
        return self._url(self._result_path)

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    async def _request(
        self,
        method: str,
        url: str,
        *,
        json: Any = None,
    ) -> httpx.Response:
        """
        Issue a request with the user key attached.

        Transport failures are converted to PartnersClientError; status
        handling is left to the callers.
        """
        headers = {"Accept": "application/json"}
        params = {"userKey": self._user_key}

        try:
            async with httpx.AsyncClient(timeout=self._timeout_seconds) as client:
                resp = await client.request(
                    method=method.upper(),
                    url=url,
                    headers=headers,
                    params=params,
                    json=json,
                )
        except httpx.HTTPError as exc:
            raise PartnersClientError(f"{method.upper()} {url} failed: {exc}") from exc

        logger.debug("%s %s -> %s", method.upper(), url, resp.status_code)
        return resp

    async def fetch_dataset(self) -> Dict[str, Any]:
        """
        Fetch the partner dataset document.

        An empty body is treated as a document with no partners.

        Raises PartnersClientError on non-2xx responses or invalid JSON.
        """
        resp = await self._request("GET", self.dataset_url)
        if resp.status_code // 100 != 2:
            raise PartnersClientError(
                f"Dataset GET failed (status={resp.status_code}): {resp.text}"
            )
        if not resp.text:
            return {"partners": []}
        try:
            return resp.json()
        except ValueError as exc:
            raise PartnersClientError("Dataset response is not valid JSON") from exc

    async def post_countries(self, payload: Dict[str, Any]) -> PostResult:
        """
        POST the countries payload to the result endpoint.

        The response body is returned as parsed JSON when possible, otherwise
        as raw text. Raises PartnersClientError on non-2xx responses.
        """
        resp = await self._request("POST", self.result_url, json=payload)
        if resp.status_code // 100 != 2:
            raise PartnersClientError(
                f"Result POST failed (status={resp.status_code}): {resp.text}"
            )
        try:
            body: Any = resp.json()
        except ValueError:
            body = resp.text
        return PostResult(status_code=resp.status_code, body=body)


def get_partners_client() -> PartnersClient:
    """
    Construct a PartnersClient from application settings.

    Used as a FastAPI dependency and by the CLI.
    """
    settings = get_settings()
    missing = [
        name
        for name in ("API_HOSTNAME", "DATASET_ENDPOINT", "RESULT_ENDPOINT", "USERKEY")
        if not getattr(settings, name)
    ]
    if missing:
        raise PartnersClientNotConfigured(
            f"{', '.join(missing)} must be configured in settings to reach the partners API."
        )
    return PartnersClient(
        hostname=settings.API_HOSTNAME,
        dataset_path=settings.DATASET_ENDPOINT,
        result_path=settings.RESULT_ENDPOINT,
        user_key=settings.USERKEY,
        timeout_seconds=settings.HTTP_TIMEOUT_SECONDS,
    )
