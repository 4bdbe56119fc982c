"""Shared HTTP plumbing for the Solr client and core handles."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import requests

from solr_commander.exceptions import (
    SolrDeserializeError,
    SolrRequestError,
    SolrResponseError,
)
from solr_commander.models.response import SolrErrorInfo

logger = logging.getLogger(__name__)

_USER_AGENT = "solr-commander/0.1"

M = TypeVar("M")

RequestParams = list[tuple[str, str]]


class SolrHttpBase:
    """Owns (or borrows) a ``requests.Session`` and decodes Solr JSON bodies.

    Args:
        session: Session to reuse. When omitted a new one is created and
            closed by :meth:`close`.
        timeout: Optional timeout in seconds passed through to requests.
    """

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self._owns_session = session is None
        if session is None:
            session = requests.Session()
            session.headers.update({"User-Agent": _USER_AGENT})
        self._session = session
        self.timeout = timeout

    def close(self) -> None:
        """Close the session if this object created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _request(self, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        """Send a request and return the decoded JSON body.

        Args:
            method: HTTP method ("GET" or "POST").
            url: Request URL.
            **kwargs: Additional arguments passed to requests.

        Returns:
            The decoded JSON object.

        Raises:
            SolrRequestError: If the request fails or the server answers
                an HTTP error without a JSON body.
            SolrDeserializeError: If the body is not a JSON object.
            SolrResponseError: If Solr reports an error in the body.
        """
        if self.timeout is not None:
            kwargs.setdefault("timeout", self.timeout)

        params = kwargs.get("params") or []
        logger.debug("%s %s (%d params)", method, url, len(params))

        try:
            resp = self._session.request(method, url, **kwargs)
        except requests.RequestException as e:
            raise SolrRequestError(f"Request to {url} failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            if resp.status_code >= 400:
                raise SolrRequestError(
                    f"Request to {url} failed with HTTP {resp.status_code}"
                ) from e
            raise SolrDeserializeError(url, f"body is not JSON: {e}") from e

        if not isinstance(data, dict):
            raise SolrDeserializeError(url, f"expected a JSON object, got {type(data).__name__}")

        error = data.get("error")
        if error is not None:
            info = self._parse(
                url,
                SolrErrorInfo.from_dict,
                error if isinstance(error, dict) else {"msg": error},
            )
            logger.warning("Solr returned error %d for %s: %s", info.code, url, info.msg)
            raise SolrResponseError(info.code, info.msg, info.metadata)

        return data

    def _get(self, url: str, params: RequestParams | None = None) -> dict[str, Any]:
        return self._request("GET", url, params=params)

    def _post(self, url: str, body: bytes | str) -> dict[str, Any]:
        if isinstance(body, str):
            body = body.encode("utf-8")
        return self._request(
            "POST",
            url,
            data=body,
            headers={"Content-Type": "application/json"},
        )

    @staticmethod
    def _parse(url: str, parse: Callable[[dict[str, Any]], M], data: dict[str, Any]) -> M:
        """Build a response model, mapping shape errors to SolrDeserializeError."""
        try:
            return parse(data)
        except (KeyError, TypeError, ValueError) as e:
            raise SolrDeserializeError(url, f"{type(e).__name__}: {e}") from e
