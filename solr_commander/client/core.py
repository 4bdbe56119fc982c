"""Handle for a single Solr core: status, search and updates."""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

import requests

from solr_commander.client.base import RequestParams, SolrHttpBase
from solr_commander.exceptions import CoreNotFoundError
from solr_commander.models.response import (
    DocumentLoader,
    SolrCoreStatus,
    SolrSelectResponse,
    SolrSimpleResponse,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_COMMIT_BODY = json.dumps({"commit": {}})
_OPTIMIZE_BODY = json.dumps({"optimize": {}})
_ROLLBACK_BODY = json.dumps({"rollback": {}})
_TRUNCATE_BODY = json.dumps({"delete": {"query": "*:*"}})


class SolrCore(SolrHttpBase):
    """Operations on one named core.

    Usually obtained through :meth:`SolrClient.core`, which shares its
    session with the returned core.

    Args:
        name: Core name.
        base_url: Scheme, host and port of the Solr instance.
        session: Optional shared ``requests.Session``.
        timeout: Optional request timeout in seconds.
    """

    def __init__(
        self,
        name: str,
        base_url: str,
        *,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        super().__init__(session=session, timeout=timeout)
        self.name = name
        self.base_url = base_url.rstrip("/")
        self.core_url = f"{self.base_url}/solr/{name}"

    def __repr__(self) -> str:
        return f"SolrCore(name={self.name!r}, core_url={self.core_url!r})"

    def status(self) -> SolrCoreStatus:
        """Fetch the status of this core.

        Raises:
            CoreNotFoundError: If Solr has no core with this name.
        """
        url = f"{self.base_url}/solr/admin/cores"
        data = self._get(url, params=[("action", "status"), ("core", self.name)])

        entry = (data.get("status") or {}).get(self.name)
        if not entry:
            raise CoreNotFoundError(self.name)
        return self._parse(url, SolrCoreStatus.from_dict, entry)

    def reload(self) -> int:
        """Reload the core and return the response header status."""
        url = f"{self.base_url}/solr/admin/cores"
        data = self._get(url, params=[("action", "reload"), ("core", self.name)])
        response = self._parse(url, SolrSimpleResponse.from_dict, data)
        logger.info("Reloaded core %s", self.name)
        return response.header.status

    def select(
        self,
        params: RequestParams,
        document: type[T] | DocumentLoader = dict,
    ) -> SolrSelectResponse[T]:
        """Run a search with pre-built parameters.

        Args:
            params: Parameter pairs, e.g. from ``StandardQueryBuilder.build()``.
            document: Converter for each returned document. A dataclass type
                is called with the document fields; other callables get the
                raw dict.

        Returns:
            The typed select response.
        """
        url = f"{self.core_url}/select"
        data = self._get(url, params=list(params))
        return self._parse(
            url, lambda raw: SolrSelectResponse.from_dict(raw, document), data
        )

    def post(self, body: bytes | str) -> SolrSimpleResponse:
        """Send a JSON update request (documents or commands) to ``/update``."""
        url = f"{self.core_url}/update"
        data = self._post(url, body)
        return self._parse(url, SolrSimpleResponse.from_dict, data)

    def post_documents(self, documents: list[dict[str, Any]]) -> SolrSimpleResponse:
        """Serialize ``documents`` as a JSON array and post them."""
        return self.post(json.dumps(documents))

    def commit(self, optimize: bool = False) -> SolrSimpleResponse:
        """Commit pending updates, optionally optimizing the index."""
        return self.post(_OPTIMIZE_BODY if optimize else _COMMIT_BODY)

    def rollback(self) -> SolrSimpleResponse:
        """Discard uncommitted updates."""
        return self.post(_ROLLBACK_BODY)

    def truncate(self) -> SolrSimpleResponse:
        """Delete every document. The deletion is visible after :meth:`commit`."""
        logger.info("Truncating core %s", self.name)
        return self.post(_TRUNCATE_BODY)
