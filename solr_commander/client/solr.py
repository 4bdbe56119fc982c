"""Client for a Solr instance: system info and core administration."""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

import requests

from solr_commander.client.base import SolrHttpBase
from solr_commander.client.core import SolrCore
from solr_commander.exceptions import CoreNotFoundError, InvalidHostError, InvalidUrlError
from solr_commander.models.response import SolrCoreList, SolrSystemInfo

logger = logging.getLogger(__name__)


def normalize_base_url(url: str, port: int) -> str:
    """Reduce ``url`` to ``scheme://host:port``.

    Any path, query, fragment or port in ``url`` is dropped.

    Raises:
        InvalidUrlError: If ``url`` has no scheme or cannot be parsed.
        InvalidHostError: If ``url`` has no host.
    """
    try:
        parts = urlsplit(url)
        host = parts.hostname
    except ValueError as e:
        raise InvalidUrlError(url) from e

    if not parts.scheme:
        raise InvalidUrlError(url)
    if not host:
        raise InvalidHostError(url)

    if ":" in host:
        host = f"[{host}]"
    return f"{parts.scheme}://{host}:{port}"


class SolrClient(SolrHttpBase):
    """Entry point for talking to a Solr instance.

    Args:
        url: Any URL on the instance, e.g. ``http://localhost:8983/solr``.
        port: Port to connect to; replaces any port in ``url``.
        session: Optional ``requests.Session`` to reuse.
        timeout: Optional request timeout in seconds.

    Example::

        with SolrClient("http://localhost", 8983) as client:
            core = client.core("books")
            core.select(StandardQueryBuilder().q("title:rust").build())
    """

    def __init__(
        self,
        url: str,
        port: int,
        *,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self.url = normalize_base_url(url, port)
        super().__init__(session=session, timeout=timeout)

    def __repr__(self) -> str:
        return f"SolrClient(url={self.url!r})"

    def status(self) -> SolrSystemInfo:
        """Fetch system information (``/solr/admin/info/system``)."""
        url = f"{self.url}/solr/admin/info/system"
        return self._parse(url, SolrSystemInfo.from_dict, self._get(url))

    def cores(self) -> SolrCoreList:
        """List the cores on the instance with their status."""
        url = f"{self.url}/solr/admin/cores"
        return self._parse(url, SolrCoreList.from_dict, self._get(url))

    def core(self, name: str) -> SolrCore:
        """Return a handle for core ``name`` sharing this client's session.

        Raises:
            CoreNotFoundError: If the instance has no such core.
        """
        names = self.cores().as_list() or []
        if name not in names:
            raise CoreNotFoundError(name)
        logger.debug("Using core %s at %s", name, self.url)
        return SolrCore(name, self.url, session=self._session, timeout=self.timeout)
