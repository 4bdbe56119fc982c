"""Helpers shared by the Solr commands."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from solr_commander.exceptions import (
    CoreNotFoundError,
    SolrClientError,
    SolrCommanderError,
    SolrDeserializeError,
    SolrRequestError,
    SolrResponseError,
)
from solr_commander.utils.output import error

EXIT_SUCCESS = 0
EXIT_SOLR_ERROR = 1
EXIT_CONNECTION_ERROR = 2


@contextmanager
def solr_errors() -> Iterator[None]:
    """Report solr-commander errors and exit with the matching code."""
    try:
        yield
    except SolrRequestError as e:
        error(str(e), hint="Check that Solr is running and --url/--port are correct")
        raise SystemExit(EXIT_CONNECTION_ERROR) from e
    except CoreNotFoundError as e:
        error(str(e), hint="List available cores with: solr-commander cores")
        raise SystemExit(EXIT_SOLR_ERROR) from e
    except SolrResponseError as e:
        error(str(e))
        raise SystemExit(EXIT_SOLR_ERROR) from e
    except SolrDeserializeError as e:
        error(str(e), hint="The server may not be a supported Solr version")
        raise SystemExit(EXIT_SOLR_ERROR) from e
    except SolrClientError as e:
        error(str(e))
        raise SystemExit(EXIT_SOLR_ERROR) from e
    except SolrCommanderError as e:
        error(str(e))
        raise SystemExit(EXIT_SOLR_ERROR) from e
