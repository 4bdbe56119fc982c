"""Sample Solr JSON bodies used by the client and CLI tests."""

from __future__ import annotations

from typing import Any


def response_header(status: int = 0, qtime: int = 1) -> dict[str, Any]:
    return {"status": status, "QTime": qtime}


def index_payload(num_docs: int = 3) -> dict[str, Any]:
    return {
        "numDocs": num_docs,
        "maxDoc": num_docs,
        "deletedDocs": 0,
        "version": 12,
        "segmentCount": 1,
        "current": True,
        "hasDeletions": False,
        "directory": "org.apache.lucene.store.NRTCachingDirectory",
        "segmentsFile": "segments_4",
        "segmentsFileSizeInBytes": 214,
        "userData": {"commitCommandVer": "0", "commitTimeMSec": "1700000000000"},
        "sizeInBytes": 5120,
        "size": "5 KB",
    }


def core_status_payload(name: str = "books", num_docs: int = 3) -> dict[str, Any]:
    return {
        "name": name,
        "instanceDir": f"/var/solr/data/{name}",
        "dataDir": f"/var/solr/data/{name}/data/",
        "config": "solrconfig.xml",
        "schema": "managed-schema.xml",
        "startTime": "2024-05-01T10:20:30.123Z",
        "uptime": 86400,
        "index": index_payload(num_docs),
    }


def cores_payload(*names: str) -> dict[str, Any]:
    return {
        "responseHeader": response_header(),
        "initFailures": {},
        "status": {name: core_status_payload(name) for name in names},
    }


def system_payload() -> dict[str, Any]:
    return {
        "responseHeader": response_header(qtime=12),
        "mode": "std",
        "solr_home": "/var/solr/data",
        "core_root": "/var/solr/data",
        "lucene": {
            "solr-spec-version": "9.4.0",
            "solr-impl-version": "9.4.0 71e101e",
            "lucene-spec-version": "9.8.0",
            "lucene-impl-version": "9.8.0 d914b3722",
        },
        "jvm": {"version": "17.0.9"},
        "security": {},
        "system": {"name": "Linux"},
    }


def select_payload(docs: list[dict[str, Any]], facet_counts: dict | None = None) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "responseHeader": response_header(),
        "response": {
            "numFound": len(docs),
            "start": 0,
            "numFoundExact": True,
            "docs": docs,
        },
    }
    if facet_counts is not None:
        payload["facet_counts"] = facet_counts
    return payload


def error_payload(code: int = 400, msg: str = "undefined field bogus") -> dict[str, Any]:
    return {
        "responseHeader": response_header(status=code),
        "error": {
            "metadata": [
                "error-class",
                "org.apache.solr.common.SolrException",
                "root-error-class",
                "org.apache.solr.common.SolrException",
            ],
            "msg": msg,
            "code": code,
        },
    }
