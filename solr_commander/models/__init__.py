"""Typed Solr response models and date helpers."""

from solr_commander.models.dates import format_solr_datetime, parse_solr_datetime
from solr_commander.models.response import (
    LuceneInfo,
    SolrCoreList,
    SolrCoreStatus,
    SolrDateTimeRangeFacet,
    SolrErrorInfo,
    SolrFacetBody,
    SolrFloatRangeFacet,
    SolrIndexInfo,
    SolrIntegerRangeFacet,
    SolrRangeFacet,
    SolrResponseHeader,
    SolrSelectBody,
    SolrSelectResponse,
    SolrSimpleResponse,
    SolrSystemInfo,
    infer_range_facet_kind,
)

__all__ = [
    "LuceneInfo",
    "SolrCoreList",
    "SolrCoreStatus",
    "SolrDateTimeRangeFacet",
    "SolrErrorInfo",
    "SolrFacetBody",
    "SolrFloatRangeFacet",
    "SolrIndexInfo",
    "SolrIntegerRangeFacet",
    "SolrRangeFacet",
    "SolrResponseHeader",
    "SolrSelectBody",
    "SolrSelectResponse",
    "SolrSimpleResponse",
    "SolrSystemInfo",
    "format_solr_datetime",
    "infer_range_facet_kind",
    "parse_solr_datetime",
]
