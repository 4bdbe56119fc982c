"""Query construction for Solr: operands, expressions, facets, sort and parameters."""

from solr_commander.search.expressions import (
    BoostQueryOperand,
    ConstantQueryOperand,
    FuzzyQueryOperand,
    Operator,
    PhraseQueryOperand,
    ProximityQueryOperand,
    QueryExpression,
    QueryOperand,
    QueryOperandModel,
    RangeQueryOperand,
    StandardQueryOperand,
)
from solr_commander.search.facets import (
    FacetBuilder,
    FieldFacetBuilder,
    FieldFacetMethod,
    FieldFacetSortOrder,
    RangeFacetBuilder,
    RangeFacetIncludeOptions,
    RangeFacetOtherOptions,
)
from solr_commander.search.params import (
    CommonQueryBuilder,
    DisMaxQueryBuilder,
    EDisMaxQueryBuilder,
    StandardQueryBuilder,
)
from solr_commander.search.sanitizer import sanitize
from solr_commander.search.sort import SortOrderBuilder

__all__ = [
    "BoostQueryOperand",
    "CommonQueryBuilder",
    "ConstantQueryOperand",
    "DisMaxQueryBuilder",
    "EDisMaxQueryBuilder",
    "FacetBuilder",
    "FieldFacetBuilder",
    "FieldFacetMethod",
    "FieldFacetSortOrder",
    "FuzzyQueryOperand",
    "Operator",
    "PhraseQueryOperand",
    "ProximityQueryOperand",
    "QueryExpression",
    "QueryOperand",
    "QueryOperandModel",
    "RangeFacetBuilder",
    "RangeFacetIncludeOptions",
    "RangeFacetOtherOptions",
    "RangeQueryOperand",
    "SortOrderBuilder",
    "StandardQueryBuilder",
    "StandardQueryOperand",
    "sanitize",
]
