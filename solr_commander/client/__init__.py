"""HTTP clients for a Solr instance and its cores."""

from solr_commander.client.core import SolrCore
from solr_commander.client.solr import SolrClient, normalize_base_url

__all__ = ["SolrClient", "SolrCore", "normalize_base_url"]
