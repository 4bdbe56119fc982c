"""solr-commander: typed Solr client and query construction toolkit."""

from solr_commander.client import SolrClient, SolrCore

__version__ = "0.1.0"

__all__ = ["SolrClient", "SolrCore", "__version__"]
