"""Utility helpers for solr-commander."""
