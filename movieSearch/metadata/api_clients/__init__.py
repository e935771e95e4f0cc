"""
metadata.api_clients
~~~~~~~~~~~~~~~~~~~~
Thin wrappers around external REST APIs.
"""

from movieSearch.metadata.api_clients.omdb_client import OMDBClient

__all__ = ["OMDBClient"]
