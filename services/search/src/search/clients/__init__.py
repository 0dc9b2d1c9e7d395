from search.clients.opensearch_client import OpenSearchClient, SearchHttpResult

__all__ = ["OpenSearchClient", "SearchHttpResult"]
