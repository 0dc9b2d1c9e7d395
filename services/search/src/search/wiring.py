"""Build a SearchService from settings."""
from shared.config import AwsCredentials
from search.clients import OpenSearchClient
from search.config import SearchSettings
from search.service import SearchService


def build_search_service(
    settings: SearchSettings,
    credentials: AwsCredentials | None = None,
) -> SearchService:
    client = OpenSearchClient(
        settings.endpoint,
        timeout=settings.timeout,
        region=settings.region,
        signing_service=settings.signing_service,
        sign_requests=settings.sign_requests,
        credentials=credentials,
    )
    return SearchService(client)
