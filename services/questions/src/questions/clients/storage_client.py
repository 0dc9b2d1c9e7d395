"""Object storage access: presigned GET URLs (boto3) and content fetch (httpx)."""
from typing import Any

import httpx

from shared.aws import create_s3_client
from shared.config import AwsCredentials
from shared.http_client import create_http_client

class ObjectStorage:
    def __init__(
        self,
        bucket: str,
        region: str = "us-west-2",
        credentials: AwsCredentials | None = None,
        expires_in: int = 3600,
        timeout: float = 30.0,
        s3_client: Any = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._bucket = bucket
        self._expires_in = expires_in
        self._timeout = timeout
        self._transport = transport
        self._s3 = s3_client or create_s3_client(region, credentials)

    def presign_get(self, key: str) -> str:
        """Time-limited GET URL for key; signing happens locally, no request is sent."""
        return self._s3.generate_presigned_url(
            "get_object",
            Params={"Bucket": self._bucket, "Key": key},
            ExpiresIn=self._expires_in,
        )

    async def fetch_text(self, url: str) -> str:
        """GET url without credentials; UTF-8 with replacement, leading BOM dropped."""
        async with create_http_client(self._timeout, self._transport) as client:
            resp = await client.get(url)
            resp.raise_for_status()
        return resp.content.decode("utf-8-sig", errors="replace")
