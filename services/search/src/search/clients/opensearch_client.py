"""Executes resolver envelopes against an OpenSearch endpoint."""
import hashlib
import json
from dataclasses import dataclass
from typing import Any

import httpx
from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest

from shared.aws import create_session
from shared.config import AwsCredentials
from shared.http_client import create_http_client


@dataclass
class SearchHttpResult:
    status_code: int
    body: str

    def as_resolver_result(self) -> dict[str, Any]:
        return {"statusCode": self.status_code, "body": self.body}


class OpenSearchClient:
    def __init__(
        self,
        endpoint: str,
        timeout: float = 30.0,
        region: str = "us-west-2",
        signing_service: str = "aoss",
        sign_requests: bool = False,
        credentials: AwsCredentials | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint.rstrip("/")
        self._timeout = timeout
        self._region = region
        self._signing_service = signing_service
        self._sign_requests = sign_requests
        self._credentials = credentials
        self._transport = transport

    def _signed_headers(self, method: str, url: str, body: bytes, headers: dict[str, str]) -> dict[str, str]:
        creds = create_session(self._region, self._credentials).get_credentials()
        if creds is None:
            raise RuntimeError("No AWS credentials available for request signing")
        aws_request = AWSRequest(method=method, url=url, data=body, headers=headers)
        # OpenSearch Serverless rejects signed requests without the payload hash header.
        aws_request.headers["X-Amz-Content-SHA256"] = hashlib.sha256(body).hexdigest()
        SigV4Auth(creds, self._signing_service, self._region).add_auth(aws_request)
        return dict(aws_request.headers.items())

    async def execute(self, envelope: dict[str, Any]) -> SearchHttpResult:
        method = envelope.get("method", "GET")
        params = envelope.get("params") or {}
        url = f"{self._endpoint}{envelope['resourcePath']}"
        headers = dict(params.get("headers") or {})
        body = json.dumps(params["body"]).encode() if params.get("body") is not None else b""
        if self._sign_requests:
            headers = self._signed_headers(method, url, body, headers)
        async with create_http_client(self._timeout, self._transport) as client:
            resp = await client.request(method, url, content=body or None, headers=headers)
        return SearchHttpResult(status_code=resp.status_code, body=resp.text)
