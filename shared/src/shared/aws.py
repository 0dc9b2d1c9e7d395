"""boto3 session/client construction from explicit credentials."""
import boto3
from botocore.config import Config

from shared.config import AwsCredentials


def create_session(region: str, credentials: AwsCredentials | None = None) -> boto3.Session:
    """Session bound to region; falls back to the default credential chain without credentials."""
    if credentials is None:
        return boto3.Session(region_name=region)
    return boto3.Session(
        aws_access_key_id=credentials.access_key_id,
        aws_secret_access_key=credentials.secret_access_key.get_secret_value(),
        aws_session_token=(
            credentials.session_token.get_secret_value() if credentials.session_token else None
        ),
        region_name=region,
    )


def create_s3_client(region: str, credentials: AwsCredentials | None = None):
    session = create_session(region, credentials)
    return session.client(
        "s3",
        config=Config(signature_version="s3v4", retries={"max_attempts": 1, "mode": "standard"}),
    )
