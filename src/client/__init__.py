"""HTTPX client for the knowledge base server.

Responsibilities:
    - Listing, fetching and uploading documents
    - Submitting questions to the answering endpoint
    - Mapping transport, status and payload failures to KnowledgeBaseError

Holds no page state. The UI layer decides how results are presented.
"""

from src.client.api_client import (
    InvalidResponseError,
    KnowledgeBaseClient,
    KnowledgeBaseError,
    RequestFailedError,
    UnexpectedStatusError,
)
from src.client.config import ClientConfig, get_client_config

__all__ = [
    "ClientConfig",
    "InvalidResponseError",
    "KnowledgeBaseClient",
    "KnowledgeBaseError",
    "RequestFailedError",
    "UnexpectedStatusError",
    "get_client_config",
]
