"""
qdrant_rest - a small client for the Qdrant vector database REST API.

Usage:
    from qdrant_rest import QdrantClient, RequestsHttpClientFactory

    http_client = RequestsHttpClientFactory().create("localhost", 6333)
    client = QdrantClient(http_client)
    client.create_collection("cities", 4, "Cosine")
"""

from .client import QdrantClient
from .core.config import ConnectionConfig
from .transport import (
    HttpClient,
    HttpClientFactory,
    HttpError,
    NetworkError,
    RequestsHttpClient,
    RequestsHttpClientFactory,
    SerializationError,
    TransportError,
    get_http_client,
    get_http_client_factory,
)

__version__ = "1.0.0"

__all__ = [
    "QdrantClient",
    "ConnectionConfig",
    "HttpClient",
    "HttpClientFactory",
    "RequestsHttpClient",
    "RequestsHttpClientFactory",
    "TransportError",
    "NetworkError",
    "SerializationError",
    "HttpError",
    "get_http_client",
    "get_http_client_factory",
]
