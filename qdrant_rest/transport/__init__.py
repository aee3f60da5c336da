from ..core.config import ConnectionConfig
from .exceptions import HttpError, NetworkError, SerializationError, TransportError
from .factory import HttpClientFactory, RequestsHttpClientFactory
from .http_client import HttpClient
from .requests_client import RequestsHttpClient

__all__ = [
    "HttpClient",
    "HttpClientFactory",
    "RequestsHttpClient",
    "RequestsHttpClientFactory",
    "TransportError",
    "NetworkError",
    "SerializationError",
    "HttpError",
    "get_http_client_factory",
    "get_http_client",
]


def get_http_client_factory(transport_name="requests"):
    if transport_name == 'requests':
        return RequestsHttpClientFactory()
    else:
        raise ValueError(f"Unknown transport: {transport_name}")


def get_http_client(config=None):
    if config is None:
        config = ConnectionConfig.from_env()
    factory = get_http_client_factory(config.transport)
    return factory.create_from_config(config)
