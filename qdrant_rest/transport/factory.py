from abc import ABC, abstractmethod

from .requests_client import RequestsHttpClient


class HttpClientFactory(ABC):
    @abstractmethod
    def create(self, host="localhost", port=6333, api_key=None, timeout=30, scheme="http"):
        """Return a new, independent HttpClient for the given connection parameters."""
        pass

    def create_from_config(self, config):
        return self.create(
            host=config.host,
            port=config.port,
            api_key=config.api_key,
            timeout=config.timeout,
            scheme=config.scheme
        )


class RequestsHttpClientFactory(HttpClientFactory):
    def create(self, host="localhost", port=6333, api_key=None, timeout=30, scheme="http"):
        base_url = f"{scheme}://{host}:{port}"
        return RequestsHttpClient(base_url, api_key, timeout)
