"""
Shared fixtures for the qdrant_rest tests
"""
import pytest

from qdrant_rest import HttpClient, QdrantClient


class RecordingHttpClient(HttpClient):
    """HttpClient that records every call and answers with a canned response."""

    def __init__(self, response=None):
        self.calls = []
        self.response = response if response is not None else {"status": "ok"}

    def request(self, method, path, data=None):
        self.calls.append((method, path, data))
        return self.response

    @property
    def last_call(self):
        return self.calls[-1]


@pytest.fixture
def http_client():
    return RecordingHttpClient()


@pytest.fixture
def client(http_client):
    return QdrantClient(http_client)
