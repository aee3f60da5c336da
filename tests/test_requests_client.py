"""
Unit tests for RequestsHttpClient with requests.request patched out
"""
import json
from unittest import mock

import pytest
import requests

from qdrant_rest import (
    HttpError,
    NetworkError,
    QdrantClient,
    RequestsHttpClient,
    SerializationError,
    TransportError,
)

REQUEST_TARGET = "qdrant_rest.transport.requests_client.requests.request"
BASE_URL = "http://localhost:6333"


def make_response(status_code=200, body=None, text=None):
    response = mock.Mock()
    response.status_code = status_code
    response.text = text if text is not None else json.dumps(body if body is not None else {"status": "ok"})
    return response


@pytest.fixture
def transport():
    return RequestsHttpClient(BASE_URL)


def test_get_sends_no_body_and_returns_decoded_json(transport):
    body = {"status": "ok", "result": {"collections": []}, "time": 0.0001}
    with mock.patch(REQUEST_TARGET, return_value=make_response(200, body)) as request:
        result = transport.request("GET", "/collections")

    assert result == body
    request.assert_called_once()
    args, kwargs = request.call_args
    assert args == ("GET", "http://localhost:6333/collections")
    assert kwargs["data"] is None
    assert kwargs["timeout"] == 30


def test_delete_sends_no_body(transport):
    with mock.patch(REQUEST_TARGET, return_value=make_response()) as request:
        transport.request("DELETE", "/collections/c", {"ignored": True})

    assert request.call_args.kwargs["data"] is None


@pytest.mark.parametrize("method", ["POST", "PUT", "PATCH"])
def test_body_methods_encode_json(transport, method):
    data = {"points": [{"id": 1, "vector": [0.1, 0.2], "payload": {"city": "Berlin"}}]}
    with mock.patch(REQUEST_TARGET, return_value=make_response()) as request:
        transport.request(method, "/collections/c/points", data)

    assert json.loads(request.call_args.kwargs["data"]) == data


@pytest.mark.parametrize("method", ["POST", "PUT"])
def test_missing_body_is_sent_as_empty_object(transport, method):
    with mock.patch(REQUEST_TARGET, return_value=make_response()) as request:
        transport.request(method, "/collections/c/points/count")

    assert request.call_args.kwargs["data"] == "{}"


def test_json_headers_without_api_key(transport):
    with mock.patch(REQUEST_TARGET, return_value=make_response()) as request:
        transport.request("GET", "/collections")

    headers = request.call_args.kwargs["headers"]
    assert headers == {"Content-Type": "application/json", "Accept": "application/json"}
    assert "api-key" not in headers


def test_api_key_header_when_configured():
    transport = RequestsHttpClient(BASE_URL, api_key="secret-api-key", timeout=5)
    with mock.patch(REQUEST_TARGET, return_value=make_response()) as request:
        transport.request("GET", "/collections")

    assert request.call_args.kwargs["headers"]["api-key"] == "secret-api-key"
    assert request.call_args.kwargs["timeout"] == 5


@pytest.mark.parametrize("exc", [
    requests.exceptions.ConnectionError("Connection refused"),
    requests.exceptions.Timeout("Read timed out"),
    requests.exceptions.InvalidURL("bad host"),
])
def test_transport_failures_raise_network_error(transport, exc):
    with mock.patch(REQUEST_TARGET, side_effect=exc):
        with pytest.raises(NetworkError) as exc_info:
            transport.request("GET", "/collections")

    assert exc_info.value.status_code == 0
    assert exc_info.value.response is None
    assert exc_info.value.message
    assert exc_info.value.__cause__ is exc


def test_unencodable_body_raises_serialization_error_before_sending(transport):
    with mock.patch(REQUEST_TARGET) as request:
        with pytest.raises(SerializationError) as exc_info:
            transport.request("POST", "/collections/c/points/search", {"vector": {1, 2}})

    request.assert_not_called()
    assert exc_info.value.status_code == 0


def test_nan_in_body_raises_serialization_error(transport):
    with mock.patch(REQUEST_TARGET) as request:
        with pytest.raises(SerializationError):
            transport.request("POST", "/collections/c/points/search", {"vector": [float("nan")]})

    request.assert_not_called()


def test_invalid_json_response_raises_serialization_error(transport):
    with mock.patch(REQUEST_TARGET, return_value=make_response(200, text="<html>oops</html>")):
        with pytest.raises(SerializationError) as exc_info:
            transport.request("GET", "/collections")

    assert "Failed to decode JSON response" in exc_info.value.message


@pytest.mark.parametrize("text", ["", "null", "[1, 2]", "\"ok\""])
def test_non_object_response_raises_serialization_error(transport, text):
    with mock.patch(REQUEST_TARGET, return_value=make_response(200, text=text)):
        with pytest.raises(SerializationError):
            transport.request("GET", "/collections")


def test_http_error_carries_status_message_and_body(transport):
    body = {"status": {"error": "Not found: Collection `missing` doesn't exist!"}, "time": 0.0}
    with mock.patch(REQUEST_TARGET, return_value=make_response(404, body)):
        with pytest.raises(HttpError) as exc_info:
            transport.request("GET", "/collections/missing")

    error = exc_info.value
    assert error.status_code == 404
    assert "HTTP 404" in error.message
    assert "Not found" in str(error)
    assert error.response == body


def test_http_error_without_error_detail(transport):
    with mock.patch(REQUEST_TARGET, return_value=make_response(500, {"status": "error"})):
        with pytest.raises(HttpError) as exc_info:
            transport.request("POST", "/collections/c/points/search", {"vector": [0.1]})

    assert exc_info.value.message == "Qdrant API error (HTTP 500): Unknown error"
    assert exc_info.value.status_code == 500


def test_status_below_400_is_success(transport):
    body = {"status": "acknowledged"}
    with mock.patch(REQUEST_TARGET, return_value=make_response(202, body)):
        assert transport.request("PUT", "/collections/c/points", {"points": []}) == body


def test_every_failure_is_a_transport_error(transport):
    with mock.patch(REQUEST_TARGET, side_effect=requests.exceptions.ConnectionError("down")):
        with pytest.raises(TransportError):
            transport.request("GET", "/collections")
    with mock.patch(REQUEST_TARGET, return_value=make_response(400, {"status": {"error": "Bad"}})):
        with pytest.raises(TransportError):
            transport.request("GET", "/collections")


def test_get_missing_collection_end_to_end():
    client = QdrantClient(RequestsHttpClient(BASE_URL))
    with mock.patch(REQUEST_TARGET, return_value=make_response(404, {"status": {"error": "Not found"}})):
        with pytest.raises(HttpError) as exc_info:
            client.get_collection("missing")

    assert exc_info.value.status_code == 404
    assert "Not found" in exc_info.value.message


def test_upsert_body_reaches_the_wire_unchanged():
    points = [
        {"id": 1, "vector": [0.05, 0.61, 0.76, 0.74], "payload": {"city": "Berlin", "price": 100}},
        {"id": 2, "vector": [0.19, 0.81, 0.75, 0.11], "payload": {"city": "London", "price": 200}},
    ]
    client = QdrantClient(RequestsHttpClient(BASE_URL))
    with mock.patch(REQUEST_TARGET, return_value=make_response()) as request:
        client.upsert_points("c", points)

    args, kwargs = request.call_args
    assert args == ("PUT", "http://localhost:6333/collections/c/points")
    assert json.loads(kwargs["data"]) == {"points": points}


def test_count_without_filter_goes_out_as_empty_object():
    client = QdrantClient(RequestsHttpClient(BASE_URL))
    with mock.patch(REQUEST_TARGET, return_value=make_response(200, {"status": "ok", "result": {"count": 4}})) as request:
        result = client.count_points("c")

    assert request.call_args.kwargs["data"] == "{}"
    assert result["result"]["count"] == 4


def test_timeout_is_handed_to_requests_unchanged():
    transport = RequestsHttpClient(BASE_URL, timeout=7)
    with mock.patch(REQUEST_TARGET, return_value=make_response()) as request:
        transport.request("GET", "/collections")

    assert request.call_args.kwargs["timeout"] == 7


@pytest.mark.parametrize("call", [
    lambda client: client.search("c", [object()]),
    lambda client: client.scroll("c", limit="ten", with_payload=["city"]),
    lambda client: client.get_points("c", [True, "7"], with_payload={"include": ["city"]}),
    lambda client: client.recommend("c", positive="1", negative=None, limit=None),
    lambda client: client.create_collection("c", None, 42),
])
def test_odd_arguments_only_ever_raise_transport_errors(call):
    client = QdrantClient(RequestsHttpClient(BASE_URL))
    with mock.patch(REQUEST_TARGET, return_value=make_response(400, {"status": {"error": "Bad request"}})):
        with pytest.raises(TransportError):
            call(client)
