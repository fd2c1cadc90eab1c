import json

import pytest
import requests

from jaclient import RequestsTransport, TransportError


def _response(status_code: int, reason: str, body=None, content_type="application/vnd.api+json") -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.url = "http://api/posts"
    response.headers["Content-Type"] = content_type
    if body is None:
        response._content = b""
    elif isinstance(body, str):
        response._content = body.encode()
    else:
        response._content = json.dumps(body).encode()
    return response


@pytest.fixture
def session(monkeypatch: pytest.MonkeyPatch):
    session = requests.Session()
    session.calls = []
    session.next_response = _response(200, "OK", {"data": []})

    def request(method, url, **kwargs):
        session.calls.append((method, url, kwargs))
        return session.next_response

    monkeypatch.setattr(session, "request", request)
    return session


def test_request_arguments(session) -> None:
    transport = RequestsTransport(session, timeout=3)

    response = transport(
        {"method": "POST", "url": "http://api/posts", "data": {"data": {}}, "params": {"include": "a"}, "headers": {"A": "b"}, "auth": ("u", "p")}
    )

    method, url, kwargs = session.calls[0]
    assert (method, url) == ("POST", "http://api/posts")
    assert kwargs == {"params": {"include": "a"}, "json": {"data": {}}, "headers": {"A": "b"}, "auth": ("u", "p"), "timeout": 3}
    assert response.status_code == 200
    assert response.data == {"data": []}


def test_no_content(session) -> None:
    session.next_response = _response(204, "No Content")

    response = RequestsTransport(session)({"method": "DELETE", "url": "http://api/posts/1"})

    assert response.status_code == 204
    assert response.data is None


def test_error_response(session) -> None:
    session.next_response = _response(404, "Not Found", {"errors": [{"title": "Not found"}]})

    with pytest.raises(TransportError) as exc_info:
        RequestsTransport(session)({"method": "GET", "url": "http://api/posts/1"})

    assert exc_info.value.status_code == 404
    assert exc_info.value.response.data == {"errors": [{"title": "Not found"}]}
    assert exc_info.value.response.reason == "Not Found"


def test_text_error_response(session) -> None:
    session.next_response = _response(500, "Internal Server Error", "<html>oops</html>", content_type="text/html")

    with pytest.raises(TransportError) as exc_info:
        RequestsTransport(session)({"method": "GET", "url": "http://api/posts"})

    assert exc_info.value.response.data == "<html>oops</html>"


def test_get_sends_no_body(monkeypatch: pytest.MonkeyPatch) -> None:
    session = requests.Session()
    sent = []

    def send(prepared, **kwargs):
        sent.append(prepared)
        return _response(200, "OK", {"data": None})

    monkeypatch.setattr(session, "send", send)

    RequestsTransport(session)({"method": "GET", "url": "http://api/posts/1", "data": {}})

    assert sent[0].method == "GET"
    assert sent[0].body is None
