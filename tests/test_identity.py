from __future__ import annotations

from fastapi import Request

from httpjail.identity import resolve_client_id


def make_request(peer=("10.0.0.1", 4321), headers=None) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/",
        "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
        "client": peer,
    }
    return Request(scope)


def test_direct_mode_uses_peer_address():
    request = make_request(headers={"X-Forwarded-For": "1.2.3.4"})
    assert resolve_client_id(request) == "10.0.0.1"


def test_direct_mode_without_peer_is_empty():
    assert resolve_client_id(make_request(peer=None)) == ""


def test_proxied_mode_uses_header_verbatim():
    request = make_request(headers={"X-Forwarded-For": "1.2.3.4, 10.0.0.9"})
    assert resolve_client_id(request, proxied=True) == "1.2.3.4, 10.0.0.9"


def test_proxied_mode_missing_header_is_empty():
    assert resolve_client_id(make_request(), proxied=True) == ""


def test_proxied_mode_ignores_peer_address():
    first = make_request(peer=("10.0.0.1", 1), headers={"X-Forwarded-For": "1.2.3.4"})
    second = make_request(peer=("10.0.0.2", 2), headers={"X-Forwarded-For": "1.2.3.4"})

    assert resolve_client_id(first, proxied=True) == resolve_client_id(second, proxied=True)
    assert resolve_client_id(first) != resolve_client_id(second)
