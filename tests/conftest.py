"""Pytest fixtures: fake Product API mounted on a requests session."""

import json
from urllib.parse import urlparse, parse_qs

import pytest
import requests
from requests.adapters import BaseAdapter
from fastapi.testclient import TestClient

import main
from utils.api_client import ProductAPIClient

UPSTREAM_URL = "http://upstream.test"

_REASONS = {200: "OK", 201: "Created", 204: "No Content", 400: "Bad Request",
            404: "Not Found", 500: "Internal Server Error", 503: "Service Unavailable"}


class FakeProductAPI(BaseAdapter):
    """Canned responses keyed by (method, path); records every request."""

    def __init__(self):
        super().__init__()
        self.routes = {}
        self.calls = []
        self.error = None

    def add(self, method, path, status=200, body=None, text=None):
        self.routes[(method, path)] = (status, body, text)

    def send(self, request, **kwargs):
        parsed = urlparse(request.url)
        sent_body = json.loads(request.body) if request.body else None
        self.calls.append({
            "method": request.method,
            "path": parsed.path,
            "query": parse_qs(parsed.query),
            "json": sent_body,
        })
        if self.error is not None:
            raise self.error

        status, body, text = self.routes.get((request.method, parsed.path), (404, None, "Not Found"))
        response = requests.Response()
        response.status_code = status
        response.reason = _REASONS.get(status, "")
        response.url = request.url
        response.request = request
        response.encoding = "utf-8"
        if body is not None:
            response._content = json.dumps(body).encode("utf-8")
            response.headers["Content-Type"] = "application/json"
        else:
            response._content = (text or "").encode("utf-8")
        return response

    def close(self):
        pass


@pytest.fixture
def upstream():
    return FakeProductAPI()


@pytest.fixture
def api_client(upstream):
    session = requests.Session()
    session.mount(UPSTREAM_URL, upstream)
    return ProductAPIClient(UPSTREAM_URL + "/", session=session)


@pytest.fixture
def client(api_client):
    main.app.dependency_overrides[main.get_api_client] = lambda: api_client
    yield TestClient(main.app)
    main.app.dependency_overrides.clear()
