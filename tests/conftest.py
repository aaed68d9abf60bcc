import pytest
import requests

from forest_sentinel import config, earth_engine
from forest_sentinel.http_client import SESSION


class FakeResponse:
    def __init__(self, json_data=None, text="", status_code=200):
        self._json = json_data
        self.text = text
        self.status_code = status_code

    def json(self):
        if self._json is None:
            raise ValueError("no JSON body")
        return self._json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class FakeHttp:
    """Routes SESSION.get by URL substring; anything unrouted fails like a dead network."""

    def __init__(self):
        self.routes = []
        self.calls = []

    def route(self, fragment, response):
        self.routes.append((fragment, response))

    def get(self, url, params=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        for fragment, response in self.routes:
            if fragment in url:
                if isinstance(response, Exception):
                    raise response
                return response
        raise requests.ConnectionError(f"unrouted URL in tests: {url}")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.setattr(config, "PRODUCTION", False)
    monkeypatch.setattr(config, "EE_PRIVATE_KEY", None)
    monkeypatch.setattr(config, "EE_PROJECT", None)
    monkeypatch.setattr(config, "NASA_FIRMS_MAP_KEY", None)
    monkeypatch.setattr(config, "OPENWEATHER_API_KEY", None)
    earth_engine.session.reset()
    yield
    earth_engine.session.reset()


@pytest.fixture(autouse=True)
def fake_http(monkeypatch):
    fake = FakeHttp()
    monkeypatch.setattr(SESSION, "get", fake.get)
    return fake


class ReadySession:
    """Stands in for an initialized Earth Engine session."""
    ready = True

    def ensure(self):
        return True


@pytest.fixture
def ready_session():
    return ReadySession()
