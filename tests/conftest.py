import json

import pytest
import requests

from irrigation_dashboard.backend import BackendClient


def make_response(status=200, body=None, text=None):
    response = requests.Response()
    response.status_code = status
    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = (text or "").encode("utf-8")
        response.headers["Content-Type"] = "text/plain; charset=utf-8"
    return response


class FakeSession:
    """Stands in for requests.Session: routes (method, path) to canned responses."""

    def __init__(self, routes=None):
        self.routes = routes or {}
        self.calls = []

    def request(self, method, url, **kwargs):
        path = "/" + url.split("/", 3)[3]
        self.calls.append((method, path, kwargs))
        result = self.routes.get((method, path))
        if result is None:
            return make_response(404, text="not found")
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def client(session):
    return BackendClient("http://device.local/", timeout=2, session=session)


READING_PAYLOAD = {
    "humedad": 42.5,
    "temperatura": 21.3,
    "bomba": False,
    "alerta": False,
    "ultimaAlerta": "",
    "timestamp": "2026-10-17 10:30:00",
}

CONFIG_PAYLOAD = {
    "umbralHumedadBaja": 25,
    "umbralHumedadAlta": 65,
    "intervaloRiego": 120,
    "modoAutomatico": False,
    "horaRiego1": "06:30",
    "horaRiego2": "20:15",
}

STATS_PAYLOAD = {
    "humedadPromedio": 48.26,
    "temperaturaPromedio": 22.04,
    "tiempoRiegoTotal": 754,
    "usoAguaEstimado": 31.25,
}
