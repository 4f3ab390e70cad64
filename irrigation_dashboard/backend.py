import logging

import requests

from . import settings
from .models import Configuration, Reading, Statistics

logger = logging.getLogger(__name__)


class BackendError(Exception):
    """Any failed exchange with the irrigation backend."""

    def __init__(self, endpoint, message, status=None):
        super().__init__(f"{endpoint}: {message}")
        self.endpoint = endpoint
        self.status = status


class BackendClient:
    """Thin wrapper over the device's /api endpoints."""

    def __init__(self, base_url=settings.BACKEND_URL, timeout=settings.REQUEST_TIMEOUT, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method, path, **kwargs):
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise BackendError(f"{method} {path}", str(e)) from e
        if not response.ok:
            raise BackendError(f"{method} {path}", f"HTTP {response.status_code}", status=response.status_code)
        logger.debug("%s %s -> %s", method, path, response.status_code)
        return response

    def _json(self, method, path, **kwargs):
        response = self._request(method, path, **kwargs)
        try:
            return response.json()
        except ValueError as e:
            raise BackendError(f"{method} {path}", "invalid JSON body", status=response.status_code) from e

    def _decode(self, model, method, path):
        payload = self._json(method, path)
        try:
            return model.from_api(payload)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise BackendError(f"{method} {path}", f"malformed payload ({e})") from e

    def get_reading(self) -> Reading:
        return self._decode(Reading, "GET", "/api/datos")

    def set_pump(self, on: bool) -> None:
        self._request("POST", "/api/bomba", json={"estado": bool(on)})

    def get_config(self) -> Configuration:
        return self._decode(Configuration, "GET", "/api/config")

    def save_config(self, config: Configuration) -> None:
        self._request("POST", "/api/config", json=config.to_api())

    def get_statistics(self) -> Statistics:
        return self._decode(Statistics, "GET", "/api/estadisticas")

    def get_history_csv(self) -> str:
        return self._request("GET", "/api/historico").text

    def delete_history(self) -> None:
        self._request("DELETE", "/api/historico")
