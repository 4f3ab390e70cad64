"""Data exchanged with the irrigation backend.

The backend speaks Spanish field names; each model maps them in
``from_api`` / ``to_api`` and round-trips through ``dcc.Store`` with
``to_dict`` / ``from_dict``.
"""
import re
from dataclasses import dataclass, asdict
from typing import Any, Dict

from . import settings

TIME_PATTERN = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")


def _number(payload: Dict[str, Any], key: str) -> float:
    value = payload[key]
    if isinstance(value, bool):
        raise TypeError(f"{key} is not a number")
    return float(value)


@dataclass
class Reading:
    humidity: float = 0.0
    temperature: float = 0.0
    pump: bool = False
    alert: bool = False
    last_alert: str = ""
    timestamp: str = ""

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "Reading":
        return cls(
            humidity=_number(payload, "humedad"),
            temperature=_number(payload, "temperatura"),
            pump=bool(payload.get("bomba", False)),
            alert=bool(payload.get("alerta", False)),
            last_alert=str(payload.get("ultimaAlerta") or ""),
            timestamp=str(payload.get("timestamp") or ""),
        )

    def to_dict(self):
        return asdict(self)

    @classmethod
    def from_dict(cls, data):
        return cls(**data) if data else cls()


@dataclass
class Configuration:
    low_threshold: int = settings.DEFAULT_CONFIG["low_threshold"]
    high_threshold: int = settings.DEFAULT_CONFIG["high_threshold"]
    irrigation_interval: int = settings.DEFAULT_CONFIG["irrigation_interval"]
    automatic: bool = settings.DEFAULT_CONFIG["automatic"]
    time1: str = settings.DEFAULT_CONFIG["time1"]
    time2: str = settings.DEFAULT_CONFIG["time2"]

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "Configuration":
        return cls(
            low_threshold=int(_number(payload, "umbralHumedadBaja")),
            high_threshold=int(_number(payload, "umbralHumedadAlta")),
            irrigation_interval=int(_number(payload, "intervaloRiego")),
            automatic=bool(payload.get("modoAutomatico", True)),
            time1=str(payload["horaRiego1"]),
            time2=str(payload["horaRiego2"]),
        )

    @classmethod
    def from_form(cls, low, high, interval, automatic, time1, time2) -> "Configuration":
        """Build a configuration from the settings form, rejecting incomplete input."""
        values = {"low threshold": low, "high threshold": high, "irrigation interval": interval}
        for name, value in values.items():
            if value is None or value == "":
                raise ValueError(f"Missing {name}")
        for value in (time1, time2):
            if not value or not TIME_PATTERN.match(str(value)):
                raise ValueError(f"Invalid irrigation time: {value!r}")
        return cls(
            low_threshold=int(float(low)),
            high_threshold=int(float(high)),
            irrigation_interval=int(float(interval)),
            automatic=bool(automatic),
            time1=str(time1),
            time2=str(time2),
        )

    def to_api(self) -> Dict[str, Any]:
        return {
            "umbralHumedadBaja": self.low_threshold,
            "umbralHumedadAlta": self.high_threshold,
            "intervaloRiego": self.irrigation_interval,
            "modoAutomatico": self.automatic,
            "horaRiego1": self.time1,
            "horaRiego2": self.time2,
        }

    def to_dict(self):
        return asdict(self)

    @classmethod
    def from_dict(cls, data):
        return cls(**data) if data else cls()


@dataclass
class Statistics:
    average_humidity: float
    average_temperature: float
    total_irrigation_seconds: int
    water_liters: float

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "Statistics":
        return cls(
            average_humidity=_number(payload, "humedadPromedio"),
            average_temperature=_number(payload, "temperaturaPromedio"),
            total_irrigation_seconds=int(_number(payload, "tiempoRiegoTotal")),
            water_liters=_number(payload, "usoAguaEstimado"),
        )

    def irrigation_time_text(self):
        minutes, seconds = divmod(self.total_irrigation_seconds, 60)
        return f"{minutes}m {seconds}s"
