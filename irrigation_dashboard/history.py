"""Historical series parsed from the backend's CSV log.

Rows look like ``timestamp,humedad,temperatura,bomba,alerta``; only the
first three columns are used. Malformed rows are skipped silently.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd

from . import settings

logger = logging.getLogger(__name__)


def format_time_label(raw):
    """Render a CSV timestamp as HH:MM, falling back to the raw text."""
    raw = raw.strip()
    try:
        if raw.isascii() and raw.isdigit():
            ts = pd.to_datetime(int(raw), unit="s", errors="coerce")
        else:
            ts = pd.to_datetime(raw, errors="coerce")
    except (ValueError, OverflowError):
        return raw
    if pd.isna(ts):
        return raw
    return ts.strftime("%H:%M")


def _parse_value(text):
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


@dataclass
class HistorySeries:
    labels: List[str] = field(default_factory=list)
    humidity: List[float] = field(default_factory=list)
    temperature: List[float] = field(default_factory=list)
    max_points: Optional[int] = settings.MAX_CHART_POINTS

    def __len__(self):
        return len(self.labels)

    def append(self, label, humidity, temperature):
        self.labels.append(label)
        self.humidity.append(humidity)
        self.temperature.append(temperature)
        if self.max_points is not None:
            while len(self.labels) > self.max_points:
                self.labels.pop(0)
                self.humidity.pop(0)
                self.temperature.pop(0)

    def append_reading(self, reading):
        self.append(format_time_label(reading.timestamp), reading.humidity, reading.temperature)

    def clear(self):
        self.labels = []
        self.humidity = []
        self.temperature = []

    def to_frame(self):
        return pd.DataFrame({"time": self.labels, "humidity": self.humidity, "temperature": self.temperature})

    def to_dict(self):
        return {"labels": list(self.labels), "humidity": list(self.humidity), "temperature": list(self.temperature)}

    @classmethod
    def from_dict(cls, data):
        if not data:
            return cls()
        return cls(list(data["labels"]), list(data["humidity"]), list(data["temperature"]))


def parse_history_csv(text, max_points=settings.MAX_CHART_POINTS):
    """Parse the history CSV, keeping the last ``max_points`` valid rows.

    ``max_points=None`` keeps every row.
    """
    rows = []
    lines = text.strip().split("\n")
    for line in lines[1:]:
        line = line.strip()
        if not line:
            continue
        fields = line.split(",")
        if len(fields) < 3:
            continue
        humidity = _parse_value(fields[1])
        temperature = _parse_value(fields[2])
        if humidity is None or temperature is None:
            continue
        rows.append((fields[0], humidity, temperature))

    if max_points is not None and len(rows) > max_points:
        rows = rows[-max_points:]

    series = HistorySeries(max_points=max_points)
    for raw_ts, humidity, temperature in rows:
        series.labels.append(format_time_label(raw_ts))
        series.humidity.append(humidity)
        series.temperature.append(temperature)
    logger.debug("Parsed %d history points from %d lines", len(series), max(len(lines) - 1, 0))
    return series
