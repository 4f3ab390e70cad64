"""Dashboard operations behind the Dash callbacks.

Each function talks to the backend once, catches ``BackendError`` and turns
the outcome into new page state plus, for user actions, a notification.
"""
import logging
from dataclasses import dataclass, asdict, replace
from datetime import date

from . import settings
from .backend import BackendError
from .history import parse_history_csv
from .models import Configuration

logger = logging.getLogger(__name__)


@dataclass
class Notification:
    message: str
    kind: str = "success"  # or "error"

    def to_dict(self):
        return asdict(self)

    @classmethod
    def error(cls, message):
        return cls(message, "error")


def poll_reading(client):
    """Return ``(reading, connected)``; ``reading`` is None when the poll failed."""
    try:
        reading = client.get_reading()
    except BackendError as e:
        logger.error("Error updating sensor data: %s", e)
        return None, False
    logger.debug("Reading: humidity=%.1f temperature=%.1f pump=%s",
                 reading.humidity, reading.temperature, reading.pump)
    return reading, True


def toggle_pump(client, reading):
    """Ask for the opposite pump state; the reading only changes on success."""
    requested = not reading.pump
    try:
        client.set_pump(requested)
    except BackendError as e:
        logger.error("Error controlling the pump: %s", e)
        return reading, Notification.error("Error controlling the pump")
    reading = replace(reading, pump=requested)
    logger.info("Pump switched %s", "on" if requested else "off")
    return reading, Notification("Pump switched on" if requested else "Pump switched off")


def load_configuration(client):
    try:
        return client.get_config()
    except BackendError as e:
        logger.error("Error loading configuration, keeping defaults: %s", e)
        return Configuration()


def save_configuration(client, form_values):
    """Validate and POST the form; returns ``(configuration or None, notification)``."""
    try:
        config = Configuration.from_form(*form_values)
    except ValueError as e:
        logger.warning("Rejected configuration form: %s", e)
        return None, Notification.error(f"Invalid configuration: {e}")
    try:
        client.save_config(config)
    except BackendError as e:
        logger.error("Error saving configuration: %s", e)
        return None, Notification.error("Error saving configuration")
    logger.info("Configuration saved: %s", config.to_api())
    return config, Notification("Configuration saved")


def load_statistics(client):
    try:
        return client.get_statistics()
    except BackendError as e:
        logger.error("Error loading statistics: %s", e)
        return None


def history_filename(today=None):
    today = today or date.today()
    return settings.HISTORY_FILENAME.format(date=today.isoformat())


def download_history(client, today=None):
    """Return ``(download payload or None, notification)`` for ``dcc.Download``."""
    try:
        csv_text = client.get_history_csv()
    except BackendError as e:
        logger.error("Error downloading history: %s", e)
        return None, Notification.error("Error downloading data")
    payload = {"content": csv_text, "filename": history_filename(today), "type": "text/csv", "base64": False}
    return payload, Notification("Data downloaded")


def clear_history(client):
    """Return ``(cleared, notification)``."""
    try:
        client.delete_history()
    except BackendError as e:
        logger.error("Error deleting history: %s", e)
        return False, Notification.error("Error deleting history")
    logger.info("History deleted")
    return True, Notification("History deleted")


def load_history(client, max_points=settings.MAX_CHART_POINTS):
    """Fetch and parse the history CSV; None leaves the charts as they are."""
    try:
        csv_text = client.get_history_csv()
    except BackendError as e:
        if e.status is not None:
            logger.info("No historical data available (%s)", e)
        else:
            logger.error("Error loading chart data: %s", e)
        return None
    series = parse_history_csv(csv_text, max_points=max_points)
    logger.info("Charts updated with %d points", len(series))
    return series
