"""Turn page state into the values the Dash components display."""
from . import status
from .charts import COLORS
from .layout import ALERT_STYLE, BAR_FILL_STYLE, DOT_STYLE, HIDDEN, notification_style

TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M:%S"


def reading_view(reading, config):
    """Component values for one reading, keyed by component id."""
    humidity_key = status.humidity_status(reading.humidity, config.low_threshold, config.high_threshold)
    temperature_key = status.temperature_status(reading.temperature)
    pump_color = COLORS["green"] if reading.pump else COLORS["grey"]
    return {
        "humidity-value": f"{reading.humidity:.1f}",
        "humidity-bar": {**BAR_FILL_STYLE, "width": f"{status.humidity_bar_width(reading.humidity)}%",
                         "background": status.HUMIDITY_COLORS[humidity_key]},
        "humidity-status": status.HUMIDITY_LABELS[humidity_key],
        "temperature-value": f"{reading.temperature:.1f}",
        "temperature-bar": {**BAR_FILL_STYLE, "width": f"{status.temperature_bar_width(reading.temperature)}%",
                            "background": "linear-gradient(90deg, #3498db, #e74c3c)"},
        "temperature-status": status.TEMPERATURE_LABELS[temperature_key],
        "pump-icon": {"fontSize": "48px", "color": pump_color},
        "pump-text": "On" if reading.pump else "Off",
        "pump-text-style": {"fontWeight": "bold", "color": pump_color},
        "pump-toggle": "Switch Pump Off" if reading.pump else "Switch Pump On",
    }


def alert_view(reading, dismissed=False):
    if reading.alert and reading.last_alert and not dismissed:
        return ALERT_STYLE, f"⚠️ {reading.last_alert}"
    return HIDDEN, ""


def connection_view(connected):
    if connected:
        return {**DOT_STYLE, "background": COLORS["green"], "boxShadow": f"0 0 8px {COLORS['green']}"}, "Connected"
    return DOT_STYLE, "Disconnected"


def statistics_view(stats):
    return (
        f"{stats.average_humidity:.1f}%",
        f"{stats.average_temperature:.1f}°C",
        stats.irrigation_time_text(),
        f"{stats.water_liters:.1f} L",
    )


def notification_view(notice):
    if not notice:
        return "", HIDDEN
    return notice["message"], notification_style(notice.get("kind"))


def schedule_view(config, now):
    return config.time1, config.time2, status.next_irrigation_text(now, config.time1, config.time2)
