from . import settings

HUMIDITY_LABELS = {
    "low": "⚠️ Too low - needs watering",
    "acceptable": "✓ Acceptable level",
    "optimal": "✓ Optimal level",
}
HUMIDITY_COLORS = {
    "low": "linear-gradient(90deg, #e74c3c, #c0392b)",
    "acceptable": "linear-gradient(90deg, #f39c12, #e67e22)",
    "optimal": "linear-gradient(90deg, #2ecc71, #27ae60)",
}
TEMPERATURE_LABELS = {
    "cold": "❄️ Cold",
    "normal": "✓ Normal",
    "warm": "☀️ Warm",
    "hot": "🔥 Very hot",
}


def humidity_status(humidity, low, high):
    if humidity < low:
        return "low"
    if humidity < high:
        return "acceptable"
    return "optimal"


def temperature_status(temperature):
    if temperature < 15:
        return "cold"
    if temperature < 25:
        return "normal"
    if temperature < 35:
        return "warm"
    return "hot"


def humidity_bar_width(humidity):
    return max(0.0, min(float(humidity), 100.0))


def temperature_bar_width(temperature):
    return max(0.0, min(temperature * 100 / settings.TEMPERATURE_SCALE_MAX, 100.0))


def minute_of_day(hhmm):
    hours, minutes = (int(part) for part in hhmm.split(":"))
    return hours * 60 + minutes


def next_irrigation(now, time1, time2):
    """Return ``(hhmm, tomorrow)`` for the next configured irrigation time.

    ``now`` is anything with ``hour`` and ``minute``. The times are checked
    in the order they are configured; past both means time1 tomorrow.
    """
    current = now.hour * 60 + now.minute
    if current < minute_of_day(time1):
        return time1, False
    if current < minute_of_day(time2):
        return time2, False
    return time1, True


def next_irrigation_text(now, time1, time2):
    try:
        hhmm, tomorrow = next_irrigation(now, time1, time2)
    except (ValueError, AttributeError):
        return "--"
    return f"{hhmm} (tomorrow)" if tomorrow else hhmm
