from datetime import time

from dash.development.base_component import Component

from irrigation_dashboard import charts, views
from irrigation_dashboard.history import HistorySeries
from irrigation_dashboard.layout import HIDDEN, build_layout
from irrigation_dashboard.models import Configuration, Reading, Statistics


def collect_ids(component, found=None):
    found = set() if found is None else found
    component_id = getattr(component, "id", None)
    if component_id:
        found.add(component_id)
    children = getattr(component, "children", None)
    if isinstance(children, (list, tuple)):
        for child in children:
            collect_ids(child, found)
    elif isinstance(children, Component):
        collect_ids(children, found)
    return found


def test_reading_view_low_humidity_pump_on():
    view = views.reading_view(Reading(humidity=12.34, temperature=36.0, pump=True), Configuration())
    assert view["humidity-value"] == "12.3"
    assert view["humidity-status"].endswith("Too low - needs watering")
    assert view["humidity-bar"]["width"] == "12.34%"
    assert view["temperature-status"].endswith("Very hot")
    assert view["temperature-bar"]["width"] == "72.0%"
    assert view["pump-text"] == "On"
    assert view["pump-toggle"] == "Switch Pump Off"


def test_reading_view_uses_configured_thresholds():
    config = Configuration(low_threshold=50, high_threshold=60)
    assert "Acceptable" in views.reading_view(Reading(humidity=55), config)["humidity-status"]
    assert "Optimal" in views.reading_view(Reading(humidity=60), config)["humidity-status"]


def test_alert_view():
    reading = Reading(alert=True, last_alert="Low humidity")
    style, message = views.alert_view(reading)
    assert style != HIDDEN
    assert "Low humidity" in message
    assert views.alert_view(reading, dismissed=True) == (HIDDEN, "")
    assert views.alert_view(Reading(alert=True, last_alert="")) == (HIDDEN, "")
    assert views.alert_view(Reading(alert=False, last_alert="old")) == (HIDDEN, "")


def test_connection_view():
    assert views.connection_view(True)[1] == "Connected"
    assert views.connection_view(False)[1] == "Disconnected"


def test_statistics_view():
    stats = Statistics(average_humidity=48.26, average_temperature=22.04, total_irrigation_seconds=61,
                       water_liters=3.0)
    assert views.statistics_view(stats) == ("48.3%", "22.0°C", "1m 1s", "3.0 L")


def test_schedule_view():
    config = Configuration(time1="07:00", time2="19:00")
    assert views.schedule_view(config, time(21, 0)) == ("07:00", "19:00", "07:00 (tomorrow)")


def test_notification_view():
    message, style = views.notification_view({"message": "Configuration saved", "kind": "success"})
    assert message == "Configuration saved"
    assert style["background"] == charts.COLORS["green"]
    assert views.notification_view({"message": "x", "kind": "error"})[1]["background"] == charts.COLORS["red"]
    assert views.notification_view(None) == ("", HIDDEN)


def test_build_charts_uses_series_points():
    series = HistorySeries(["10:00", "10:05", "10:00"], [40.0, 41.0, 42.0], [20.0, 20.5, 21.0])
    humidity_fig, temperature_fig = charts.build_charts(series)
    assert list(humidity_fig.data[0].y) == [40.0, 41.0, 42.0]
    assert list(humidity_fig.data[0].x) == [0, 1, 2]
    assert list(humidity_fig.data[0].customdata) == ["10:00", "10:05", "10:00"]
    assert list(temperature_fig.data[0].y) == [20.0, 20.5, 21.0]
    assert list(humidity_fig.layout.yaxis.range) == [0, 100]
    assert list(temperature_fig.layout.yaxis.range) == [0, 50]


def test_empty_chart():
    fig = charts.build_chart("humidity")
    assert len(fig.data[0].y) == 0


def test_layout_contains_callback_components():
    ids = collect_ids(build_layout())
    for component_id in ("reading-store", "config-store", "chart-store", "sensor-interval", "chart-interval",
                         "pump-toggle", "cfg-save", "history-download", "history-confirm", "humidity-chart",
                         "temperature-chart", "notification", "alert-container", "next-irrigation"):
        assert component_id in ids


def test_charts_use_unified_hover():
    assert charts.build_chart("temperature").layout.hovermode == "x unified"
