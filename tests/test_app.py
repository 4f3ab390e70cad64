from contextvars import copy_context

import dash
import pytest
from dash._callback_context import context_value
from dash._utils import AttributeDict
from dash.exceptions import PreventUpdate

from irrigation_dashboard import app as dashboard
from irrigation_dashboard.backend import BackendClient

from conftest import CONFIG_PAYLOAD, FakeSession, READING_PAYLOAD, make_response


def run_callback(prop_id, func, *args):
    def run():
        context_value.set(AttributeDict(triggered_inputs=[{"prop_id": prop_id, "value": None}]))
        return func(*args)
    return copy_context().run(run)


@pytest.fixture
def session(monkeypatch):
    fake = FakeSession()
    monkeypatch.setattr(dashboard, "client", BackendClient("http://device.local", session=fake))
    return fake


def test_app_is_wired():
    assert dashboard.app.title == "Irrigation Dashboard"
    assert dashboard.server is dashboard.app.server


def test_poll_stores_reading_and_connection(session):
    session.routes[("GET", "/api/datos")] = make_response(body=READING_PAYLOAD)
    reading_data, connected, notice = run_callback("sensor-interval.n_intervals", dashboard.update_reading, 1, 0, None)
    assert reading_data["reading"]["humidity"] == 42.5
    assert connected is True
    assert notice is dash.no_update


def test_failed_poll_keeps_reading(session):
    stored = {"reading": {"humidity": 10.0}, "updated_at": "x"}
    reading_data, connected, notice = run_callback("sensor-interval.n_intervals", dashboard.update_reading, 2, 0, stored)
    assert reading_data is dash.no_update
    assert connected is False


def test_pump_toggle_updates_store(session):
    session.routes[("POST", "/api/bomba")] = make_response(body={})
    stored = {"reading": {"humidity": 10.0, "pump": False}, "updated_at": "x"}
    reading_data, connected, notice = run_callback("pump-toggle.n_clicks", dashboard.update_reading, 2, 1, stored)
    assert reading_data["reading"]["pump"] is True
    assert connected is dash.no_update
    assert notice["kind"] == "success"


def test_pump_toggle_failure_leaves_store(session):
    stored = {"reading": {"pump": True}, "updated_at": "x"}
    reading_data, _, notice = run_callback("pump-toggle.n_clicks", dashboard.update_reading, 2, 1, stored)
    assert reading_data is dash.no_update
    assert notice["kind"] == "error"


def test_chart_data_unchanged_when_history_missing(session):
    assert run_callback("chart-interval.n_intervals", dashboard.update_chart_data, 1, 0) is dash.no_update


def test_chart_data_cleared_after_delete_even_without_history(session):
    data = run_callback("history-cleared.data", dashboard.update_chart_data, 1, 1)
    assert data == {"labels": [], "humidity": [], "temperature": []}


def test_statistics_unavailable_prevents_update(session):
    with pytest.raises(PreventUpdate):
        run_callback("history-cleared.data", dashboard.update_statistics, 0)


def test_notification_shown_then_hidden_by_timer():
    notice = {"message": "Pump switched on", "kind": "success"}
    message, style, disabled = run_callback("pump-notice.data", dashboard.show_notification, notice, None, None, 0)
    assert message == "Pump switched on"
    assert disabled is False
    message, style, disabled = run_callback("notification-timer.n_intervals", dashboard.show_notification,
                                            notice, None, None, 1)
    assert style == {"display": "none"}
    assert disabled is True


def test_alert_banner_follows_polls_only():
    alerting = {"reading": {"alert": True, "last_alert": "Low humidity"}, "updated_at": "x", "source": "poll"}
    style, message = run_callback("reading-store.data", dashboard.update_alert, alerting, 0)
    assert "Low humidity" in message

    style, message = run_callback("alert-close.n_clicks", dashboard.update_alert, alerting, 1)
    assert style == {"display": "none"}

    after_pump = dict(alerting, source="pump")
    with pytest.raises(PreventUpdate):
        run_callback("reading-store.data", dashboard.update_alert, after_pump, 1)


def test_config_loaded_into_form_on_page_load(session):
    session.routes[("GET", "/api/config")] = make_response(body=CONFIG_PAYLOAD)
    result = run_callback(".", dashboard.update_config, None, None, None, None, None, None, None)
    stored, low, high, interval, automatic, time1, time2, notice = result
    assert stored["low_threshold"] == 25
    assert [low, high, interval, automatic, time1, time2] == [25, 65, 120, [], "06:30", "20:15"]
    assert notice is dash.no_update


def test_config_form_saved(session):
    session.routes[("POST", "/api/config")] = make_response(body={})
    result = run_callback("cfg-save.n_clicks", dashboard.update_config, 1, 20, 60, 90, ["auto"], "06:00", "18:30")
    assert result[0]["automatic"] is True
    assert result[0]["time2"] == "18:30"
    assert all(value is dash.no_update for value in result[1:7])
    assert result[7]["kind"] == "success"
    assert session.calls[0][2]["json"]["modoAutomatico"] is True


def test_history_download_action(session):
    session.routes[("GET", "/api/historico")] = make_response(text="timestamp,humedad,temperatura\n")
    payload, notice, cleared = run_callback("history-download.n_clicks", dashboard.history_actions, 1, None, 0)
    assert payload["filename"].startswith("historico_riego_")
    assert payload["content"] == "timestamp,humedad,temperatura\n"
    assert notice["kind"] == "success"
    assert cleared is dash.no_update


def test_history_delete_action_bumps_cleared_counter(session):
    session.routes[("DELETE", "/api/historico")] = make_response(body={})
    payload, notice, cleared = run_callback("history-confirm.submit_n_clicks", dashboard.history_actions, 0, 1, 2)
    assert payload is dash.no_update
    assert notice["message"] == "History deleted"
    assert cleared == 3


def test_history_delete_failure_keeps_counter(session):
    payload, notice, cleared = run_callback("history-confirm.submit_n_clicks", dashboard.history_actions, 0, 1, 2)
    assert notice["kind"] == "error"
    assert cleared is dash.no_update
