import logging
from datetime import datetime

import dash
from dash import Input, Output, State, callback_context
from dash.exceptions import PreventUpdate

from . import controller, settings
from .backend import BackendClient
from .charts import build_charts
from .history import HistorySeries
from .layout import build_layout
from .models import Configuration, Reading
from .views import (TIMESTAMP_FORMAT, alert_view, connection_view, notification_view,
                    reading_view, schedule_view, statistics_view)

logger = logging.getLogger(__name__)

# ==========================================
# App Initialization
# ==========================================
app = dash.Dash(__name__, suppress_callback_exceptions=True)
app.title = "Irrigation Dashboard"
server = app.server
app.layout = build_layout

client = BackendClient()


def triggered_id():
    ctx = callback_context
    if not ctx.triggered:
        return None
    return ctx.triggered[0]['prop_id'].split('.')[0] or None


# ==========================================
# Sensor poll & pump
# ==========================================
@app.callback(
    [Output("reading-store", "data"), Output("connection-store", "data"), Output("pump-notice", "data")],
    [Input("sensor-interval", "n_intervals"), Input("pump-toggle", "n_clicks")],
    State("reading-store", "data"),
)
def update_reading(n, pump_clicks, reading_data):
    now = datetime.now().strftime(TIMESTAMP_FORMAT)

    if triggered_id() == "pump-toggle":
        current = Reading.from_dict(reading_data["reading"] if reading_data else None)
        reading, notice = controller.toggle_pump(client, current)
        if notice.kind == "error":
            return dash.no_update, dash.no_update, notice.to_dict()
        return {"reading": reading.to_dict(), "updated_at": now, "source": "pump"}, dash.no_update, notice.to_dict()

    reading, connected = controller.poll_reading(client)
    if reading is None:
        return dash.no_update, False, dash.no_update
    return {"reading": reading.to_dict(), "updated_at": now, "source": "poll"}, connected, dash.no_update


@app.callback(
    [Output("status-dot", "style"), Output("status-text", "children")],
    Input("connection-store", "data"),
)
def update_connection(connected):
    return connection_view(bool(connected))


@app.callback(
    [Output("humidity-value", "children"), Output("humidity-bar", "style"), Output("humidity-status", "children"),
     Output("temperature-value", "children"), Output("temperature-bar", "style"), Output("temperature-status", "children"),
     Output("pump-icon", "style"), Output("pump-text", "children"), Output("pump-text", "style"),
     Output("pump-toggle", "children"), Output("last-update", "children")],
    [Input("reading-store", "data"), Input("config-store", "data")],
)
def update_view(reading_data, config_data):
    if not reading_data:
        raise PreventUpdate
    reading = Reading.from_dict(reading_data["reading"])
    view = reading_view(reading, Configuration.from_dict(config_data))
    return (view["humidity-value"], view["humidity-bar"], view["humidity-status"],
            view["temperature-value"], view["temperature-bar"], view["temperature-status"],
            view["pump-icon"], view["pump-text"], view["pump-text-style"],
            view["pump-toggle"], reading_data.get("updated_at", "--"))


@app.callback(
    [Output("alert-container", "style"), Output("alert-message", "children")],
    [Input("reading-store", "data"), Input("alert-close", "n_clicks")],
)
def update_alert(reading_data, close_clicks):
    # Only a fresh poll may bring a dismissed banner back
    if triggered_id() == "alert-close":
        return alert_view(Reading(), dismissed=True)
    if not reading_data or reading_data.get("source") != "poll":
        raise PreventUpdate
    return alert_view(Reading.from_dict(reading_data["reading"]))


@app.callback(
    [Output("schedule-time1", "children"), Output("schedule-time2", "children"), Output("next-irrigation", "children")],
    [Input("config-store", "data"), Input("sensor-interval", "n_intervals")],
)
def update_schedule(config_data, n):
    config = Configuration.from_dict(config_data)
    return schedule_view(config, datetime.now())


# ==========================================
# Configuration
# ==========================================
FORM_FIELDS = [("cfg-low", "value"), ("cfg-high", "value"), ("cfg-interval", "value"),
               ("cfg-automatic", "value"), ("cfg-time1", "value"), ("cfg-time2", "value")]


@app.callback(
    [Output("config-store", "data")] + [Output(c, p) for c, p in FORM_FIELDS] + [Output("config-notice", "data")],
    Input("cfg-save", "n_clicks"),
    [State(c, p) for c, p in FORM_FIELDS],
)
def update_config(save_clicks, low, high, interval, automatic, time1, time2):
    keep_form = [dash.no_update] * len(FORM_FIELDS)

    if triggered_id() == "cfg-save":
        config, notice = controller.save_configuration(
            client, (low, high, interval, "auto" in (automatic or []), time1, time2))
        if config is None:
            return [dash.no_update] + keep_form + [notice.to_dict()]
        return [config.to_dict()] + keep_form + [notice.to_dict()]

    config = controller.load_configuration(client)
    form = [config.low_threshold, config.high_threshold, config.irrigation_interval,
            ["auto"] if config.automatic else [], config.time1, config.time2]
    return [config.to_dict()] + form + [dash.no_update]


# ==========================================
# Statistics & history
# ==========================================
@app.callback(
    Output("history-confirm", "displayed"),
    Input("history-delete", "n_clicks"),
    prevent_initial_call=True,
)
def confirm_delete(n):
    return True


@app.callback(
    [Output("history-file", "data"), Output("history-notice", "data"), Output("history-cleared", "data")],
    [Input("history-download", "n_clicks"), Input("history-confirm", "submit_n_clicks")],
    State("history-cleared", "data"),
    prevent_initial_call=True,
)
def history_actions(download_clicks, confirm_clicks, cleared):
    if triggered_id() == "history-download":
        payload, notice = controller.download_history(client)
        return payload if payload else dash.no_update, notice.to_dict(), dash.no_update

    if triggered_id() == "history-confirm":
        ok, notice = controller.clear_history(client)
        return dash.no_update, notice.to_dict(), ((cleared or 0) + 1) if ok else dash.no_update

    raise PreventUpdate


@app.callback(
    [Output("stat-humidity", "children"), Output("stat-temperature", "children"),
     Output("stat-irrigation-time", "children"), Output("stat-water", "children")],
    Input("history-cleared", "data"),
)
def update_statistics(cleared):
    stats = controller.load_statistics(client)
    if stats is None:
        raise PreventUpdate
    return statistics_view(stats)


@app.callback(
    Output("chart-store", "data"),
    [Input("chart-interval", "n_intervals"), Input("history-cleared", "data")],
)
def update_chart_data(n, cleared):
    series = controller.load_history(client)
    if series is not None:
        return series.to_dict()
    if triggered_id() == "history-cleared":
        return HistorySeries().to_dict()
    return dash.no_update


@app.callback(
    [Output("humidity-chart", "figure"), Output("temperature-chart", "figure")],
    Input("chart-store", "data"),
)
def update_charts(chart_data):
    if chart_data is None:
        raise PreventUpdate
    return build_charts(HistorySeries.from_dict(chart_data))


# ==========================================
# Notifications
# ==========================================
@app.callback(
    [Output("notification", "children"), Output("notification", "style"), Output("notification-timer", "disabled")],
    [Input("pump-notice", "data"), Input("config-notice", "data"), Input("history-notice", "data"),
     Input("notification-timer", "n_intervals")],
    prevent_initial_call=True,
)
def show_notification(pump_notice, config_notice, history_notice, ticks):
    source = triggered_id()
    notices = {"pump-notice": pump_notice, "config-notice": config_notice, "history-notice": history_notice}
    if source in notices and notices[source]:
        message, style = notification_view(notices[source])
        return message, style, False
    message, style = notification_view(None)
    return message, style, True


def run():
    logger.info("Backend: %s", settings.BACKEND_URL)
    logger.info("Web Server Starting on port %s...", settings.SERVER_PORT)
    app.run(host=settings.SERVER_HOST, port=settings.SERVER_PORT, debug=settings.DEBUG, use_reloader=False)
