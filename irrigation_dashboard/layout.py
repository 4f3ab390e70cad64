from dash import html, dcc

from . import settings
from .charts import COLORS, build_chart

CARD_STYLE = {"backgroundColor": COLORS["card"], "borderRadius": "24px", "padding": "24px", "border": f"1px solid {COLORS['card_border']}", "boxShadow": "0 15px 40px rgba(0,0,0,0.4)", "backdropFilter": "blur(15px)", "display": "flex", "flexDirection": "column", "position": "relative", "overflow": "hidden"}
LABEL_STYLE = {"fontSize": "12px", "color": COLORS["text_dim"]}
VALUE_STYLE = {"fontSize": "32px", "fontWeight": "bold"}
BAR_TRACK_STYLE = {"width": "100%", "height": "10px", "background": "#252630", "borderRadius": "5px", "overflow": "hidden", "margin": "10px 0"}
BAR_FILL_STYLE = {"height": "100%", "width": "0%", "borderRadius": "5px", "transition": "width 0.5s ease-in-out"}
BUTTON_STYLE = {"fontSize": "13px", "padding": "10px 16px", "background": COLORS["accent"], "color": "white", "border": "none", "borderRadius": "8px", "cursor": "pointer", "marginTop": "10px"}
DANGER_BUTTON_STYLE = {**BUTTON_STYLE, "background": COLORS["red"]}
INPUT_STYLE = {"width": "100%", "padding": "6px", "borderRadius": "6px", "border": "1px solid #444", "background": "#1e1e26", "color": "white"}

DOT_STYLE = {"display": "inline-block", "width": "10px", "height": "10px", "borderRadius": "50%", "marginRight": "8px", "background": COLORS["red"]}
ALERT_STYLE = {**CARD_STYLE, "flexDirection": "row", "justifyContent": "space-between", "alignItems": "center", "padding": "15px 24px", "background": "rgba(231, 76, 60, 0.85)", "marginBottom": "25px"}
NOTIFICATION_STYLE = {"position": "fixed", "top": "20px", "right": "20px", "padding": "15px 25px", "color": "white", "borderRadius": "8px", "boxShadow": "0 4px 6px rgba(0, 0, 0, 0.1)", "zIndex": 9999}
NOTIFICATION_COLORS = {"success": COLORS["green"], "error": COLORS["red"]}
HIDDEN = {"display": "none"}


def _field(label, component):
    return html.Div(style={"marginBottom": "12px"}, children=[html.Label(label, style=LABEL_STYLE), component])


def _stat(label, stat_id):
    return html.Div(style={**CARD_STYLE, "padding": "16px", "alignItems": "center"}, children=[
        html.Div(label, style=LABEL_STYLE),
        html.Div(id=stat_id, children="--", style={"fontSize": "22px", "fontWeight": "bold"}),
    ])


def sensor_card(title, value_id, unit, bar_id, status_id):
    return html.Div(style=CARD_STYLE, children=[
        html.Div(title, style=LABEL_STYLE),
        html.Div([html.Span(id=value_id, children="--"), html.Span(unit, style={"fontSize": "16px", "marginLeft": "4px"})], style=VALUE_STYLE),
        html.Div(style=BAR_TRACK_STYLE, children=html.Div(id=bar_id, style=BAR_FILL_STYLE)),
        html.Div(id=status_id, children="Waiting...", style={"fontSize": "13px", "color": COLORS["text_dim"]}),
    ])


header = html.Div(style={**CARD_STYLE, "padding": "15px 24px", "flexDirection": "row", "alignItems": "center", "justifyContent": "space-between", "marginBottom": "25px"}, children=[
    html.Div("💧 Automated Irrigation System", style={"fontWeight": "bold", "fontSize": "20px"}),
    html.Div(style={"display": "flex", "alignItems": "center", "gap": "20px"}, children=[
        html.Div([html.Span(id="status-dot", style=DOT_STYLE), html.Span(id="status-text", children="Disconnected", style={"fontWeight": "bold", "fontSize": "14px"})]),
        html.Div([html.Span("Last update: ", style=LABEL_STYLE), html.Span(id="last-update", children="--", style={"fontSize": "12px"})]),
    ]),
])

alert_banner = html.Div(id="alert-container", style=HIDDEN, children=[
    html.Div(id="alert-message", style={"fontWeight": "bold"}),
    html.Button("✕", id="alert-close", n_clicks=0, style={"background": "transparent", "border": "none", "color": "white", "fontSize": "18px", "cursor": "pointer"}),
])

pump_card = html.Div(style={**CARD_STYLE, "alignItems": "center"}, children=[
    html.Div("Water Pump", style=LABEL_STYLE),
    html.Div(id="pump-icon", children="⏻", style={"fontSize": "48px", "color": COLORS["grey"]}),
    html.Div(id="pump-text", children="Off", style={"fontWeight": "bold", "color": COLORS["grey"]}),
    html.Button("Switch Pump On", id="pump-toggle", n_clicks=0, style=BUTTON_STYLE),
])

schedule_card = html.Div(style=CARD_STYLE, children=[
    html.Div("Irrigation Schedule", style={"fontWeight": "bold", "marginBottom": "10px"}),
    html.Div([html.Span("First irrigation: ", style=LABEL_STYLE), html.Span(id="schedule-time1", children=settings.DEFAULT_CONFIG["time1"])]),
    html.Div([html.Span("Second irrigation: ", style=LABEL_STYLE), html.Span(id="schedule-time2", children=settings.DEFAULT_CONFIG["time2"])]),
    html.Div([html.Span("Next irrigation: ", style=LABEL_STYLE), html.Span(id="next-irrigation", children="--", style={"fontWeight": "bold", "color": COLORS["accent"]})], style={"marginTop": "10px"}),
])

config_card = html.Div(style=CARD_STYLE, children=[
    html.Div("⚙️ Configuration", style={"fontWeight": "bold", "marginBottom": "15px"}),
    _field("Low humidity threshold (%)", dcc.Input(id="cfg-low", type="number", min=0, max=100, step=1, style=INPUT_STYLE)),
    _field("High humidity threshold (%)", dcc.Input(id="cfg-high", type="number", min=0, max=100, step=1, style=INPUT_STYLE)),
    _field("Irrigation interval (s)", dcc.Input(id="cfg-interval", type="number", min=1, step=1, style=INPUT_STYLE)),
    dcc.Checklist(id="cfg-automatic", options=[{"label": " Automatic mode", "value": "auto"}], value=[], style={"marginBottom": "12px"}),
    _field("First irrigation time", dcc.Input(id="cfg-time1", type="text", placeholder="HH:MM", style=INPUT_STYLE)),
    _field("Second irrigation time", dcc.Input(id="cfg-time2", type="text", placeholder="HH:MM", style=INPUT_STYLE)),
    html.Button("Save Configuration", id="cfg-save", n_clicks=0, style=BUTTON_STYLE),
])

stats_card = html.Div(style=CARD_STYLE, children=[
    html.Div("📊 Statistics", style={"fontWeight": "bold", "marginBottom": "15px"}),
    html.Div(style={"display": "grid", "gridTemplateColumns": "1fr 1fr", "gap": "15px"}, children=[
        _stat("Average humidity", "stat-humidity"),
        _stat("Average temperature", "stat-temperature"),
        _stat("Total irrigation time", "stat-irrigation-time"),
        _stat("Estimated water use", "stat-water"),
    ]),
    html.Div(style={"display": "flex", "gap": "10px"}, children=[
        html.Button("Download CSV", id="history-download", n_clicks=0, style=BUTTON_STYLE),
        html.Button("Delete History", id="history-delete", n_clicks=0, style=DANGER_BUTTON_STYLE),
    ]),
    dcc.Download(id="history-file"),
    dcc.ConfirmDialog(id="history-confirm", message="Are you sure you want to delete all historical data? This action cannot be undone."),
])

charts_row = html.Div(style={"display": "grid", "gridTemplateColumns": "1fr 1fr", "gap": "25px", "marginTop": "25px"}, children=[
    html.Div(style={**CARD_STYLE, "height": "400px"}, children=[
        html.Div("Humidity History", style={"fontWeight": "bold", "fontSize": "16px"}),
        dcc.Graph(id="humidity-chart", figure=build_chart("humidity"), config={'displayModeBar': False}, style={"flex": "1"}),
    ]),
    html.Div(style={**CARD_STYLE, "height": "400px"}, children=[
        html.Div("Temperature History", style={"fontWeight": "bold", "fontSize": "16px"}),
        dcc.Graph(id="temperature-chart", figure=build_chart("temperature"), config={'displayModeBar': False}, style={"flex": "1"}),
    ]),
])


def build_layout():
    return html.Div(style={"background": COLORS["bg_gradient"], "minHeight": "100vh", "fontFamily": "Inter, sans-serif", "color": COLORS["text"], "padding": "30px"}, children=[
        # Page-session state
        dcc.Store(id="reading-store"),
        dcc.Store(id="connection-store", data=False),
        dcc.Store(id="config-store"),
        dcc.Store(id="chart-store"),
        dcc.Store(id="history-cleared", data=0),
        dcc.Store(id="pump-notice"),
        dcc.Store(id="config-notice"),
        dcc.Store(id="history-notice"),
        # Timers
        dcc.Interval(id="sensor-interval", interval=settings.SENSOR_POLL_MS, n_intervals=0),
        dcc.Interval(id="chart-interval", interval=settings.CHART_POLL_MS, n_intervals=0),
        dcc.Interval(id="notification-timer", interval=settings.NOTIFICATION_MS, n_intervals=0, disabled=True),

        html.Div(id="notification", style=HIDDEN),
        html.Div(style={"maxWidth": "1600px", "margin": "0 auto"}, children=[
            header,
            alert_banner,
            html.Div(style={"display": "grid", "gridTemplateColumns": "1fr 1fr 1fr", "gap": "25px"}, children=[
                sensor_card("Soil Humidity", "humidity-value", "%", "humidity-bar", "humidity-status"),
                sensor_card("Temperature", "temperature-value", "°C", "temperature-bar", "temperature-status"),
                pump_card,
            ]),
            html.Div(style={"display": "grid", "gridTemplateColumns": "1fr 1fr 1fr", "gap": "25px", "marginTop": "25px", "alignItems": "start"}, children=[
                schedule_card,
                config_card,
                stats_card,
            ]),
            charts_row,
        ]),
    ])


def notification_style(kind):
    return {**NOTIFICATION_STYLE, "background": NOTIFICATION_COLORS.get(kind, COLORS["red"])}
