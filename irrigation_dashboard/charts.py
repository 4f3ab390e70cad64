import plotly.graph_objs as go

COLORS = {
    "bg_gradient": "radial-gradient(circle at 50% 0%, #1e1e24 0%, #0a0a0f 100%)",
    "card": "rgba(28, 28, 35, 0.7)",
    "card_border": "rgba(255,255,255,0.08)",
    "text": "#FFFFFF",
    "text_dim": "#888899",
    "accent": "#6366f1",
    "green": "#2ecc71",
    "red": "#e74c3c",
    "grey": "#7f8c8d",
    "humidity": "rgb(46, 204, 113)",
    "humidity_fill": "rgba(46, 204, 113, 0.1)",
    "temperature": "rgb(52, 152, 219)",
    "temperature_fill": "rgba(52, 152, 219, 0.1)",
}

CHARTS = {
    "humidity": {"name": "Soil Humidity", "title": "Humidity (%)", "unit": "%", "y_max": 100,
                 "line": COLORS["humidity"], "fill": COLORS["humidity_fill"]},
    "temperature": {"name": "Temperature", "title": "Temperature (°C)", "unit": "°C", "y_max": 50,
                    "line": COLORS["temperature"], "fill": COLORS["temperature_fill"]},
}


MAX_TICKS = 12


def apply_chart_style(fig):
    fig.update_layout(template='plotly_dark', paper_bgcolor='rgba(0,0,0,0)', plot_bgcolor='rgba(0,0,0,0)',
                      margin=dict(l=50, r=10, t=30, b=50), hovermode="x unified",
                      legend=dict(orientation="h", yanchor="bottom", y=1.02, x=0))
    return fig


def build_chart(kind, labels=(), values=()):
    """Line chart for one history series ("humidity" or "temperature").

    Points are placed by position and labelled with their HH:MM text, since
    the same label repeats once the log spans more than a day.
    """
    spec = CHARTS[kind]
    labels = list(labels)
    positions = list(range(len(labels)))
    step = max(1, -(-len(labels) // MAX_TICKS))
    fig = go.Figure(go.Scatter(
        x=positions, y=list(values), customdata=labels, name=spec["name"], mode="lines+markers",
        line=dict(color=spec["line"], width=2, shape="spline", smoothing=0.8),
        marker=dict(size=6, color=spec["line"], line=dict(color="#fff", width=2)),
        fill="tozeroy", fillcolor=spec["fill"], showlegend=True,
        hovertemplate="%{customdata}: %{y:.1f}" + spec["unit"] + "<extra>" + spec["name"] + "</extra>",
    ))
    fig = apply_chart_style(fig)
    fig.update_layout(
        xaxis=dict(title=dict(text="Time", font=dict(size=12)), tickangle=-45, tickfont=dict(size=10),
                   showgrid=False, color="#666", tickmode="array",
                   tickvals=positions[::step], ticktext=labels[::step]),
        yaxis=dict(title=dict(text=spec["title"], font=dict(size=12)), range=[0, spec["y_max"]],
                   tickfont=dict(size=11), gridcolor='rgba(255,255,255,0.05)'),
    )
    return fig


def build_charts(series):
    return (build_chart("humidity", series.labels, series.humidity),
            build_chart("temperature", series.labels, series.temperature))
