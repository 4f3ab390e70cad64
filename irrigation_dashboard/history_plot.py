"""Render the irrigation history CSV to a two-panel PNG.

    irrigation-history-plot historico_riego_2026-10-17.csv -o history.png
    irrigation-history-plot --backend http://192.168.4.1 -o history.png
"""
import argparse
import logging
import sys

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from . import settings
from .backend import BackendClient, BackendError
from .charts import COLORS
from .history import parse_history_csv

logger = logging.getLogger(__name__)


def plot_history(series, output, title="Irrigation History"):
    df = series.to_frame()
    if df.empty:
        raise ValueError("history contains no valid rows")

    plt.rcParams.update({'font.family': 'sans-serif', 'font.size': 11})
    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(12, 8), dpi=150, sharex=True)

    # --- Subplot 1: Soil humidity ---
    color_hum = '#2ecc71'
    ax1.plot(df.index, df['humidity'], color=color_hum, linewidth=2, label='Soil Humidity')
    ax1.fill_between(df.index, df['humidity'], color=color_hum, alpha=0.1)
    ax1.set_ylabel('Humidity (%)', color=color_hum, fontweight='bold')
    ax1.set_ylim(0, 100)
    ax1.set_title(title, fontsize=14, fontweight='bold')
    ax1.grid(True, linestyle='--', alpha=0.3)

    # --- Subplot 2: Temperature ---
    color_temp = '#3498db'
    ax2.plot(df.index, df['temperature'], color=color_temp, linewidth=2, label='Temperature')
    ax2.fill_between(df.index, df['temperature'], color=color_temp, alpha=0.1)
    ax2.set_ylabel('Temperature (°C)', color=color_temp, fontweight='bold')
    ax2.set_ylim(0, 50)
    ax2.grid(True, linestyle='--', alpha=0.3)

    step = max(1, len(df) // 12)
    ax2.set_xticks(df.index[::step])
    ax2.set_xticklabels(df['time'][::step], rotation=45, ha='right')
    ax2.set_xlabel('Time', fontweight='bold')

    # Mean markers
    ax1.axhline(df['humidity'].mean(), color=COLORS["red"], linestyle=':', linewidth=1.5)
    ax2.axhline(df['temperature'].mean(), color=COLORS["red"], linestyle=':', linewidth=1.5)

    plt.tight_layout()
    plt.savefig(output)
    plt.close(fig)
    logger.info("Saved %d points to %s", len(df), output)
    return output


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("csv", nargs="?", help="history CSV file (omit to fetch from the backend)")
    parser.add_argument("-o", "--output", default="irrigation_history.png")
    parser.add_argument("--backend", default=settings.BACKEND_URL, help="backend base URL")
    parser.add_argument("--points", type=int, default=None, help="keep only the last N rows")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.LOG_LEVEL, format=settings.LOG_FORMAT)

    if args.csv:
        with open(args.csv, encoding="utf-8") as f:
            text = f.read()
    else:
        try:
            text = BackendClient(args.backend).get_history_csv()
        except BackendError as e:
            logger.error("Could not fetch history: %s", e)
            return 1

    try:
        plot_history(parse_history_csv(text, max_points=args.points), args.output)
    except ValueError as e:
        logger.error("Nothing to plot: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
