import os

# ==========================================
# Core Configuration
# ==========================================
BACKEND_URL = os.getenv("IRRIGATION_BACKEND_URL", "http://192.168.4.1")  # ESP32 soft-AP address
REQUEST_TIMEOUT = float(os.getenv("IRRIGATION_REQUEST_TIMEOUT", "10"))

SERVER_HOST = os.getenv("IRRIGATION_SERVER_HOST", "0.0.0.0")
SERVER_PORT = int(os.getenv("IRRIGATION_SERVER_PORT", "8050"))
DEBUG = os.getenv("IRRIGATION_DEBUG", "0") == "1"

LOG_LEVEL = os.getenv("IRRIGATION_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Timers (milliseconds)
SENSOR_POLL_MS = 5000
CHART_POLL_MS = 60000
NOTIFICATION_MS = 3000

# Charts
MAX_CHART_POINTS = 100
TEMPERATURE_SCALE_MAX = 50  # °C shown as a full temperature bar

# Defaults used until the backend configuration has been loaded
DEFAULT_CONFIG = {
    "low_threshold": 30,
    "high_threshold": 70,
    "irrigation_interval": 60,
    "automatic": True,
    "time1": "07:00",
    "time2": "19:00",
}

HISTORY_FILENAME = "historico_riego_{date}.csv"
