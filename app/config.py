from dotenv import load_dotenv
import logging
import os

load_dotenv()


def resolve_log_level(name: str | None) -> str:
    """Upper-cased level name, or INFO when the name is not a logging level."""
    level = (name or "INFO").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return "INFO"
    return level


DATA_PATH = os.getenv("HEALTH_DATA_PATH", "data/health_data.csv")
LOG_LEVEL = resolve_log_level(os.getenv("LOG_LEVEL"))

# Fixed drawing surface
MARGIN = {"t": 40, "r": 150, "b": 60, "l": 60}
CHART_WIDTH = 1000
CHART_HEIGHT = 400

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
