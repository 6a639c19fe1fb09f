"""Application configuration via environment variables."""

import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# Plot used when the plan gives neither plotDimensions nor totalArea (feet)
DEFAULT_PLOT_WIDTH = float(os.getenv("DEFAULT_PLOT_WIDTH", "40"))
DEFAULT_PLOT_HEIGHT = float(os.getenv("DEFAULT_PLOT_HEIGHT", "60"))

# Layout behaviour
LAYOUT_MERGE_SHARED_WALLS = _flag("LAYOUT_MERGE_SHARED_WALLS", "true")
LAYOUT_WINDOW_RULE = os.getenv("LAYOUT_WINDOW_RULE", "x_axis").strip().lower()
if LAYOUT_WINDOW_RULE not in ("x_axis", "all_sides"):
    raise ValueError(
        f"LAYOUT_WINDOW_RULE must be 'x_axis' or 'all_sides', got '{LAYOUT_WINDOW_RULE}'")
LAYOUT_HONOR_ADJACENCY = _flag("LAYOUT_HONOR_ADJACENCY", "false")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

# CORS
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")
