"""
cityroute Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    # Animation cadence. The interval is presentation tuning only; the step
    # fixes how many ticks one road segment takes (0.04 -> 25 ticks).
    TICK_INTERVAL_MS: int = int(os.getenv("CITYROUTE_TICK_INTERVAL_MS", "30"))
    SEGMENT_STEP: float = float(os.getenv("CITYROUTE_SEGMENT_STEP", "0.04"))

    # View interaction
    ZOOM_MIN: float = float(os.getenv("CITYROUTE_ZOOM_MIN", "0.4"))
    ZOOM_MAX: float = float(os.getenv("CITYROUTE_ZOOM_MAX", "2.5"))
    ZOOM_STEP: float = float(os.getenv("CITYROUTE_ZOOM_STEP", "0.05"))

    # Network shipped with the examples
    DEFAULT_NETWORK: str = os.getenv("CITYROUTE_DEFAULT_NETWORK", "gujarat")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    NETWORKS_DIR: Path = PROJECT_ROOT / "examples" / "networks"

    @classmethod
    def tick_interval_s(cls) -> float:
        return cls.TICK_INTERVAL_MS / 1000.0

    @classmethod
    def debug_enabled(cls) -> bool:
        return cls.LOG_LEVEL.upper() == "DEBUG"

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.TICK_INTERVAL_MS <= 0:
            raise ValueError("CITYROUTE_TICK_INTERVAL_MS must be a positive number of milliseconds")

        if not 0.0 < cls.SEGMENT_STEP <= 1.0:
            raise ValueError(
                "CITYROUTE_SEGMENT_STEP must be in (0, 1]. "
                "It is the fraction of a road segment covered per tick."
            )

        if cls.ZOOM_MIN <= 0 or cls.ZOOM_MIN > cls.ZOOM_MAX:
            raise ValueError(
                "Zoom bounds are inverted or non-positive: "
                f"CITYROUTE_ZOOM_MIN={cls.ZOOM_MIN}, CITYROUTE_ZOOM_MAX={cls.ZOOM_MAX}"
            )

        if cls.ZOOM_STEP <= 0:
            raise ValueError("CITYROUTE_ZOOM_STEP must be > 0")

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "cityroute Configuration:",
            f"  Tick Interval: {cls.TICK_INTERVAL_MS}ms",
            f"  Segment Step: {cls.SEGMENT_STEP}",
            f"  Zoom: [{cls.ZOOM_MIN}, {cls.ZOOM_MAX}] step {cls.ZOOM_STEP}",
            f"  Default Network: {cls.DEFAULT_NETWORK}",
            f"  Log Level: {cls.LOG_LEVEL}",
        ]
        return "\n".join(lines)
