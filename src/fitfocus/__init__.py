"""fitfocus: FIT activity files to JSON dumps and live telemetry playback."""

__version__ = "0.3.0"
