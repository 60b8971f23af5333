"""Central configuration and constants for ``xmlquery``."""

from __future__ import annotations

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"

# Placeholder shown for absent values in human-readable tables.
ABSENT_DISPLAY = "∅"


__all__ = ["ABSENT_DISPLAY", "LOG_FORMAT"]
