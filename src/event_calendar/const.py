"""Constants for the event calendar."""

from typing import Final

__version__ = "0.1.0"

# Colour used when an event has none or an unknown one.
DEFAULT_COLOR: Final = "sky"

# 0 = Sunday ... 6 = Saturday
WEEK_STARTS_ON: Final = 0

DEFAULT_RECURRENCE_INTERVAL: Final = 1

# Upper bound on candidate dates visited inside the queried range for one event.
MAX_RECURRENCE_ITERATIONS: Final = 100_000
