# tachsim/flight/hours.py

# Standard import
from dataclasses import dataclass, asdict
from typing import Dict, Optional

# Local import
from ..constants import PowerBand
from ..engine.power_band import EngineState, round_half_away_from_zero

REDLINE_BANDS = (PowerBand.RED_LINE, PowerBand.OVER_LIMIT)


@dataclass
class FlightCounters:
    """
    Cumulative simulated time for one run, in whole seconds.

    Attributes:
        total_seconds: Time the engine was not PowerOff
        caution_seconds: Time spent in the Caution band
        redline_seconds: Time spent in RedLine or OverLimit
    """
    total_seconds: int = 0
    caution_seconds: int = 0
    redline_seconds: int = 0

    @property
    def hours(self) -> int:
        return self.total_seconds // 3600

    @property
    def minutes(self) -> int:
        return (self.total_seconds % 3600) // 60

    @property
    def seconds(self) -> int:
        return self.total_seconds % 60

    def as_dict(self) -> Dict[str, int]:
        return {
            **asdict(self),
            'hours': self.hours,
            'minutes': self.minutes,
            'seconds': self.seconds
        }


class FlightTimeAccumulator:
    """Logs engine hours by power band"""

    def __init__(self, counters: Optional[FlightCounters] = None):
        self.counters = counters or FlightCounters()

    def accumulate(self, state: EngineState, delta_seconds: float) -> None:
        """Add delta_seconds (rounded to the nearest second) to the matching counters.

        delta_seconds is expected to be non-negative and is not validated.
        """
        delta = round_half_away_from_zero(delta_seconds)
        band = state.band

        if band != PowerBand.POWER_OFF:  # engine is running
            self.counters.total_seconds += delta

        if band == PowerBand.CAUTION:
            self.counters.caution_seconds += delta

        if band in REDLINE_BANDS:
            self.counters.redline_seconds += delta

    # Accessors for diagnostics
    @property
    def caution_time(self) -> int:
        return self.counters.caution_seconds

    @property
    def redline_time(self) -> int:
        return self.counters.redline_seconds
