# tachsim/engine/power_band.py
"""
Power band classification for the turbine tachometer.
Converts angular speed to RPM and looks the filtered RPM up in the shared
band table.
"""
import logging
import math
import sys
from dataclasses import dataclass
from typing import Optional

from ..constants import BandRange, PowerBand, TachometerConstants
from ..exceptions import InvalidReadingError

logger = logging.getLogger(__name__)


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    magnitude = math.floor(abs(value))
    if abs(value) - magnitude >= 0.5:
        magnitude += 1
    return magnitude if value >= 0 else -magnitude


def rpm_from_angular_speed(angular_speed_rad_per_sec: float) -> float:
    return (angular_speed_rad_per_sec * TachometerConstants.SECONDS_PER_MINUTE
            / TachometerConstants.RAD_PER_REV)


def angular_speed_from_rpm(rpm: float) -> float:
    return rpm * TachometerConstants.RAD_PER_REV / TachometerConstants.SECONDS_PER_MINUTE


def band_range_for(filtered_rpm: int) -> Optional[BandRange]:
    """Table row containing filtered_rpm, or None for negative readings."""
    for band_range in TachometerConstants.BAND_TABLE:
        if band_range.contains(filtered_rpm):
            return band_range
    return None


@dataclass(frozen=True)
class EngineState:
    """
    Snapshot of one tachometer reading.

    Attributes:
        raw_rpm: Unrounded RPM from the angular speed
        filtered_rpm: RPM rounded half away from zero
        band: Power band for filtered_rpm
        below_idle: Spinning (1-999 RPM) but not yet at idle
    """
    raw_rpm: float = 0.0
    filtered_rpm: int = 0
    band: PowerBand = PowerBand.POWER_OFF
    below_idle: bool = False

    @property
    def is_power_off(self) -> bool:
        return self.band == PowerBand.POWER_OFF

    @property
    def is_below_idle(self) -> bool:
        return self.below_idle


class PowerBandClassifier:
    """Maps angular speed readings to power bands and reports band entry."""

    def __init__(self, notifier=None):
        """
        Args:
            notifier: Notification sink with a notify(message) method
        """
        self.notifier = notifier
        self.state = EngineState()

    def classify(self, angular_speed_rad_per_sec: float) -> EngineState:
        """Classify one reading; raw RPM, filtered RPM and band are set together."""
        if not math.isfinite(angular_speed_rad_per_sec):
            raise InvalidReadingError(angular_speed_rad_per_sec)

        raw_rpm = rpm_from_angular_speed(angular_speed_rad_per_sec)
        if math.isinf(raw_rpm):
            # Saturate readings whose RPM overflows a float
            filtered_rpm = sys.maxsize if raw_rpm > 0 else -sys.maxsize
        else:
            filtered_rpm = round_half_away_from_zero(raw_rpm)

        band_range = band_range_for(filtered_rpm)
        if band_range is None:
            # Negative readings fall back to PowerOff
            self.state = EngineState(raw_rpm, filtered_rpm, PowerBand.POWER_OFF)
            self._notify(TachometerConstants.NEGATIVE_RPM_MESSAGE)
        else:
            self.state = EngineState(raw_rpm, filtered_rpm, band_range.band,
                                     below_idle=band_range.below_idle)
            self._notify(band_range.message)

        return self.state

    def _notify(self, message: str) -> None:
        logger.debug(message)
        if self.notifier is not None:
            self.notifier.notify(message)


def classify(angular_speed_rad_per_sec: float, notifier=None) -> EngineState:
    """Classify a single reading with a throwaway classifier."""
    return PowerBandClassifier(notifier).classify(angular_speed_rad_per_sec)
