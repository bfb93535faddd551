#!/usr/bin/env python3
"""
Design constants for the jet engine tachometer simulator
Single source of truth for the power band table shared by the classifier
and the RPM generator, plus zone limits and diagnostic thresholds.
"""
import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple


class PowerBand(IntEnum):
    """High level engine power states (how hard the engine is working)."""
    POWER_OFF = 0
    IDLE = 1
    CLIMB = 2
    CRUISE = 3
    CAUTION = 4
    RED_LINE = 5
    OVER_LIMIT = 6

    @property
    def label(self) -> str:
        """Name used in the flight log CSV."""
        return _BAND_LABELS[self]


_BAND_LABELS = {
    PowerBand.POWER_OFF: "PowerOff",
    PowerBand.IDLE: "Idle",
    PowerBand.CLIMB: "Climb",
    PowerBand.CRUISE: "Cruise",
    PowerBand.CAUTION: "Caution",
    PowerBand.RED_LINE: "RedLine",
    PowerBand.OVER_LIMIT: "OverLimit",
}


class RpmZone(IntEnum):
    """Coarse pilot-facing safety zones."""
    BELOW_IDLE = 0
    NORMAL = 1
    CAUTION = 2
    RED_LINE = 3


@dataclass(frozen=True)
class BandRange:
    """
    One row of the band table.

    Attributes:
        band: Band assigned to filtered RPM values in [lower, upper]
        lower: Inclusive lower bound (integer RPM)
        upper: Inclusive upper bound, or None when unbounded
        weight: Probability that the generator picks this row
        sample_span: Continuous RPM range the generator draws from
        message: Notification emitted when a reading lands in this row
        below_idle: Engine spinning but not yet in a normal band
    """
    band: PowerBand
    lower: int
    upper: Optional[int]
    weight: float
    sample_span: Optional[Tuple[float, float]]
    message: str
    below_idle: bool = False

    def contains(self, rpm: int) -> bool:
        if rpm < self.lower:
            return False
        return self.upper is None or rpm <= self.upper


class TachometerConstants:
    """Fixed limits for the simulated turbine (not configurable at runtime)."""

    # ===== UNIT CONVERSION =====
    SECONDS_PER_MINUTE = 60
    RAD_PER_REV = 2.0 * math.pi

    # ===== BAND LIMITS (filtered RPM, inclusive) =====
    RPM = {
        'IDLE_MIN': 1000,
        'IDLE_MAX': 3500,
        'CLIMB_MIN': 3501,
        'CLIMB_MAX': 6000,
        'CRUISE_MIN': 6001,
        'CRUISE_MAX': 9000,
        'CAUTION_MIN': 9001,
        'CAUTION_MAX': 9799,
        'REDLINE_MIN': 9800,
        'REDLINE_MAX': 10200,
        'OVERLIMIT_MIN': 10201,
        'GENERATOR_MAX': 11000,    # Upper end of sampled OverLimit readings
        'BELOW_IDLE_SAMPLE_MAX': 900,
    }

    # Ordered, non-overlapping partition of RPM >= 0.
    BAND_TABLE: Tuple[BandRange, ...] = (
        BandRange(PowerBand.POWER_OFF, 0, 0, 0.0, None,
                  "Engine off: no rotation detected."),
        BandRange(PowerBand.POWER_OFF, 1, RPM['IDLE_MIN'] - 1, 0.05,
                  (0.0, float(RPM['BELOW_IDLE_SAMPLE_MAX'])),
                  "RPM Below Idle: Engine not in normal operating band.",
                  below_idle=True),
        BandRange(PowerBand.IDLE, RPM['IDLE_MIN'], RPM['IDLE_MAX'], 0.15,
                  (float(RPM['IDLE_MIN']), float(RPM['IDLE_MAX'])),
                  "Idle: Value is within range."),
        BandRange(PowerBand.CLIMB, RPM['CLIMB_MIN'], RPM['CLIMB_MAX'], 0.25,
                  (float(RPM['CLIMB_MIN']), float(RPM['CLIMB_MAX'])),
                  "Climb: Value is within range."),
        BandRange(PowerBand.CRUISE, RPM['CRUISE_MIN'], RPM['CRUISE_MAX'], 0.35,
                  (float(RPM['CRUISE_MIN']), float(RPM['CRUISE_MAX'])),
                  "Cruise: Value is within range."),
        BandRange(PowerBand.CAUTION, RPM['CAUTION_MIN'], RPM['CAUTION_MAX'], 0.12,
                  (float(RPM['CAUTION_MIN']), float(RPM['CAUTION_MAX'])),
                  "Caution: Engine is reaching Redline."),
        BandRange(PowerBand.RED_LINE, RPM['REDLINE_MIN'], RPM['REDLINE_MAX'], 0.06,
                  (float(RPM['REDLINE_MIN']), float(RPM['REDLINE_MAX'])),
                  "Warning: Engine may overheat."),
        BandRange(PowerBand.OVER_LIMIT, RPM['OVERLIMIT_MIN'], None, 0.02,
                  (float(RPM['OVERLIMIT_MIN']), float(RPM['GENERATOR_MAX'])),
                  "WARNING: RPM ABOVE Defined RedLine (OverLimit)."),
    )

    NEGATIVE_RPM_MESSAGE = "RPM Negative: Reverse rotation reading, treated as PowerOff."

    # ===== SAFETY ZONES (upper limits, inclusive) =====
    ZONES = {
        'IDLE_MIN': RPM['IDLE_MIN'],
        'NORMAL_MAX': RPM['CRUISE_MAX'],
        'CAUTION_MAX': RPM['CAUTION_MAX'],
        'REDLINE_MAX': RPM['REDLINE_MAX'],
    }
    ZONE_MESSAGES = {
        RpmZone.BELOW_IDLE: "RPM Below Idle",
        RpmZone.NORMAL: "RPM Within Normal Range",
        RpmZone.CAUTION: "Caution: High RPM",
        RpmZone.RED_LINE: "Redline: Potential Engine Damage",
    }

    # ===== DIAGNOSTIC POLICY (seconds, tuned for a ~50 hour run) =====
    DIAGNOSTIC = {
        'FAILURE_REDLINE_SEC': 4 * 3600,       # more than 4 h in redline/overlimit
        'MAINTENANCE_REDLINE_SEC': 1 * 3600,   # more than 1 h in redline/overlimit
        'MAINTENANCE_CAUTION_SEC': 3 * 3600,   # more than 3 h in caution
    }
