#!/usr/bin/env python3
"""
Engine Package
Tachometer reading classification, safety zones and the simulated RPM source
"""
from ..constants import PowerBand, RpmZone
from .power_band import (
    EngineState,
    PowerBandClassifier,
    classify,
    round_half_away_from_zero,
    rpm_from_angular_speed,
    angular_speed_from_rpm,
    band_range_for
)
from .zones import zone_for_rpm, zone_message
from .rpm_source import RpmGenerator

# Public API
__all__ = [
    'PowerBand',
    'RpmZone',
    'EngineState',
    'PowerBandClassifier',
    'classify',
    'round_half_away_from_zero',
    'rpm_from_angular_speed',
    'angular_speed_from_rpm',
    'band_range_for',
    'zone_for_rpm',
    'zone_message',
    'RpmGenerator'
]
