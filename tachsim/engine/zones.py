# tachsim/engine/zones.py
"""Pilot-facing safety zones, coarser than the power bands."""
from ..constants import RpmZone, TachometerConstants


def zone_for_rpm(rpm: int) -> RpmZone:
    limits = TachometerConstants.ZONES
    if rpm < limits['IDLE_MIN']:
        return RpmZone.BELOW_IDLE
    elif rpm <= limits['NORMAL_MAX']:
        return RpmZone.NORMAL
    elif rpm <= limits['CAUTION_MAX']:
        return RpmZone.CAUTION
    return RpmZone.RED_LINE


def zone_message(rpm: int) -> str:
    """High level engine safety message for the pilot."""
    return TachometerConstants.ZONE_MESSAGES[zone_for_rpm(rpm)]
