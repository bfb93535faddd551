#!/usr/bin/env python3
"""
End-of-run maintenance verdict for the turbine
Applies the time-in-band policy to the final flight counters
"""
from dataclasses import dataclass
from enum import IntEnum

from ..constants import TachometerConstants
from ..flight.hours import FlightCounters


class DiagnosticStatus(IntEnum):
    """Verdict severity; the value doubles as the numeric code"""
    SUCCESSFUL = 0
    MAINTENANCE_REQUIRED = 1
    SYSTEM_FAILURE = 2


@dataclass(frozen=True)
class Diagnostic:
    """Maintenance verdict produced once per run"""
    status: DiagnosticStatus = DiagnosticStatus.SUCCESSFUL
    message: str = "SYSTEM CHECK: SUCCESSFUL"
    code: int = 0

    @classmethod
    def successful(cls, message: str = "SYSTEM CHECK: SUCCESSFUL", code: int = 0) -> "Diagnostic":
        return cls(DiagnosticStatus.SUCCESSFUL, message, code)

    @classmethod
    def maintenance(cls, message: str = "SYSTEM CHECK: MAINTENANCE REQUIRED", code: int = 1) -> "Diagnostic":
        return cls(DiagnosticStatus.MAINTENANCE_REQUIRED, message, code)

    @classmethod
    def failure(cls, message: str = "SYSTEM CHECK: SYSTEM FAILURE", code: int = 2) -> "Diagnostic":
        return cls(DiagnosticStatus.SYSTEM_FAILURE, message, code)


class DiagnosticEvaluator:
    """Rule-based verdict; the most severe matching rule wins"""

    def __init__(self):
        self.thresholds = TachometerConstants.DIAGNOSTIC

    def evaluate(self, counters: FlightCounters) -> Diagnostic:
        redline_sec = counters.redline_seconds
        caution_sec = counters.caution_seconds

        if redline_sec > self.thresholds['FAILURE_REDLINE_SEC']:
            return Diagnostic.failure(
                "SYSTEM CHECK: SYSTEM FAILURE - Excessive time in REDLINE/OVERLIMIT", 2
            )
        if (redline_sec > self.thresholds['MAINTENANCE_REDLINE_SEC'] or
                caution_sec > self.thresholds['MAINTENANCE_CAUTION_SEC']):
            return Diagnostic.maintenance(
                "SYSTEM CHECK: MAINTENANCE REQUIRED - Heavy use in CAUTION/REDLINE bands", 1
            )
        return Diagnostic.successful(
            "SYSTEM CHECK: SUCCESSFUL - Engine within expected use profile", 0
        )

# Singleton instance
DIAGNOSTIC_EVALUATOR = DiagnosticEvaluator()

def evaluate_diagnostic(counters: FlightCounters) -> Diagnostic:
    """Evaluate the maintenance verdict for a finished run"""
    return DIAGNOSTIC_EVALUATOR.evaluate(counters)
