#!/usr/bin/env python3
"""
Core coordinator for the tachometer endurance simulation
Runs the fixed tick loop: sample -> classify -> accumulate -> log row,
then issues the maintenance verdict.
"""
import logging
from dataclasses import dataclass, replace
from typing import Any, Dict

from .config import SimulationConfig
from .diagnostics.evaluator import Diagnostic, DiagnosticEvaluator
from .engine.power_band import EngineState, PowerBandClassifier
from .engine.rpm_source import RpmGenerator
from .engine.zones import zone_message
from .flight.hours import FlightCounters, FlightTimeAccumulator
from .sinks.notifications import LoggingNotificationSink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of one completed run"""
    ticks: int
    counters: FlightCounters
    diagnostic: Diagnostic


class SimulationDriver:
    """Orchestrates a single run; owns the counters and the random source for its lifetime."""

    def __init__(self, row_sink, notifier=None, rng=None,
                 ticks: int = SimulationConfig.DEFAULT_TICKS,
                 delta_seconds: float = SimulationConfig.DELTA_SECONDS,
                 emit_zone_messages: bool = SimulationConfig.EMIT_ZONE_MESSAGES):
        """
        Args:
            row_sink: Context-managed sink with write_row(dict)
            notifier: Notification sink with notify(message)
            rng: Random source handed to the RpmGenerator (OS-seeded when None)
            ticks: Number of ticks to run
            delta_seconds: Simulated seconds per tick
            emit_zone_messages: Also report the pilot safety zone every tick
        """
        self.row_sink = row_sink
        self.notifier = notifier or LoggingNotificationSink()
        self.rng = rng
        self.ticks = ticks
        self.delta_seconds = delta_seconds
        self.emit_zone_messages = emit_zone_messages
        self.evaluator = DiagnosticEvaluator()

    def run(self) -> SimulationResult:
        """Execute every tick to completion.

        Raises:
            SinkUnavailableError: the row sink could not be opened; no tick runs.
        """
        classifier = PowerBandClassifier(self.notifier)
        generator = RpmGenerator(self.rng, self.notifier)
        accumulator = FlightTimeAccumulator()

        with self.row_sink as rows:
            logger.info(f"Simulation started: {self.ticks} ticks of {self.delta_seconds:g}s")

            for tick in range(self.ticks):
                state = generator.drive(classifier)
                accumulator.accumulate(state, self.delta_seconds)
                rows.write_row(self._row(tick * self.delta_seconds, state, accumulator.counters))
                if self.emit_zone_messages:
                    self.notifier.notify(zone_message(state.filtered_rpm))

            counters = replace(accumulator.counters)
            diagnostic = self.evaluator.evaluate(counters)
            self._report(diagnostic, counters)

        logger.info(f"Simulation complete: {counters.hours}h {counters.minutes}m "
                    f"{counters.seconds}s engine time, verdict code {diagnostic.code}")
        return SimulationResult(ticks=self.ticks, counters=counters, diagnostic=diagnostic)

    def _row(self, time_step: float, state: EngineState, counters: FlightCounters) -> Dict[str, Any]:
        return {
            'time_step': float(time_step),
            'total_seconds': counters.total_seconds,
            'hours': counters.hours,
            'minutes': counters.minutes,
            'seconds': counters.seconds,
            'rpm': state.filtered_rpm,
            'band': state.band.label,
            'caution_seconds': counters.caution_seconds,
            'redline_seconds': counters.redline_seconds
        }

    def _report(self, diagnostic: Diagnostic, counters: FlightCounters) -> None:
        self.notifier.notify(f"{diagnostic.message} (code {diagnostic.code})")
        self.notifier.notify(
            f"Caution time (sec): {counters.caution_seconds}, "
            f"Redline/OverLimit time (sec): {counters.redline_seconds}"
        )
        destination = getattr(self.row_sink, 'path', 'the flight log')
        self.notifier.notify(f"Simulation Finished. Check {destination}")
