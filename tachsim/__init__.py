# tachsim/__init__.py

"""
tachsim - Jet engine tachometer simulator

Generates synthetic RPM readings, classifies them into power bands,
accumulates time-in-band over a simulated flight and issues an
end-of-run maintenance verdict.
"""

# Local Imports
from .constants import PowerBand, RpmZone, TachometerConstants
from .config import SimulationConfig
from .exceptions import TachometerError, SinkUnavailableError, InvalidReadingError
from .engine import EngineState, PowerBandClassifier, RpmGenerator, classify
from .flight import FlightCounters, FlightTimeAccumulator
from .diagnostics import Diagnostic, DiagnosticStatus, DiagnosticEvaluator, evaluate_diagnostic
from .core import SimulationDriver, SimulationResult

__version__ = "1.2.0"

__all__ = [
    'PowerBand',
    'RpmZone',
    'TachometerConstants',
    'SimulationConfig',
    'TachometerError',
    'SinkUnavailableError',
    'InvalidReadingError',
    'EngineState',
    'PowerBandClassifier',
    'RpmGenerator',
    'classify',
    'FlightCounters',
    'FlightTimeAccumulator',
    'Diagnostic',
    'DiagnosticStatus',
    'DiagnosticEvaluator',
    'evaluate_diagnostic',
    'SimulationDriver',
    'SimulationResult'
]
