# tachsim/flight/__init__.py

"""
flight - Engine time accumulation over a simulated flight
"""

# Local Imports
from .hours import FlightCounters, FlightTimeAccumulator

__all__ = [
    'FlightCounters',
    'FlightTimeAccumulator'
]
