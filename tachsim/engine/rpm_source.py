# tachsim/engine/rpm_source.py

# Standard Libraries
import logging
from typing import List

# Third Party
import numpy as np

# Local Imports
from ..constants import BandRange, TachometerConstants
from .power_band import EngineState, PowerBandClassifier, angular_speed_from_rpm

logger = logging.getLogger(__name__)


class RpmGenerator:
    """
    Stochastic RPM source biased toward a realistic flight profile.

    A band row is picked by cumulative probability from the shared band
    table, then an RPM is drawn uniformly inside that row's sample span.
    Default weights: 5% below idle, 15% idle, 25% climb, 35% cruise,
    12% caution, 6% redline, 2% overlimit.
    """

    def __init__(self, rng=None, notifier=None):
        """
        Args:
            rng: numpy Generator (or any object with random() and uniform(lo, hi));
                 seeded from OS entropy when omitted
            notifier: Notification sink with a notify(message) method
        """
        self.rng = rng if rng is not None else np.random.default_rng()
        self.notifier = notifier
        self._ranges: List[BandRange] = [
            band_range for band_range in TachometerConstants.BAND_TABLE
            if band_range.weight > 0
        ]
        self._cumulative = np.cumsum([band_range.weight for band_range in self._ranges])

    def pick_range(self, p: float) -> BandRange:
        """Row whose cumulative upper bound is the first one above p."""
        idx = int(np.searchsorted(self._cumulative, p, side='right'))
        return self._ranges[min(idx, len(self._ranges) - 1)]

    def sample(self) -> float:
        """Draw one angular speed reading in rad/s."""
        band_range = self.pick_range(float(self.rng.random()))
        rpm_min, rpm_max = band_range.sample_span
        rpm = float(self.rng.uniform(rpm_min, rpm_max))
        return angular_speed_from_rpm(rpm)

    def drive(self, classifier: PowerBandClassifier) -> EngineState:
        """Sample a reading and push it through the classifier."""
        omega = self.sample()
        state = classifier.classify(omega)

        message = f"RPMSource drove engine with rpm = {state.filtered_rpm}, omega = {omega:g}"
        logger.debug(message)
        if self.notifier is not None:
            self.notifier.notify(message)
        return state
