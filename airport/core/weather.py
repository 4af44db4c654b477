"""Randomized storm forecasting."""

import logging

from .ports import RandomSourcePort, WeatherPort
from .randomness import PseudoRandomSource

logger = logging.getLogger(__name__)

DEFAULT_STORM_THRESHOLD = 0.5


class Weather(WeatherPort):
    """Decides per query whether it is stormy.

    Every call to is_stormy() draws one sample from the random source and
    reports a storm when the sample strictly exceeds the threshold.
    """

    def __init__(
        self,
        random_source: RandomSourcePort | None = None,
        threshold: float = DEFAULT_STORM_THRESHOLD,
    ):
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(
                f"threshold must be between 0 and 1, got {threshold}"
            )
        self.random_source = random_source if random_source is not None else PseudoRandomSource()
        self.threshold = threshold

    def is_stormy(self) -> bool:
        sample = self.random_source.random()
        stormy = sample > self.threshold
        logger.debug(
            f"Weather sample {sample:.3f} against threshold {self.threshold}: "
            f"{'stormy' if stormy else 'calm'}"
        )
        return stormy
