"""Standard library backed random source."""

import random

from .ports import RandomSourcePort


class PseudoRandomSource(RandomSourcePort):
    """Draws samples from a private random.Random instance.

    Each source owns its generator, so seeding one never affects another
    or the process-wide random module.
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._generator = random.Random(seed)

    def random(self) -> float:
        return self._generator.random()
