from enum import Enum, auto


class Termination(Enum):
    """Reasons for the CLEAN-SC iteration to stop:

    - EnergyCriterion: the degraded cross-spectral matrix contained more
      energy than in the previous iteration.
    - MaximumIterations: the maximum number of iterations was reached.
    - VanishingPeak: the peak of the dirty map vanished (zero, negative or
      negligible compared to the first peak). Nothing was left to remove.

    """

    EnergyCriterion = auto()
    MaximumIterations = auto()
    VanishingPeak = auto()
