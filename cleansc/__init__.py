"""
# cleansc

CLEAN-SC deconvolution of acoustic beamforming maps from a cross-spectral
matrix and precomputed steering vectors.

"""

from . import beamforming
from . import deconvolution
from . import tools
from .deconvolution import clean_sc, clean_sc_spectrum, Termination

__all__ = [
    # Functions
    "clean_sc",
    "clean_sc_spectrum",
    "Termination",
    # Modules
    "beamforming",
    "deconvolution",
    "tools",
]

__version__ = "0.1.0"
