"""
Deconvolution
-------------
This module contains the CLEAN-SC deconvolution of beamforming maps.

Functions:

- `clean_sc()`: deconvolution for a single frequency.
- `clean_sc_spectrum()`: deconvolution of each frequency bin and integration
  over frequency.

References:

- Sijtsma P. CLEAN Based on Spatial Source Coherence. International Journal
  of Aeroacoustics. 2007;6(4):357-374. doi: 10.1260/147547207783359459.

"""

from .deconvolution import clean_sc, clean_sc_spectrum
from .enums import Termination

__all__ = [
    "clean_sc",
    "clean_sc_spectrum",
    "Termination",
]
