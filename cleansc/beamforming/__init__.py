"""
Beamforming
-----------
Frequency-domain delay-and-sum beamforming with precomputed steering vectors.

Functions:

- `dirty_map()`: beamformer map of a cross-spectral matrix.

"""

from .beamforming import dirty_map

__all__ = [
    "dirty_map",
]
