# Python implementation of the bark scaling step.

import numpy as np

from segmentation_errors import as_matrix


def barkscale_frequency(f):
    """
    z(f) = 13 atan(0.00076 f) + 3.5 atan(f / 7500^2)

    Works elementwise on scalars and arrays.
    """
    f = np.asarray(f, dtype=float)
    return 13.0 * np.arctan(0.00076 * f) + 3.5 * np.arctan(f / (7500.0 ** 2))


def barkscale(spectrogram):
    """
    Apply the bark function to every value of the spectrogram.

    Note that the function is applied to the log-magnitudes themselves and
    not to the frequency of each bin, so the frequency axis is left as it is
    and the shape of the spectrogram does not change.
    """
    return barkscale_frequency(as_matrix(spectrogram, 'spectrogram'))
