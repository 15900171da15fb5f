# Prefiltering stage of the event-detection function from:
# Vishwanath et al., "Automatic segmentation of Phonocardiogram using the
# occurrence of the cardiac events," 2017.
#
# Python implementation.

import logging
import math

from scipy.signal import cheb1ord, cheby1, sosfilt

from default_vishwanath_options import LowpassSpec
from segmentation_errors import as_signal

logger = logging.getLogger("vishwanath.prefilter")


def design_chebyshev1_lowpass(design=None):
    """
    Design the Chebyshev Type I lowpass used to prefilter the PCG.

    Inputs:
    design: a LowpassSpec (defaults: wp=0.01, rp=1 dB, ws=0.0111, rs=42 dB)

    Outputs:
    sos: the filter as second-order sections
    order: the minimum order meeting the design
    """
    if design is None:
        design = LowpassSpec()
    design.validate()

    # The edges are given in radians/sample; scipy expects them relative to
    # the Nyquist frequency (pi rad/sample).
    wp = design.passband_edge / math.pi
    ws = design.stopband_edge / math.pi

    # Minimum order and natural frequency from the four design parameters.
    order, wn = cheb1ord(wp, ws, design.passband_ripple, design.stopband_attenuation)

    # Second-order sections: the (b, a) form of this filter is not
    # numerically stable.
    sos = cheby1(order, design.passband_ripple, wn, btype='lowpass', output='sos')

    logger.debug("[PREFILTER] %r -> order %d, %d sections", design, order, len(sos))
    return sos, order


def prefilter(samples, design=None):
    """
    Apply the Chebyshev Type I lowpass to a raw PCG recording.

    The filter runs causally over the samples in order, so the output has
    exactly the same length as the input.
    """
    sos, _ = design_chebyshev1_lowpass(design)
    noisy_sound = as_signal(samples, 'samples')
    return sosfilt(sos, noisy_sound)
