# Default options for the event-detection pipeline described in:
# Vishwanath et al., "Automatic segmentation of Phonocardiogram using the
# occurrence of the cardiac events," 2017.
#
# Python implementation.

import math

from segmentation_errors import ConfigurationError, positive_int, positive_real


class LowpassSpec:
    """
    Chebyshev Type I lowpass design parameters.

    The band edges are normalized angular frequencies (radians/sample), so
    they must lie strictly between 0 and pi.
    """

    def __init__(self, passband_edge=0.01, passband_ripple=1.0,
                 stopband_edge=0.0111, stopband_attenuation=42.0):
        # Passband edge and maximum ripple inside it (dB)
        self.passband_edge = passband_edge
        self.passband_ripple = passband_ripple

        # Stopband edge and minimum attenuation beyond it (dB)
        self.stopband_edge = stopband_edge
        self.stopband_attenuation = stopband_attenuation

    def validate(self):
        for label, edge in (('passband_edge', self.passband_edge),
                            ('stopband_edge', self.stopband_edge)):
            positive_real(edge, label)
            if not edge < math.pi:
                raise ConfigurationError(f"{label} must be in (0, pi) rad/sample, got {edge}")
        if self.passband_edge >= self.stopband_edge:
            raise ConfigurationError(
                f"passband edge ({self.passband_edge}) must be below "
                f"stopband edge ({self.stopband_edge})")
        positive_real(self.passband_ripple, 'passband_ripple')
        positive_real(self.stopband_attenuation, 'stopband_attenuation')
        if self.stopband_attenuation <= self.passband_ripple:
            raise ConfigurationError(
                "stopband_attenuation must be larger than passband_ripple")
        return self

    def __repr__(self):
        return (f"LowpassSpec(wp={self.passband_edge}, rp={self.passband_ripple}, "
                f"ws={self.stopband_edge}, rs={self.stopband_attenuation})")


class VishwanathOptions:
    def __init__(self):
        # Prefilter design
        self.lowpass = LowpassSpec()

        # Spectrogram framing (samples)
        self.frame_size = 1024
        self.hop_size = 512

        # Hamming window used to smooth the loudness function.
        # Only applied when smooth_loudness is set, and needs the sampling
        # frequency to turn milliseconds into frames.
        self.loudness_window_ms = 300
        self.smooth_loudness = False

        # Whether to plot the intermediate results
        self.figures = False

    def validate(self):
        self.lowpass.validate()
        positive_int(self.frame_size, 'frame_size')
        positive_int(self.hop_size, 'hop_size')
        positive_real(self.loudness_window_ms, 'loudness_window_ms')
        return self


def default_vishwanath_options():
    return VishwanathOptions()
