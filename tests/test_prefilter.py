import numpy as np
import pytest
from scipy.signal import sosfreqz

from default_vishwanath_options import LowpassSpec, default_vishwanath_options
from prefilter import design_chebyshev1_lowpass, prefilter
from segmentation_errors import ConfigurationError, EmptyInputError


def test_default_design_meets_band_edges():
    design = LowpassSpec()
    sos, order = design_chebyshev1_lowpass(design)
    assert order > 0
    assert sos.shape == ((order + 1) // 2, 6)

    _, h = sosfreqz(sos, worN=np.array([design.passband_edge, design.stopband_edge]))
    gain_db = 20 * np.log10(np.abs(h))
    assert gain_db[0] >= -design.passband_ripple - 1e-3
    assert gain_db[1] <= -design.stopband_attenuation + 1e-3


def test_output_length_matches_input():
    samples = np.random.RandomState(6).randn(3001)
    filtered = prefilter(samples)
    assert filtered.shape == samples.shape
    assert np.all(np.isfinite(filtered))


def test_silence_stays_silent():
    assert np.all(prefilter(np.zeros(4096)) == 0.0)


def test_high_frequency_is_removed():
    n = np.arange(8000)
    tone = np.sin(0.5 * n)
    filtered = prefilter(tone)
    assert np.max(np.abs(filtered)) < 0.05


def test_filter_is_causal():
    samples = np.random.RandomState(7).randn(2000)
    full = prefilter(samples)
    head = prefilter(samples[:1000])
    np.testing.assert_allclose(full[:1000], head)


def test_input_is_not_modified():
    samples = np.random.RandomState(8).randn(500)
    original = samples.copy()
    prefilter(samples)
    np.testing.assert_array_equal(samples, original)


@pytest.mark.parametrize('kwargs', [
    {'passband_edge': 0.0111, 'stopband_edge': 0.01},
    {'passband_edge': 0.02, 'stopband_edge': 0.02},
    {'passband_edge': 0.0},
    {'stopband_edge': 4.0},
    {'passband_ripple': 0.0},
    {'stopband_attenuation': 0.5},
    {'passband_edge': None},
    {'stopband_edge': float('nan')},
    {'passband_ripple': float('inf')},
    {'stopband_attenuation': None},
])
def test_rejects_invalid_design(kwargs):
    with pytest.raises(ConfigurationError):
        prefilter(np.ones(10), LowpassSpec(**kwargs))


def test_invalid_design_is_rejected_before_input():
    with pytest.raises(ConfigurationError):
        prefilter([], LowpassSpec(passband_edge=0.5, stopband_edge=0.1))


def test_rejects_empty_input():
    with pytest.raises(EmptyInputError):
        prefilter([])


def test_default_options():
    options = default_vishwanath_options()
    assert options.frame_size == 1024
    assert options.hop_size == 512
    assert options.lowpass.passband_edge == 0.01
    assert options.lowpass.passband_ripple == 1.0
    assert options.lowpass.stopband_edge == 0.0111
    assert options.lowpass.stopband_attenuation == 42
    assert options.validate() is options


@pytest.mark.parametrize('attr,value', [
    ('frame_size', 0),
    ('hop_size', -512),
    ('frame_size', 10.5),
    ('loudness_window_ms', 0),
    ('frame_size', None),
    ('hop_size', float('nan')),
    ('hop_size', float('inf')),
    ('loudness_window_ms', None),
])
def test_options_validation(attr, value):
    options = default_vishwanath_options()
    setattr(options, attr, value)
    with pytest.raises(ConfigurationError):
        options.validate()


def test_rejects_stereo_recording():
    with pytest.raises(ConfigurationError):
        prefilter(np.zeros((100, 2)))
