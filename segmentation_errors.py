# Exceptions and input checks shared by the event-detection stages.

import math
import numbers

import numpy as np


class SegmentationError(Exception):
    """Base class for every error raised by the event-detection pipeline."""


class ConfigurationError(SegmentationError, ValueError):
    """Invalid filter design or framing parameters."""


class EmptyInputError(SegmentationError, ValueError):
    """A stage received a zero-length sequence."""


def positive_real(value, name):
    """Return value as a float, or raise ConfigurationError unless it is finite and > 0."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
        raise ConfigurationError(f"{name} must be a finite number, got {value!r}")
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value!r}")
    return float(value)


def positive_int(value, name):
    """
    Return value as an int, or raise ConfigurationError.

    Integral floats such as 1024.0 are accepted.
    """
    value = positive_real(value, name)
    if not value.is_integer():
        raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
    return int(value)


def as_signal(x, name='samples'):
    """
    Convert x to a 1D float array.

    Column or row vectors are accepted; anything with more than one
    non-singleton axis (e.g. stereo audio) is rejected. Raises
    EmptyInputError if there is nothing to process.
    """
    signal = np.asarray(x, dtype=float)
    if sum(1 for size in signal.shape if size > 1) > 1:
        raise ConfigurationError(f"{name} must be one channel, got shape {signal.shape}")
    signal = signal.flatten()
    if signal.size == 0:
        raise EmptyInputError(f"{name} is empty")
    return signal


def as_matrix(x, name='spectrogram'):
    """
    Convert x to a 2D float array of shape (frames, bins).

    A 1D input is read as a single frame.
    """
    matrix = np.asarray(x, dtype=float)
    if matrix.ndim == 1:
        matrix = matrix[np.newaxis, :]
    if matrix.ndim != 2:
        raise ConfigurationError(f"{name} must be 2D (frames, bins), got {matrix.ndim}D")
    if matrix.shape[0] == 0 or matrix.shape[1] == 0:
        raise EmptyInputError(f"{name} is empty")
    return matrix
