# Loudness evaluation step of the event-detection function from:
# Vishwanath et al., "Automatic segmentation of Phonocardiogram using the
# occurrence of the cardiac events," 2017.
#
# Python implementation.

import numpy as np
from scipy.signal import windows

from segmentation_errors import as_matrix, as_signal, positive_int, positive_real


def loudness_evaluation(smooth_spectrogram):
    """
    Reduce the smoothed spectrogram to one loudness value per frame.

    L(t) = sum_k E_k(t) / N

    where E_k(t) is the kth frequency band of frame t. N is the number of
    frames in the whole spectrogram, not the number of bands.

    Inputs:
    smooth_spectrogram: array of shape (n_frames, n_bins)

    Outputs:
    event_detection_function: array of length n_frames
    """
    smooth_spectrogram = as_matrix(smooth_spectrogram, 'smooth_spectrogram')
    n_frames = smooth_spectrogram.shape[0]
    return smooth_spectrogram.sum(axis=1) / n_frames


def hamming_window_length(window_ms, sampling_frequency, hop):
    """
    Number of spectrogram frames covered by window_ms milliseconds.

    The frame rate is sampling_frequency / hop. Always at least 1.
    """
    window_ms = positive_real(window_ms, 'window_ms')
    sampling_frequency = positive_real(sampling_frequency, 'sampling_frequency')
    hop = positive_int(hop, 'hop')
    frame_rate = sampling_frequency / hop
    return max(1, int(round(window_ms * 1e-3 * frame_rate)))


def smooth_loudness(event_detection_function, window_length):
    """
    Convolve the loudness function with a unit-sum Hamming window.

    In the smoothed loudness, positive peaks mark onsets and negative ones
    offsets. The output keeps the input length (mode='same').
    """
    window_length = positive_int(window_length, 'window_length')
    loudness = as_signal(event_detection_function, 'event_detection_function')

    hamming = windows.hamming(window_length, sym=True)
    hamming = hamming / hamming.sum()

    smoothed = np.convolve(loudness, hamming, mode='same')
    # mode='same' returns max(M, N) samples
    if len(smoothed) > len(loudness):
        start = (len(smoothed) - len(loudness)) // 2
        smoothed = smoothed[start:start + len(loudness)]
    return smoothed
