# Python implementation of the event-detection pipeline described in:
# Vishwanath et al., "Automatic segmentation of Phonocardiogram using the
# occurrence of the cardiac events," 2017.
#
#   noisy sound --prefilter--> filtered sound --make_spectrogram--> spectrogram
#   --barkscale--> bark scaled spectrogram --smoothen--> smooth spectrogram
#   --loudness_evaluation--> event detection function

import logging

import numpy as np
import matplotlib.pyplot as plt

from default_vishwanath_options import default_vishwanath_options
from prefilter import prefilter
from make_spectrogram import make_spectrogram
from barkscale import barkscale
from smoothen import smoothen
from loudness_evaluation import loudness_evaluation, hamming_window_length, smooth_loudness
from segmentation_errors import as_signal

logger = logging.getLogger("vishwanath.pipeline")


def run_vishwanath_event_detection(audio_data, fs=None, options=None, figures=False, return_stages=False):
    """
    Compute the event-detection function of a PCG recording.

    Local extrema of the result mark acoustic events: positive peaks are
    onsets and negative ones offsets, which is what locating S1 and S2 (and
    from them systole and diastole) relies on.

    Inputs:
    audio_data: the raw PCG samples
    fs: sampling frequency of audio_data. Only needed to smooth the loudness,
    which works in milliseconds.
    options: a VishwanathOptions (default_vishwanath_options() if omitted)
    figures: boolean to show plots
    return_stages: return every intermediate result instead of only the
    event-detection function

    Outputs:
    event_detection_function: one value per spectrogram frame, or when
    return_stages is set, a dict with the keys 'filtered', 'spectrogram',
    'bark', 'smooth' and 'event_detection'
    """
    if options is None:
        options = default_vishwanath_options()
    options.validate()
    figures = figures or options.figures

    if options.smooth_loudness:
        # Reject a missing fs before doing any work
        window_length = hamming_window_length(options.loudness_window_ms, fs, options.hop_size)

    noisy_sound = as_signal(audio_data, 'audio_data')
    logger.info("[EVENTS] %d samples, frame=%d hop=%d",
                len(noisy_sound), options.frame_size, options.hop_size)

    # 1. Lowpass prefilter
    filtered_sound = prefilter(noisy_sound, options.lowpass)

    # 2. Framed log-magnitude spectrogram
    spectrogram = make_spectrogram(filtered_sound, options.frame_size, options.hop_size)

    # 3. Bark scale
    bark_spectrogram = barkscale(spectrogram)

    # 4. Smoothing
    smooth_spectrogram = smoothen(bark_spectrogram)

    # 5. Loudness
    event_detection = loudness_evaluation(smooth_spectrogram)
    if options.smooth_loudness:
        event_detection = smooth_loudness(event_detection, window_length)

    logger.debug("[EVENTS] spectrogram %s -> %d loudness values",
                 spectrogram.shape, len(event_detection))

    if figures:
        print(f"Frames: {spectrogram.shape[0]}, bins: {spectrogram.shape[1]}")
        _plot_event_detection(smooth_spectrogram, event_detection, fs, options.hop_size)

    if return_stages:
        return {
            'filtered': filtered_sound,
            'spectrogram': spectrogram,
            'bark': bark_spectrogram,
            'smooth': smooth_spectrogram,
            'event_detection': event_detection,
        }
    return event_detection


def _plot_event_detection(smooth_spectrogram, event_detection, fs, hop):
    if fs:
        t = np.arange(len(event_detection)) * hop / fs
        xlabel = 'Time (s)'
    else:
        t = np.arange(len(event_detection))
        xlabel = 'Frame'

    plt.figure('Smooth spectrogram')
    # frames along x, bins along y, as in a heatmap of the spectrogram rows
    plt.pcolormesh(smooth_spectrogram.T, shading='auto')
    plt.xlabel('Frame')
    plt.ylabel('Bin')
    plt.colorbar()

    plt.figure('Event detection function')
    plt.plot(t, event_detection, 'k')
    plt.xlabel(xlabel)
    plt.ylabel('Loudness')
    plt.show()
