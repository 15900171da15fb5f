# Spectrogram stage of the event-detection function from:
# Vishwanath et al., "Automatic segmentation of Phonocardiogram using the
# occurrence of the cardiac events," 2017.
#
# Python implementation.

import numpy as np

from get_frames import get_frames
from segmentation_errors import as_matrix


def get_frame_magnitude(frames):
    """
    Log-compressed magnitude spectrum of each frame.

    Only bins 0..(L-1)//2 are kept (DC and the positive frequencies), where L
    is the frame length, and each magnitude is compressed with log(|X| + 1).
    A 1024 sample frame gives 512 bins.

    Inputs:
    frames: array of shape (n_frames, L)

    Outputs:
    spectrogram: array of shape (n_frames, (L-1)//2 + 1)
    """
    frames = as_matrix(frames, 'frames')
    frame_length = frames.shape[1]
    n_bins = (frame_length - 1) // 2 + 1

    # rfft returns L//2 + 1 bins, which always covers the ones we keep
    spectrum = np.fft.rfft(frames, axis=1)[:, :n_bins]
    return np.log(np.abs(spectrum) + 1)


def make_spectrogram(filtered_sound, frame_size=1024, hop=512):
    return get_frame_magnitude(get_frames(filtered_sound, frame_size, hop))
