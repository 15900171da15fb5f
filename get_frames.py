# Python implementation of the framing step used to build the spectrogram.

import numpy as np

from segmentation_errors import as_signal, positive_int


def get_frames(samples, frame_size=1024, hop=512):
    """
    Slice a signal into overlapping, zero-padded frames.

    Frames start at 0, hop, 2*hop, ... for every start offset strictly less
    than the signal length, so the last admissible start is len(samples) - 1
    and there are ceil(len(samples) / hop) frames. A frame that runs past the
    end of the signal is padded with zeros up to frame_size.

    Inputs:
    samples: the (1D) signal
    frame_size: number of samples in each frame
    hop: distance in samples between consecutive frame starts

    Outputs:
    frames: array of shape (n_frames, frame_size)
    """
    frame_size = positive_int(frame_size, 'frame_size')
    hop = positive_int(hop, 'hop')

    signal = as_signal(samples, 'samples')
    n = len(signal)

    starts = np.arange(0, n, hop)

    # Pad once so every frame can be read with a single fancy index
    padded_length = starts[-1] + frame_size
    padded = np.zeros(max(n, padded_length))
    padded[:n] = signal

    idx = starts[:, None] + np.arange(frame_size)[None, :]
    return padded[idx]
