# Python implementation of the spectrogram smoothing step.

from scipy.signal import windows

from segmentation_errors import as_matrix


def smoothen(spectrogram):
    """
    Weight every frame of the bark scaled spectrogram with a Hann window.

    The window is symmetric and as long as the number of bins, and it is
    applied to each frame's bin vector. There is no convolution across
    neighbouring frames, so the result has the same shape as the input.
    """
    spectrogram = as_matrix(spectrogram, 'spectrogram')
    hann = windows.hann(spectrogram.shape[1], sym=True)
    return spectrogram * hann[None, :]
