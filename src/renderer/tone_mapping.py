# renderer/tone_mapping.py
import numpy as np
from core.errors import InvariantError


def check_linear_image(linear_image: np.ndarray) -> np.ndarray:
    """
    Raises InvariantError if any channel lies outside [0, 1]. Values are never
    clamped: an out-of-range channel means the light transport math is wrong.
    """
    bad = (linear_image < 0.0) | (linear_image > 1.0) | np.isnan(linear_image)
    if bad.any():
        y, x, c = np.argwhere(bad)[0]
        channel = ("red", "green", "blue")[c]
        raise InvariantError(
            f"pixel ({x}, {y}) has invalid {channel} value {linear_image[y, x, c]}. "
            "It must be between 0 and 1"
        )
    return linear_image


def linear_to_gamma(linear_image: np.ndarray) -> np.ndarray:
    """
    Gamma 2 correction: sqrt of positive values, zero otherwise.
    """
    return np.where(linear_image > 0, np.sqrt(np.maximum(linear_image, 0.0)), 0.0)


def to_8bit(linear_image: np.ndarray) -> np.ndarray:
    """
    Converts a linear image with channels in [0, 1] to gamma corrected uint8.
    """
    check_linear_image(linear_image)
    mapped = linear_to_gamma(linear_image)
    return np.floor(255.999 * mapped).astype("uint8")
