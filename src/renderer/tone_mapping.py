# renderer/tone_mapping.py
import numpy as np


def clamp_to_rgb8(linear: np.ndarray) -> np.ndarray:
    """
    Map linear colors to 8-bit channels: scale by 255, clamp to [0, 255] and
    round half up.
    """
    scaled = np.clip(np.asarray(linear, dtype=np.float64) * 255.0, 0.0, 255.0)
    return np.floor(scaled + 0.5).astype(np.uint8)


def reinhard_tone_mapping(linear: np.ndarray, exposure: float = 1.0,
                          white_point: float = 1.0, gamma: float = 2.2) -> np.ndarray:
    """
    Apply Reinhard tone mapping and gamma correction to a linear image,
    compressing highlights instead of clipping them.
    """
    scaled = np.clip(np.asarray(linear, dtype=np.float64), 0.0, None) * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = mapped ** (1.0 / gamma)
    return clamp_to_rgb8(mapped)
