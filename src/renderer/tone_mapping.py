# renderer/tone_mapping.py
import numpy as np

def gamma_correct(linear: np.ndarray, gamma: float = 2.0) -> np.ndarray:
    """
    Apply gamma correction to a linear image. Negative values are clipped first.
    """
    return np.clip(linear, 0.0, None) ** (1.0 / gamma)

def reinhard_tone_mapping(linear: np.ndarray, exposure=1.0, white_point=1.0, gamma=2.2) -> np.ndarray:
    """
    Apply Reinhard tone mapping followed by gamma correction.
    """
    scaled = np.clip(linear, 0.0, None) * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    return mapped ** (1.0 / gamma)

def to_rgb8(image: np.ndarray) -> np.ndarray:
    """
    Quantize [0, 1] colors to 8 bits, truncating 255.99 * c.
    """
    return (255.99 * np.clip(image, 0.0, 1.0)).astype(np.uint8)
