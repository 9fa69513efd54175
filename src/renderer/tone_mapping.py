# renderer/tone_mapping.py
import logging
from pathlib import Path
from typing import Union
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


def gamma_correct(averaged: np.ndarray) -> np.ndarray:
    """
    Convert an averaged linear radiance image to 8-bit RGB.

    Applies gamma 2 (square root), clamps to [0, 0.999] and scales by 256,
    so every channel lands in 0..255.
    """
    linear = np.nan_to_num(averaged, nan=0.0, posinf=1.0, neginf=0.0)
    mapped = np.sqrt(np.maximum(linear, 0.0))
    mapped = np.clip(mapped, 0.0, 0.999)
    return (256.0 * mapped).astype(np.uint8)


def save_image(averaged: np.ndarray, path: Union[str, Path]) -> Path:
    """
    Gamma-correct an averaged (height, width, 3) buffer and write it with
    Pillow. The format follows the file extension.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(gamma_correct(averaged)).save(path)
    logger.info("Wrote %s (%dx%d)", path, averaged.shape[1], averaged.shape[0])
    return path
