# materials/texture_loader.py
import logging
import os
from PIL import Image, UnidentifiedImageError
import numpy as np
from materials.lambertian import Lambertian
from materials.textures import ImageTexture

logger = logging.getLogger(__name__)


def load_texture(image_path: str) -> ImageTexture:
    """
    Decode an image file into an ImageTexture of RGB values in [0, 1].

    Args:
        image_path: Anything Pillow can open; non-RGB modes are converted.

    Raises:
        FileNotFoundError: If the image file doesn't exist
        ValueError: If the file is not a readable image
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            data = np.asarray(img, dtype=np.float64) / 255.0
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Error loading texture {image_path}: {e}") from e

    logger.debug("Loaded texture %s (%dx%d)", image_path, data.shape[1], data.shape[0])
    return ImageTexture(data)


def create_image_material(image_path: str, material_class=None, **params):
    """Wrap the image at `image_path` in a material, Lambertian unless `material_class` says otherwise.

    Extra keyword arguments (a Metal fuzz, say) go to the material constructor.
    """
    if material_class is None:
        material_class = Lambertian
    return material_class(load_texture(image_path), **params)
