# renderer/image_io.py
import os
from typing import TextIO
import numpy as np
from PIL import Image
from .tone_mapping import to_8bit


def write_ppm(linear_image: np.ndarray, out: TextIO):
    """
    Writes a plain text (P3) PPM: a three line header followed by one
    "R G B" line per pixel in raster order.
    """
    pixels = to_8bit(linear_image)
    height, width, _ = pixels.shape
    out.write(f"P3\n{width} {height}\n255\n")
    for r, g, b in pixels.reshape(-1, 3):
        out.write(f"{r} {g} {b}\n")


def save_image(linear_image: np.ndarray, path: str):
    """
    Saves the image to path. ".ppm" files are written as plain text PPM,
    anything else goes through Pillow and is chosen by extension.
    """
    extension = os.path.splitext(path)[1].lower()
    if extension == ".ppm":
        with open(path, "w") as f:
            write_ppm(linear_image, f)
        return
    Image.fromarray(to_8bit(linear_image)).save(path)
