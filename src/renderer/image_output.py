# renderer/image_output.py
import os
import sys
from typing import TextIO
import numpy as np
from PIL import Image

def format_ppm(rgb8: np.ndarray) -> str:
    """
    Formats an 8-bit (height x width x 3) image as plain-text PPM (P3),
    top row first.
    """
    height, width, _ = rgb8.shape
    lines = [f"P3\n{width} {height}\n255"]
    lines.extend(f"{r} {g} {b}" for r, g, b in rgb8.reshape(-1, 3).tolist())
    return "\n".join(lines) + "\n"

def write_ppm(stream: TextIO, rgb8: np.ndarray):
    stream.write(format_ppm(rgb8))

def save_image(path: str, rgb8: np.ndarray):
    """
    Saves an 8-bit image. "-" writes PPM text to stdout, a .ppm path writes
    PPM text, anything else goes through Pillow.
    """
    if path == "-":
        write_ppm(sys.stdout, rgb8)
        return
    if os.path.splitext(path)[1].lower() == ".ppm":
        with open(path, "w") as f:
            write_ppm(f, rgb8)
        return
    Image.fromarray(np.ascontiguousarray(rgb8)).save(path)
