"""Presentation helpers: turn a rendered frame into something you can look at."""

import numpy as np
from numpy.typing import NDArray

import matplotlib.pyplot as plt

from raytracer.color import Color
from raytracer.frame import Frame


def frame_to_image(frame: Frame[Color]) -> NDArray[np.uint8]:
    """Return an opaque ``(height, width, 3)`` RGB byte image of ``frame``.

    Alpha holds accumulated light, not coverage, and is dropped.
    """
    image = np.zeros((frame.height(), frame.width(), 3), dtype=np.uint8)
    for y in range(frame.height()):
        for x in range(frame.width()):
            image[y, x] = frame.at(x, y).clamped().as_rgb_u8s()
    return image


def show_frame(frame: Frame[Color]) -> None:
    plt.imshow(frame_to_image(frame))
    plt.show(block=True)


def save_frame(frame: Frame[Color], path) -> None:
    plt.imsave(path, frame_to_image(frame))
