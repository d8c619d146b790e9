import cv2 as cv
import numpy as np

from imshow.core.registry import register
from imshow.core.window import display


@register("d01", "Demo: Hola imshow")
def run():
    img = np.full((300, 600, 3), 30, np.uint8)
    cv.putText(img, "Hola imshow [cierra la ventana]", (20, 160),
               cv.FONT_HERSHEY_SIMPLEX, 0.8, (255, 255, 255), 2)
    display(img, "Demo d01")
