"""
d02 — Degradado en gris (matriz de 1 canal -> bitmap "L").
Estirar la ventana deforma el degradado: el panel no mantiene proporción.
"""
import numpy as np

from imshow.core.registry import register
from imshow.core.window import display


@register("d02", "Degradado en gris")
def run(width=256, height=64):
    row = np.linspace(0, 255, width).astype(np.uint8)
    img = np.tile(row, (height, 1))
    display(img, "d02 gris", (512, 256))
