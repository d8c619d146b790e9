#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
d03 — Orden de canales
Abre dos ventanas con las mismas barras BGR (azul, verde, rojo):
  - "tal cual": bytes copiados sin swap, rojo y azul salen cambiados
  - "swap": swap_channels=True, colores correctos
"""
import cv2 as cv
import numpy as np

from imshow.core.registry import register
from imshow.core.window import display

_BARS_BGR = [(255, 0, 0), (0, 255, 0), (0, 0, 255)]  # azul, verde, rojo


def _bars(w=300, h=120):
    img = np.zeros((h, w, 3), np.uint8)
    step = w // len(_BARS_BGR)
    for i, color in enumerate(_BARS_BGR):
        cv.rectangle(img, (i * step, 0), ((i + 1) * step - 1, h - 1), color, -1)
    return img


@register("d03", "Orden de canales BGR/RGB")
def run():
    img = _bars()
    display(img, "d03 tal cual (rojo y azul salen cambiados)", (420, 200))
    display(img, "d03 swap (azul|verde|rojo correcto)", (420, 200), swap_channels=True)
