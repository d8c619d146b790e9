"""
Conversión matriz (ndarray de OpenCV, BGR) <-> bitmap (PIL.Image, "L"/"RGB").

Ojo con el color: to_bitmap copia los bytes tal cual, así que una matriz BGR
termina dentro de un bitmap "RGB" con rojo y azul intercambiados. Es el
comportamiento histórico y se conserva; pasar swap_channels=True para
corregirlo. to_matrix sí hace el swap BGR<->RGB, por lo que el ida y vuelta
a color NO es la identidad.
"""
import logging

import cv2 as cv
import numpy as np
from PIL import Image

from imshow.config import resample_filter

log = logging.getLogger(__name__)

GRAY = "L"
COLOR = "RGB"
# Modos de PIL de un solo canal (más alfa): se bajan a "L", no a "RGB"
_GRAY_MODES = ("1", "LA", "La", "I", "I;16", "I;16L", "I;16B", "I;16N", "F")


def channels_of(matrix) -> int:
    """Número de canales: 1 para (h, w) o (h, w, 1)."""
    return 1 if matrix.ndim == 2 else int(matrix.shape[2])


def bgr_to_rgb(matrix):
    """Intercambia el primer y tercer byte de cada pixel (BGR <-> RGB)."""
    return cv.cvtColor(matrix, cv.COLOR_BGR2RGB)


def to_bitmap(matrix, swap_channels: bool = False) -> Image.Image:
    """
    Matriz -> bitmap. Gris si tiene 1 canal, "RGB" en otro caso.
    Los bytes se copian sin validar: si no alcanzan, PIL lanza ValueError.
    """
    rows, cols = matrix.shape[:2]
    mode = GRAY if channels_of(matrix) == 1 else COLOR
    if swap_channels and mode == COLOR:
        matrix = bgr_to_rgb(matrix)
    log.debug("to_bitmap %dx%d modo=%s swap=%s", cols, rows, mode, swap_channels)
    return Image.frombytes(mode, (cols, rows), matrix.tobytes())


def to_matrix(bitmap: Image.Image):
    """
    Bitmap -> matriz. (h, w) para "L", (h, w, 3) para el resto, con swap
    BGR->RGB aplicado. Modos de gris (1, LA, I, F...) se pasan a "L";
    el resto (RGBA, P, CMYK...) a "RGB".
    """
    if bitmap.mode in _GRAY_MODES:
        bitmap = bitmap.convert(GRAY)
    elif bitmap.mode not in (GRAY, COLOR):
        bitmap = bitmap.convert(COLOR)
    w, h = bitmap.size
    data = np.frombuffer(bitmap.tobytes(), dtype=np.uint8)
    if bitmap.mode == GRAY:
        # frombuffer es de solo lectura; copiamos para que la matriz sea propia
        return data.reshape(h, w).copy()
    return bgr_to_rgb(data.reshape(h, w, 3))


def as_bitmap(image, swap_channels: bool = False) -> Image.Image:
    """
    Acepta matriz o bitmap indistintamente. Un ndarray pasa tal cual (sus
    bytes se copian sin mirar el dtype); listas y otras secuencias se leen
    como uint8.
    """
    if isinstance(image, Image.Image):
        return image
    if not isinstance(image, np.ndarray):
        image = np.asarray(image, dtype=np.uint8)
    return to_bitmap(image, swap_channels=swap_channels)


def stretch(bitmap: Image.Image, size, resample=None) -> Image.Image:
    """Estira el bitmap a (ancho, alto) exactos, sin mantener proporción."""
    w, h = size
    w, h = max(1, int(w)), max(1, int(h))
    if resample is None:
        resample = resample_filter()
    return bitmap.resize((w, h), resample)
