"""
Configuración por variables de entorno.

  IMSHOW_DEF_W / IMSHOW_DEF_H   tamaño por defecto de la ventana (600x800)
  IMSHOW_RESAMPLE               filtro al estirar: nearest|bilinear|bicubic|lanczos
  IMSHOW_LOG                    nivel de log para setup_logging (WARNING)
"""
import logging
import os

from PIL import Image

log = logging.getLogger(__name__)

_RESAMPLE = {
    "nearest": Image.NEAREST,
    "bilinear": Image.BILINEAR,
    "bicubic": Image.BICUBIC,
    "lanczos": Image.LANCZOS,
}


def default_size():
    """(ancho, alto) por defecto de la ventana."""
    w = int(os.environ.get("IMSHOW_DEF_W", 600))
    h = int(os.environ.get("IMSHOW_DEF_H", 800))
    return w, h


def resample_filter():
    name = os.environ.get("IMSHOW_RESAMPLE", "bilinear").strip().lower()
    if name not in _RESAMPLE:
        log.warning("IMSHOW_RESAMPLE=%r desconocido, uso bilinear", name)
        return Image.BILINEAR
    return _RESAMPLE[name]


def log_level() -> int:
    name = os.environ.get("IMSHOW_LOG", "WARNING").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING
