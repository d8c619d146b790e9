"""
imshow — muestra una matriz de OpenCV (o un bitmap de PIL) en una ventana Tk.

    import imshow
    imshow.display(img)                       # ventana 600x800 sin título
    imshow.display(img, "titulo", (800, 600))
    imshow.wait()                             # bloquea hasta cerrar
"""
from imshow.core.convert import (  # noqa: F401
    as_bitmap,
    bgr_to_rgb,
    channels_of,
    stretch,
    to_bitmap,
    to_matrix,
)
from imshow.core.window import (  # noqa: F401
    ImshowError,
    ImshowPanel,
    ImshowWindow,
    display,
    imshow,
    wait,
)

__version__ = "0.1.0"
