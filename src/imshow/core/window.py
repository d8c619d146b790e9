"""
Ventana Tk que muestra un bitmap estirado al tamaño del panel.

Todas las ventanas cuelgan de una raíz tk.Tk oculta (una por proceso).
display() solo pide que la ventana se haga visible y regresa; el repintado
ocurre cuando corre el loop de Tk (wait() o el mainloop de la app).
"""
import logging
import tkinter as tk

from PIL import ImageTk

from imshow.config import default_size
from imshow.core.convert import as_bitmap, stretch

log = logging.getLogger(__name__)

_ROOT = None


class ImshowError(RuntimeError):
    """No hay sistema de ventanas disponible (sin $DISPLAY, Tk roto...)."""


def get_root() -> tk.Tk:
    """Raíz oculta compartida; se crea la primera vez."""
    global _ROOT
    if _ROOT is None:
        try:
            root = tk.Tk()
        except tk.TclError as e:
            raise ImshowError(f"No se pudo abrir la pantalla: {e}") from e
        root.withdraw()
        _ROOT = root
    return _ROOT


def open_windows():
    if _ROOT is None:
        return []
    return [w for w in _ROOT.winfo_children() if isinstance(w, ImshowWindow)]


def shutdown() -> None:
    """Destruye la raíz y todas sus ventanas."""
    global _ROOT
    if _ROOT is not None:
        root, _ROOT = _ROOT, None
        root.destroy()


class ImshowPanel(tk.Canvas):
    """Canvas que dibuja el bitmap estirado a su tamaño en cada <Configure>."""

    def __init__(self, master, bitmap, **kw):
        kw.setdefault("bg", "#000")
        super().__init__(master, highlightthickness=0, bd=0, **kw)
        self.bitmap = bitmap
        self._photo = None  # Tk no guarda la referencia; si se pierde, la imagen desaparece
        self._item = self.create_image(0, 0, anchor="nw")
        self.bind("<Configure>", self._on_configure)

    def _on_configure(self, event):
        self.repaint(event.width, event.height)

    def repaint(self, width=None, height=None):
        if width is None:
            width = self.winfo_width()
        if height is None:
            height = self.winfo_height()
        img = stretch(self.bitmap, (width, height))
        self._photo = ImageTk.PhotoImage(img, master=self)
        self.itemconfigure(self._item, image=self._photo)


class ImshowWindow(tk.Toplevel):
    """
    Ventana redimensionable con un único ImshowPanel que la llena.
    exit_on_close=True termina el proceso al cerrarla (SystemExit).
    """

    def __init__(self, master, bitmap, title="", size=None, exit_on_close=False):
        super().__init__(master)
        self.withdraw()
        self.exit_on_close = exit_on_close

        w, h = size if size is not None else default_size()
        self.title(title)
        self.geometry(f"{int(w)}x{int(h)}")
        self.resizable(True, True)

        self.panel = ImshowPanel(self, bitmap)
        self.panel.pack(fill="both", expand=True)
        self.protocol("WM_DELETE_WINDOW", self.close)

    def close(self):
        master = self.master
        self.destroy()
        if self.exit_on_close:
            log.info("Ventana cerrada, terminando proceso")
            raise SystemExit(0)
        # Última ventana: soltar el mainloop de wait()
        if not any(isinstance(w, ImshowWindow) for w in master.winfo_children()):
            master.quit()


def display(image, title="", size=None, *, exit_on_close=False, swap_channels=False) -> None:
    """
    Muestra una matriz (ndarray BGR/gris) o un bitmap (PIL.Image).

      display(img)
      display(img, "titulo")
      display(img, "titulo", (ancho, alto))

    Regresa en cuanto la ventana se pidió visible; llamar wait() para
    bloquear hasta que el usuario cierre las ventanas.
    """
    bitmap = as_bitmap(image, swap_channels=swap_channels)
    win = ImshowWindow(get_root(), bitmap, title=title, size=size,
                       exit_on_close=exit_on_close)
    win.deiconify()
    win.update_idletasks()
    log.info("display '%s' %dx%d modo=%s", title, bitmap.width, bitmap.height, bitmap.mode)


imshow = display


def wait() -> None:
    """Corre el loop de Tk hasta que se cierre la última ventana."""
    if not open_windows():
        return
    _ROOT.mainloop()
