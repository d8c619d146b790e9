"""d04 — Bitmap de PIL directo (sin pasar por matriz)."""
from PIL import Image, ImageDraw

from imshow.core.registry import register
from imshow.core.window import display


@register("d04", "Bitmap PIL directo")
def run():
    img = Image.new("RGB", (200, 200), "#0d0f14")
    draw = ImageDraw.Draw(img)
    draw.ellipse((20, 20, 180, 180), outline="#8adcff", width=6)
    draw.line((20, 180, 180, 20), fill="#1a8fe6", width=4)
    display(img, "d04 bitmap")
