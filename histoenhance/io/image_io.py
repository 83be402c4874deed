# histoenhance/io/image_io.py
from typing import List, Sequence, Tuple

try:
    from PIL import Image
except ImportError as e:
    raise ImportError("Brak biblioteki Pillow. Zainstaluj: pip install Pillow") from e

from ..constants import SAMPLE_MAX
from ..errors import ImageFormatError, PixelCountError

_GRAY16 = ("I;16", "I;16L", "I;16B", "I;16N")


def read_image(path: str) -> Tuple[int, int, List[int]]:
    """Obraz w skali szarości (8 lub 16 bit) → (w, h, jasności wierszami od góry)."""
    with Image.open(path) as img:
        if img.mode in _GRAY16:
            img = img.convert("I")
        elif img.mode != "I":
            img = img.convert("L")
        w, h = img.size
        data = [max(0, min(SAMPLE_MAX, int(v))) for v in img.getdata()]
    return w, h, data


def write_preview(path: str, w: int, h: int, pixels: Sequence[int]) -> None:
    """
    Zapis wyniku jako zwykły obraz (format wg rozszerzenia).
    Próbki ≤ 255 → tryb "L", w przeciwnym razie 16-bit "I;16".
    """
    if len(pixels) != w * h:
        raise PixelCountError(f"Liczba pikseli {len(pixels)} != {w}×{h}.")
    if max(pixels, default=0) <= 255:
        img = Image.new("L", (w, h))
    else:
        img = Image.new("I;16", (w, h))
    img.putdata(list(pixels))
    try:
        img.save(path)
    except ValueError as e:
        # np. nieznane rozszerzenie pliku
        raise ImageFormatError(f"Nie udało się zapisać podglądu {path}: {e}") from e
