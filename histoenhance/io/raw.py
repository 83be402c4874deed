# histoenhance/io/raw.py
import logging
import struct
from typing import List, Sequence

from ..constants import BYTE_ORDER, SAMPLE_BYTES, SAMPLE_MAX, SAMPLE_MIN
from ..errors import PixelCountError, RawFormatError

logger = logging.getLogger(__name__)

# Plik RAW: same próbki 16-bit bez znaku, wierszami od góry, bez nagłówka.
# Wymiary podaje wywołujący.


def _fmt(n: int, byteorder: str) -> str:
    if byteorder == "little":
        return f"<{n}H"
    if byteorder == "big":
        return f">{n}H"
    raise RawFormatError(f"Nieznana kolejność bajtów: {byteorder!r} (little/big).")


def is_file(path: str) -> bool:
    """Czy plik istnieje i da się go otworzyć do odczytu."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def read_raw(path: str, width: int, height: int, byteorder: str = BYTE_ORDER) -> List[int]:
    size = width * height
    if width <= 0 or height <= 0:
        raise PixelCountError(f"Nieprawidłowy rozmiar obrazu: {width}×{height}.")
    fmt = _fmt(size, byteorder)
    total = size * SAMPLE_BYTES
    with open(path, "rb") as f:
        buf = f.read(total)
    if len(buf) < total:
        raise RawFormatError(
            f"Za mało danych w pliku RAW: {len(buf)} < {total} bajtów ({width}×{height})."
        )
    logger.info("Wczytano %s: %d×%d (%s-endian)", path, width, height, byteorder)
    return list(struct.unpack(fmt, buf))


def write_raw(
    path: str,
    width: int,
    height: int,
    pixels: Sequence[int],
    byteorder: str = BYTE_ORDER,
) -> None:
    size = width * height
    if len(pixels) != size:
        raise PixelCountError(f"Liczba pikseli {len(pixels)} != {width}×{height} = {size}.")
    fmt = _fmt(size, byteorder)
    try:
        data = struct.pack(fmt, *pixels)
    except struct.error as e:
        raise RawFormatError(
            f"Próbki muszą być liczbami całkowitymi {SAMPLE_MIN}..{SAMPLE_MAX}: {e}"
        ) from e
    with open(path, "wb") as f:
        f.write(data)
    logger.info("Zapisano %s: %d×%d (%s-endian)", path, width, height, byteorder)
