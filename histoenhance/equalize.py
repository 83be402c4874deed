# histoenhance/equalize.py
import logging
from typing import List, Sequence, Tuple

from .constants import OUT_RANGE, SAMPLE_MAX, SAMPLE_MIN
from .errors import InvalidRangeError, PixelCountError
from .histogram import build_cumulative, class_count
from .utils import clamp

logger = logging.getLogger(__name__)

Window = Tuple[int, int]


def check_range(a: int, b: int) -> None:
    if a > b:
        raise InvalidRangeError(f"Nieprawidłowy zakres wyjściowy: [{a}, {b}] (b < a).")
    if a < SAMPLE_MIN or b > SAMPLE_MAX:
        raise InvalidRangeError(
            f"Zakres wyjściowy [{a}, {b}] poza {SAMPLE_MIN}..{SAMPLE_MAX}."
        )


def check_size(pixels: Sequence[int], width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise PixelCountError(f"Nieprawidłowy rozmiar obrazu: {width}×{height}.")
    if len(pixels) != width * height:
        raise PixelCountError(
            f"Liczba pikseli {len(pixels)} != {width}×{height} = {width * height}."
        )


def class_mapping(table: Sequence[float], out_range: Window) -> List[int]:
    """
    Mapa klasa → jasność wyjściowa, liczona z dystrybuanty:
    (table[i] - table[0]) / (table[-1] - table[0]) * (b - a) + a,
    obcięta do liczby całkowitej (w stronę zera) i ograniczona do [a, b].

    Gdy mianownik jest zerowy (brak pikseli w oknie albo wszystkie w klasie 0),
    każda klasa dostaje wartość a.
    """
    a, b = out_range
    lo = table[0]
    denom = table[-1] - lo
    if denom == 0:
        logger.warning("Zdegenerowane okno (stała dystrybuanta) – wszystkie piksele → %d", a)
        return [a] * len(table)

    mapping = [0] * len(table)
    for i, cum in enumerate(table):
        value = int((cum - lo) / denom * (b - a) + a)
        mapping[i] = clamp(value, a, b)
    return mapping


def remap(
    pixels: Sequence[int], table: Sequence[float], window: Window, out_range: Window
) -> List[int]:
    """Przemapowanie pikseli przez dystrybuantę; jasności spoza okna → skrajne klasy."""
    c, d = window
    top = d - c
    mapping = class_mapping(table, out_range)
    return [mapping[clamp(v - c, 0, top)] for v in pixels]


def equalize_window(
    pixels: Sequence[int],
    width: int,
    height: int,
    window: Window,
    out_range: Window = OUT_RANGE,
) -> List[int]:
    """
    Wyrównanie histogramu w oknie [c, d] do zakresu [a, b].

    pixels: lista jasności 16-bit (wierszami od góry), długość = width * height.
    Zwraca nową listę tej samej długości; wejście nie jest modyfikowane.
    """
    c, d = window
    a, b = out_range
    check_size(pixels, width, height)
    class_count(c, d)
    check_range(a, b)

    table = build_cumulative(pixels, c, d)
    out = remap(pixels, table, (c, d), (a, b))
    logger.debug("Wyrównano %d pikseli: okno [%d, %d] → [%d, %d]", len(out), c, d, a, b)
    return out
