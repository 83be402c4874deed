import logging

from .errors import InvalidWindowError

logger = logging.getLogger(__name__)


def class_count(c, d):
    """Liczba klas (jasności) w oknie [c, d]; rzuca błąd, gdy okno jest puste."""
    class_num = d - c + 1
    if class_num <= 0:
        raise InvalidWindowError(f"Nieprawidłowe okno: [{c}, {d}] (d < c).")
    return class_num


def window_histogram(pixels, c, d):
    """
    Histogram zawężony do okna [c, d] (lista d-c+1 elementów).
    Piksele spoza okna są pomijane – nie wpływają na rozkład.
    """
    hist = [0] * class_count(c, d)
    for v in pixels:
        if c <= v <= d:
            hist[v - c] += 1
    return hist


def build_cumulative(pixels, c, d):
    """
    Dystrybuanta (histogram skumulowany) w oknie [c, d].
    table[i] = liczba pikseli o jasności w [c, c+i].
    """
    hist = window_histogram(pixels, c, d)

    table = [0.0] * len(hist)
    cumsum = 0.0
    for i, n in enumerate(hist):
        cumsum += n
        table[i] = cumsum

    logger.debug(
        "Okno [%d, %d]: %d klas, %d pikseli w oknie, %d w klasie 0",
        c,
        d,
        len(table),
        int(table[-1]),
        int(table[0]),
    )
    return table


def auto_window(pixels):
    """Najciemniejsza i najjaśniejsza jasność obecna w obrazie (c, d)."""
    if not pixels:
        raise InvalidWindowError("Pusty obraz – nie da się wyznaczyć okna.")
    return min(pixels), max(pixels)
