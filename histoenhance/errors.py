# histoenhance/errors.py


class HistoEnhanceError(ValueError):
    """Bazowy błąd przetwarzania."""


class InvalidWindowError(HistoEnhanceError):
    """Okno (c, d) nie daje dodatniej liczby klas."""


class InvalidRangeError(HistoEnhanceError):
    """Zakres wyjściowy (a, b) jest pusty lub wychodzi poza 16 bitów."""


class PixelCountError(HistoEnhanceError):
    """Liczba pikseli nie zgadza się z szerokością × wysokością."""


class RawFormatError(HistoEnhanceError):
    """Plik RAW za krótki albo próbki spoza 16 bitów."""


class ImageFormatError(HistoEnhanceError):
    """Pillow nie zapisze obrazu w tym formacie (rozszerzenie, tryb)."""
