import argparse
import logging
import os

from .constants import (
    APP_TITLE,
    BYTE_ORDER,
    IMAGE_EXTS,
    MSG_FAIL,
    MSG_NO_FILE,
    MSG_OK,
    OUT_RANGE,
    PROMPT_DST,
    PROMPT_HEIGHT,
    PROMPT_MAXV,
    PROMPT_MINV,
    PROMPT_SRC,
    PROMPT_WIDTH,
)
from .equalize import equalize_window
from .errors import HistoEnhanceError, PixelCountError
from .histogram import auto_window
from .io.image_io import read_image, write_preview
from .io.raw import is_file, read_raw, write_raw
from .logging_setup import setup_logging
from .utils import parts

logger = logging.getLogger(__name__)


def load_source(src, width=None, height=None, byteorder=BYTE_ORDER):
    """
    Źródło: RAW (wymiary podaje wywołujący) albo obraz PNG/TIFF/... przez Pillow
    (wymiary z pliku; podane width/height muszą się zgadzać).
    """
    if os.path.splitext(src)[1].lower() not in IMAGE_EXTS:
        if width is None or height is None:
            raise PixelCountError(f"Plik RAW {src} wymaga podania rozmiaru.")
        return width, height, read_raw(src, width, height, byteorder)
    w, h, pixels = read_image(src)
    if (width, height) != (None, None) and (width, height) != (w, h):
        raise PixelCountError(f"Obraz {src} ma rozmiar {w}×{h}, podano {width}×{height}.")
    logger.info("Wczytano obraz %s: %d×%d", src, w, h)
    return w, h, pixels


def process(
    dst,
    src,
    width,
    height,
    minv,
    maxv,
    out_range=OUT_RANGE,
    byteorder=BYTE_ORDER,
    preview=None,
):
    """
    Wczytaj RAW (lub obraz) → wyrównaj histogram w oknie [minv, maxv] → zapisz RAW.
    minv/maxv = None → okno z najciemniejszej i najjaśniejszej próbki.
    Zwraca True/False; przy błędzie żaden plik wyjściowy nie zostaje na dysku.
    """
    # pliki utworzone w tym wywołaniu – usuwane przy błędzie
    created = []
    try:
        width, height, imgv = load_source(src, width, height, byteorder)
        if minv is None or maxv is None:
            minv, maxv = auto_window(imgv)
            logger.info("Okno automatyczne: [%d, %d]", minv, maxv)
        jmgv = equalize_window(imgv, width, height, (minv, maxv), out_range)
        # podgląd przed RAW – RAW zapisywany jako ostatni
        if preview:
            if not os.path.exists(preview):
                created.append(preview)
            write_preview(preview, width, height, jmgv)
            logger.info("Podgląd zapisany: %s", preview)
        if not os.path.exists(dst):
            created.append(dst)
        write_raw(dst, width, height, jmgv, byteorder)
    except (HistoEnhanceError, OSError, MemoryError) as e:
        logger.error("Przetwarzanie %s nie powiodło się: %s", src, e)
        for path in created:
            if os.path.exists(path):
                os.remove(path)
        return False
    return True


def ask_params(ask=None):
    """Parametry z konsoli, w kolejności jak w pierwotnym programie; None gdy brak pliku."""
    ask = ask or input
    src = ask(PROMPT_SRC).strip()
    if not is_file(src):
        print(MSG_NO_FILE.format(src))
        return None
    width = int(ask(PROMPT_WIDTH))
    height = int(ask(PROMPT_HEIGHT))
    minv = int(ask(PROMPT_MINV))
    maxv = int(ask(PROMPT_MAXV))
    dst = ask(PROMPT_DST).strip()
    return dst, src, width, height, minv, maxv


def _pair(txt):
    try:
        a, b = (int(p) for p in parts(txt, 2))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"oczekiwano dwóch liczb 'x,y': {txt!r}") from e
    return a, b


def _window(txt):
    if txt.strip().lower() == "auto":
        return None
    return _pair(txt)


def build_parser():
    p = argparse.ArgumentParser(
        prog="histoenhance",
        description=APP_TITLE,
        epilog="Bez argumentów program pyta o parametry w konsoli.",
    )
    p.add_argument(
        "src", nargs="?", help="wejściowy plik RAW (16-bit, bez nagłówka) albo PNG/TIFF"
    )
    p.add_argument("dst", nargs="?", help="wyjściowy plik RAW")
    p.add_argument("--size", type=_pair, metavar="W,H", help="szerokość,wysokość (dla RAW)")
    p.add_argument(
        "--window",
        type=_window,
        default=None,
        metavar="C,D",
        help="okno jasności (c,d) albo 'auto' (domyślnie)",
    )
    p.add_argument(
        "--range",
        dest="out_range",
        type=_pair,
        default=OUT_RANGE,
        metavar="A,B",
        help="zakres wyjściowy (domyślnie %(default)s)",
    )
    p.add_argument("--byteorder", choices=("little", "big"), default=BYTE_ORDER)
    p.add_argument("--preview", metavar="PATH", help="dodatkowo zapisz PNG/TIFF (Pillow)")
    p.add_argument("--log-level", default="WARNING")
    p.add_argument("--log-file", metavar="PATH")
    return p


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    if args.src is None:
        try:
            params = ask_params()
        except (ValueError, EOFError) as e:
            logger.error("Nieprawidłowe dane wejściowe: %s", e)
            print(MSG_FAIL)
            return 1
        if params is None:
            return 1
        flag = process(*params)
    else:
        is_image = os.path.splitext(args.src)[1].lower() in IMAGE_EXTS
        if args.dst is None or (args.size is None and not is_image):
            parser.error("w trybie argumentów wymagane są: src dst --size W,H")
        if not is_file(args.src):
            print(MSG_NO_FILE.format(args.src))
            return 1
        width, height = args.size if args.size else (None, None)
        minv, maxv = args.window if args.window else (None, None)
        flag = process(
            args.dst,
            args.src,
            width,
            height,
            minv,
            maxv,
            out_range=args.out_range,
            byteorder=args.byteorder,
            preview=args.preview,
        )

    print(MSG_OK if flag else MSG_FAIL)
    return 0 if flag else 1
