import logging
import struct

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logging():
    # main() woła basicConfig(force=True) – przywracamy handlery pytesta
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers[:]:
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def raw_file(tmp_path):
    """Zapisuje próbki 16-bit little-endian i zwraca ścieżkę."""

    def make(pixels, name="in.raw", byteorder="<"):
        path = tmp_path / name
        path.write_bytes(struct.pack(f"{byteorder}{len(pixels)}H", *pixels))
        return path

    return make
