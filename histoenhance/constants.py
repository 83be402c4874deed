APP_TITLE = "HistoEnhance – wyrównanie histogramu w oknie"

# Próbki 16-bitowe bez znaku
SAMPLE_MIN = 0
SAMPLE_MAX = 65535
SAMPLE_BYTES = 2

# Domyślny zakres wyjściowy (a, b)
OUT_RANGE = (0, 255)

# Kolejność bajtów w plikach RAW
BYTE_ORDER = "little"

PROMPT_SRC = "Plik wejściowy: "
PROMPT_WIDTH = "Szerokość (piksele): "
PROMPT_HEIGHT = "Wysokość (piksele): "
PROMPT_MINV = "Dolna granica okna: "
PROMPT_MAXV = "Górna granica okna: "
PROMPT_DST = "Plik wyjściowy: "

MSG_NO_FILE = "Nie znaleziono pliku [{}]."
MSG_OK = ">Zakończono pomyślnie."
MSG_FAIL = ">Nie powiodło się."

# Źródła wczytywane przez Pillow; każde inne rozszerzenie to RAW
IMAGE_EXTS = (".png", ".tif", ".tiff", ".bmp", ".pgm", ".jpg", ".jpeg")
