from .raw import is_file, read_raw, write_raw

__all__ = ["is_file", "read_raw", "write_raw"]
