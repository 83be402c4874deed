def parts(txt: str, n: int):
    ps = [p.strip() for p in txt.replace(";", ",").split(",") if p.strip()]
    if len(ps) != n:
        raise ValueError(f"Podaj {n} liczb")
    return ps


def clamp(v: int, lo: int, hi: int) -> int:
    """Ogranicza wartość do [lo, hi]."""
    if v < lo:
        return lo
    if v > hi:
        return hi
    return v
