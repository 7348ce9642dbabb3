from typing import List, Optional

def to_int(v) -> Optional[int]:
    try:
        if v is None or v == "" or str(v).lower() in ("null", "nan"):
            return None
        return int(float(v))
    except (TypeError, ValueError, OverflowError):
        return None

def to_float(v) -> Optional[float]:
    try:
        if v is None or v == "" or str(v).lower() in ("null", "nan"):
            return None
        return float(v)
    except (TypeError, ValueError):
        return None

def to_bool(v) -> Optional[bool]:
    if v is None or isinstance(v, bool):
        return v
    text = str(v).strip().lower()
    if text in ("true", "1", "yes", "y"):
        return True
    if text in ("false", "0", "no", "n"):
        return False
    return None

def to_str(v) -> str:
    if v is None or (isinstance(v, float) and v != v):
        return ""
    return str(v)

def to_list(v, sep: str = "|") -> List[str]:
    text = to_str(v).strip()
    if not text:
        return []
    return [part.strip() for part in text.split(sep) if part.strip()]
