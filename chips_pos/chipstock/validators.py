def nonneg(v: int) -> bool:
    return v >= 0

def flat_text(s: str) -> bool:
    """Text that can be stored in one comma-separated column."""
    return not any(ch in s for ch in ",\r\n")
