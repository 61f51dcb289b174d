"""
Predicate helpers shared by the directory, job board and metrics services.
"""

from typing import Callable, Iterable

# Band name → predicate over an amount (missing amounts count as 0)
RATE_BANDS: dict[str, Callable[[float], bool]] = {
    "under-2000": lambda r: r < 2000,
    "2000-4000": lambda r: 2000 <= r <= 4000,
    "4000-8000": lambda r: 4000 < r <= 8000,
    "over-8000": lambda r: r > 8000,
}

BUDGET_BANDS: dict[str, Callable[[float], bool]] = {
    "under-1000": lambda b: b < 1000,
    "1000-5000": lambda b: 1000 <= b <= 5000,
    "5000-10000": lambda b: 5000 < b <= 10000,
    "over-10000": lambda b: b > 10000,
}


def contains(needle: str, *haystacks: str | None) -> bool:
    """Case-insensitive substring match against any of `haystacks`."""
    needle = needle.lower()
    return any(h is not None and needle in h.lower() for h in haystacks)


def in_band(bands: dict[str, Callable[[float], bool]], band: str, amount: float | None) -> bool:
    """Unknown band names match everything."""
    predicate = bands.get(band)
    if predicate is None:
        return True
    return predicate(amount or 0)


def parse_range(spec: str) -> tuple[float, float]:
    """'3.5-5' → (3.5, 5.0)"""
    try:
        low, high = (float(part) for part in spec.split("-"))
    except ValueError:
        raise ValueError(f"Invalid rating range: {spec!r} (expected 'min-max')")
    return low, high


def unique_tags(values: Iterable[str | None], limit: int) -> list[str]:
    """Split comma-separated tags, trim, de-duplicate in first-seen order."""
    seen: dict[str, None] = {}
    for value in values:
        for tag in (value or "").split(","):
            tag = tag.strip()
            if tag:
                seen.setdefault(tag, None)
    return list(seen)[:limit]
