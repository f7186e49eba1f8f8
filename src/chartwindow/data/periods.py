from __future__ import annotations

PERIOD_LENGTHS: dict[str, int | None] = {
    "1w": 7,
    "2w": 14,
    "1m": 30,
    "3m": 90,
    "6m": 180,
    "1y": 365,
    "all": None,
}

# days per unit, month ~ 30 to match "1m"
UNIT_DAYS = {
    "day": 1,
    "week": 7,
    "month": 30,
    "year": 365,
}


def parse_period(text: str) -> int | None:
    """
    "1m" / "3 months" / "2 weeks" / "45" -> number of trailing points.
    "all" -> None (keep the whole series).
    """
    key = text.strip().lower()

    if key in PERIOD_LENGTHS:
        return PERIOD_LENGTHS[key]

    if key.isdigit():
        return int(key)

    parts = key.split()
    if len(parts) == 2 and parts[0].isdigit():
        unit = parts[1].removesuffix("s")
        if unit in UNIT_DAYS:
            return int(parts[0]) * UNIT_DAYS[unit]

    raise ValueError(
        f"Unknown period={text!r}. Available: {list(PERIOD_LENGTHS.keys())} "
        f"or '<n> <{'|'.join(UNIT_DAYS)}>'"
    )


def window_length(period: str, available: int) -> int:
    n = parse_period(period)
    return available if n is None else n
