from __future__ import annotations

import math

MONEY_SUFFIXES = ["", "k", "M", "B", "T", "q", "Q", "s", "S", "O", "N", "d"]
NUMBER_SUFFIXES = ["", "k", "M", "B", "T", "q", "Q"]


def _suffix_index(value: float, suffixes: list[str]) -> int:
    # Digit count of the integer part, in groups of three.
    index = len(str(math.floor(value))) // 3
    return min(index, len(suffixes) - 1)


def _short(value: float) -> str:
    if value == int(value):
        return str(int(value))
    return f"{value:g}"


def format_money(amount: float) -> str:
    if not math.isfinite(amount):
        return "$0.00"
    if amount < 1000:
        return f"${amount:.2f}"
    index = _suffix_index(amount, MONEY_SUFFIXES)
    short_value = float(f"{amount / 1000 ** index:.3g}")
    if short_value % 1 != 0:
        short_value = round(short_value, 2)
    return f"${_short(short_value)}{MONEY_SUFFIXES[index]}"


def format_number(num: float) -> str:
    if not math.isfinite(num):
        return "0"
    if num < 1000:
        return str(math.floor(num))
    index = _suffix_index(num, NUMBER_SUFFIXES)
    short_value = float(f"{num / 1000 ** index:.3g}")
    return f"{_short(short_value)}{NUMBER_SUFFIXES[index]}"
