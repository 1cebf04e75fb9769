"""Monotonic stack algorithms."""
from typing import List, Sequence


def daily_temperatures(temperatures: Sequence[float]) -> List[int]:
    """For each day, count the days until a strictly warmer one (0 if none)."""
    result = [0] * len(temperatures)
    stack: List[int] = []  # indices, temperatures non-increasing

    for i, temp in enumerate(temperatures):
        while stack and temp > temperatures[stack[-1]]:
            top = stack.pop()
            result[top] = i - top
        stack.append(i)

    return result
