from __future__ import annotations

from typing import Callable, Iterable, Optional

Reducer = Callable[[Iterable[float]], Optional[float]]


def pairwise_average(values: Iterable[float]) -> Optional[float]:
    """Fold values as ``acc = (acc + next) / 2``, starting from the first.

    The result leans towards later values, so it depends on iteration order.
    Only for one or two values does it equal the arithmetic mean.
    """
    result: Optional[float] = None
    for value in values:
        if result is None:
            result = float(value)
        else:
            result = (result + value) / 2
    return result


def arithmetic_mean(values: Iterable[float]) -> Optional[float]:
    total = 0.0
    count = 0
    for value in values:
        total += value
        count += 1
    if count == 0:
        return None
    return total / count


REDUCERS: dict[str, Reducer] = {
    "pairwise": pairwise_average,
    "mean": arithmetic_mean,
}


def get_reducer(name: str) -> Reducer:
    try:
        return REDUCERS[name]
    except KeyError:
        known = ", ".join(sorted(REDUCERS))
        raise ValueError(f"Unknown average strategy {name!r} (expected one of: {known})") from None
