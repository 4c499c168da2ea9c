from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, TypeVar

import numpy as np

T = TypeVar("T")


def create_number_list(start: float, step: float, count: int, randomized: bool = False,
                       rng: Optional[np.random.Generator] = None) -> List[float]:
    """Ascending list of ``count + 1`` values starting at ``start``, ``step`` apart.

    With ``randomized`` the increments are drawn from ``step * (0.5 + U(0, 1))``
    and the result is stretched back onto ``[start, start + count * step]``, so
    both variants cover the same span.
    """
    if not randomized or count == 0:
        return (start + np.arange(count + 1) * step).tolist()
    if rng is None:
        rng = np.random.default_rng()
    steps = step * (0.5 + rng.random(count))
    values = np.concatenate(([0.0], np.cumsum(steps)))
    return remap_number_array(values, start, start + count * step)


def remap_number_array(values: Sequence[float], new_min: float, new_max: float,
                       source_min: Optional[float] = None,
                       source_max: Optional[float] = None) -> List[float]:
    """Linearly rescale ``values`` from their source range onto ``[new_min, new_max]``.

    Source bounds default to the min / max of ``values``. A zero-width source
    range gives NaN (or inf), it is not guarded.
    """
    ns = np.asarray(values, dtype=float)
    if source_min is None:
        source_min = float(ns.min())
    if source_max is None:
        source_max = float(ns.max())
    with np.errstate(divide="ignore", invalid="ignore"):
        out = (ns - source_min) / (source_max - source_min) * (new_max - new_min) + new_min
    return out.tolist()


def pairwise(values: Sequence[T], closed: bool = False) -> List[Tuple[T, T]]:
    """Consecutive pairs; ``closed`` adds the pair (last, first)."""
    pairs = list(zip(values, values[1:]))
    if closed and values:
        pairs.append((values[-1], values[0]))
    return pairs
