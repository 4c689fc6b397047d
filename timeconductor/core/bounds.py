from __future__ import annotations

from typing import Optional

from timeconductor.core.types import Bounds, Deltas

# timeconductor/core/bounds.py


def bounds_from_deltas(
    current_bounds: Bounds,
    previous_deltas: Optional[Deltas],
    new_deltas: Deltas,
) -> Bounds:
    """
    New window for `new_deltas`, pivoting on the raw (un-deltaed) end.

    The current end already carries previous_deltas.end; removing it recovers
    the pivot, so applying deltas any number of times never compounds.
    """
    raw_end = current_bounds.end
    if previous_deltas is not None:
        raw_end = raw_end - previous_deltas.end

    return Bounds(
        start=raw_end - new_deltas.start,
        end=raw_end + new_deltas.end,
    )


def bounds_from_tick(time: float, deltas: Optional[Deltas]) -> Bounds:
    if deltas is None:
        return Bounds(start=time, end=time)
    return Bounds(start=time - deltas.start, end=time + deltas.end)


def bounds_around_center(bounds: Bounds, time_span: float) -> Bounds:
    """Window of `time_span` sharing the center of `bounds`."""
    center = bounds.center
    return Bounds(
        start=center - time_span / 2,
        end=center + time_span / 2,
    )
