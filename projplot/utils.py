"""
Numeric helpers shared by scales and coordinate systems.

Range arithmetic (rescaling, expansion, zero-width detection) and the
great-circle distance used by the projected coordinate system.
"""

from typing import Optional, Sequence, Tuple

import numpy as np

from .exceptions import InvalidParameterError


def zero_range(rng: Sequence[float], tol: float = 1000 * np.finfo(float).eps) -> bool:
    """Return True when both ends of a range are (numerically) equal."""
    lo, hi = float(rng[0]), float(rng[1])
    if lo == hi:
        return True
    m = min(abs(lo), abs(hi))
    if m == 0:
        return False
    return abs((lo - hi) / m) < tol


def rescale(
    x,
    to: Tuple[float, float] = (0.0, 1.0),
    from_range: Sequence[float] = None,
) -> np.ndarray:
    """
    Linearly map values from ``from_range`` onto ``to``.

    Values outside ``from_range`` extrapolate; nothing is clamped. A
    zero-width source range maps every finite value to the middle of ``to``
    and a source range with a non-finite end maps everything to NaN.

    Args:
        x: Values to rescale
        to: Output range
        from_range: Input range (defaults to the finite range of ``x``)

    Returns:
        Float array the same shape as ``x``
    """
    x = np.asarray(x, dtype=float)
    if from_range is None:
        from_range = finite_range(x)
    lo, hi = float(from_range[0]), float(from_range[1])

    if not (np.isfinite(lo) and np.isfinite(hi)):
        return np.full(x.shape, np.nan)

    if zero_range((lo, hi)) or zero_range(to):
        return np.where(np.isnan(x), np.nan, np.mean(to))

    return (x - lo) / (hi - lo) * (to[1] - to[0]) + to[0]


def finite_range(values) -> Tuple[float, float]:
    """Min and max over the finite entries of ``values``; NaNs when none."""
    values = np.asarray(values, dtype=float).ravel()
    values = values[np.isfinite(values)]
    if values.size == 0:
        return (np.nan, np.nan)
    return (float(values.min()), float(values.max()))


def expand_range(
    rng: Sequence[float],
    mul: float = 0.0,
    add: float = 0.0,
    zero_width: float = 1.0,
) -> Tuple[float, float]:
    """
    Widen a range by a multiplicative and additive margin on both sides.

    Example:
        >>> expand_range((0, 10), mul=0.2)
        (-2.0, 12.0)
    """
    lo, hi = float(rng[0]), float(rng[1])
    if zero_range((lo, hi)):
        return (lo - zero_width / 2, hi + zero_width / 2)
    delta = (hi - lo) * mul + add
    return (lo - delta, hi + delta)


def dist_central_angle(lon, lat) -> np.ndarray:
    """
    Central angles (radians) between successive lon/lat points in degrees.

    Uses the haversine formula; returns ``len(lon) - 1`` values.
    """
    lat = np.radians(np.asarray(lat, dtype=float))
    lon = np.radians(np.asarray(lon, dtype=float))

    hav = lambda x: np.sin(x / 2) ** 2
    ahav = lambda x: 2 * np.arcsin(np.sqrt(x))

    n = lat.size
    if n < 2:
        return np.array([], dtype=float)
    return ahav(
        hav(np.diff(lat))
        + np.cos(lat[:-1]) * np.cos(lat[1:]) * hav(np.diff(lon))
    )


def validate_limits(name: str, limits) -> Optional[Tuple[float, float]]:
    """Coerce optional axis limits to a pair of finite floats."""
    if limits is None:
        return None
    try:
        values = tuple(float(v) for v in limits)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(f"{name} must be a pair of numbers, got {limits!r}") from e
    if len(values) != 2:
        raise InvalidParameterError(f"{name} must contain exactly two values, got {len(values)}")
    if not all(np.isfinite(values)):
        raise InvalidParameterError(f"{name} values must be finite, got {values}")
    return values
