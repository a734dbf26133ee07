"""Funciones numéricas sueltas que usan los componentes."""
from __future__ import annotations

import math
import random
from numbers import Real


def is_number(value: object) -> bool:
    """True para int/float reales (bool no cuenta como número)."""
    return isinstance(value, Real) and not isinstance(value, bool)


def _coerce(value: object) -> object:
    # "12.5" -> 12.5, como hace el motor con cadenas numéricas
    if isinstance(value, str):
        return float(value)
    return value


def clamp(value: float, min_value: float, max_value: float) -> float:
    """
    Acota value al rango [min_value, max_value].

    clamp(370, 0, 360) == 360
    """
    return min(max(value, min_value), max_value)


def divide(a: float, b: float) -> float:
    """
    a / b con semántica IEEE: dividir por cero da ±inf (o nan para 0 / 0)
    en lugar de lanzar ZeroDivisionError.
    """
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        # el signo del cero divisor cuenta: 1 / -0.0 == -inf
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def flip(value: float, max_value: float) -> float:
    """
    Invierte value dentro de max_value: flip(10, 255) == 245.

    Nunca lanza: si algún argumento no se puede convertir a número, nan.
    """
    if not is_number(value) and not is_number(max_value):
        return math.nan
    try:
        return abs(_coerce(max_value) - math.trunc(_coerce(value)))
    except (TypeError, ValueError, OverflowError):
        return math.nan


def random_range(
    min_value: float,
    max_value: float,
    integer: bool = False,
    *,
    rng: random.Random | None = None,
) -> float:
    """Número aleatorio uniforme en [min_value, max_value); nan si no hay rango válido."""
    if not is_number(min_value) and not is_number(max_value):
        return math.nan
    try:
        lo, hi = _coerce(min_value), _coerce(max_value)
        r = (rng or random).random() * (hi - lo) + lo
        if integer:
            return math.floor(r)
        return r
    except (TypeError, ValueError, OverflowError):
        return math.nan


def invert(num: float) -> float:
    """Cambia el signo: invert(99.5) == -99.5"""
    return num * -1


def lerp(a: float, b: float, t: float) -> float:
    # (b - a) * t, sin el término base "a +"
    return (b - a) * t
