from __future__ import annotations

import math
from typing import Any, Callable

import pygame

from gamekit.components.base import (
    Component,
    ComponentKind,
    ComponentTypeError,
    Options,
    is_kind,
    require,
)
from gamekit.util.math import clamp, flip, is_number
from gamekit.util.math import divide as _div


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _clamp_channel(value: float, max_value: float) -> float:
    # nan (p.ej. 0 / 0) no tiene color: cuenta como 0
    if is_number(value) and math.isnan(value):
        return 0
    return clamp(value, 0, max_value)


def _format_channel(value: float) -> str:
    # 1.0 -> "1", 0.5 -> "0.5"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class Color(Component):
    """
    Color RGBA: r, g, b en 0-255 y alpha en 0-1.

    La aritmética NO acota (puede salirse de rango) y solo toca r, g, b;
    el alpha del receptor pasa tal cual al resultado. Para acotar: clamp().
    """

    kind = ComponentKind.COLOR

    def __init__(self, options: Options = None, **kwargs: Any) -> None:
        options = self._options(options, **kwargs)
        self._extend(Component)
        self.alpha = 1
        self.r = 0
        self.g = 0
        self.b = 0
        self._construct(options)

    def clamp(self) -> Color:
        """Nuevo Color con r, g, b redondeados en [0, 255] y alpha en [0, 1] (nan -> 0)."""
        return Color(
            r=_round_half_up(_clamp_channel(self.r, 255)),
            g=_round_half_up(_clamp_channel(self.g, 255)),
            b=_round_half_up(_clamp_channel(self.b, 255)),
            alpha=_clamp_channel(self.alpha, 1),
        )

    def to_string(self) -> str:
        c = self.clamp()
        return f"rgba({c.r},{c.g},{c.b},{_format_channel(c.alpha)})"

    __str__ = to_string

    def __repr__(self) -> str:
        return f"Color(r={self.r!r}, g={self.g!r}, b={self.b!r}, alpha={self.alpha!r})"

    def invert(self, invert_alpha: bool = False) -> Color:
        alpha = flip(self.alpha, 1) if invert_alpha else self.alpha
        return Color(
            r=flip(self.r, 255),
            g=flip(self.g, 255),
            b=flip(self.b, 255),
            alpha=alpha,
        )

    # -----------------------------
    # Aritmética (r, g, b)
    # -----------------------------
    def _combine(self, other: object, op: Callable[[float, float], float]) -> Color:
        if is_kind(other, ComponentKind.COLOR):
            r, g, b = other.r, other.g, other.b
        elif is_number(other):
            r = g = b = other
        elif isinstance(other, Component):
            raise ComponentTypeError("Object not an instance of Color")
        else:
            raise ComponentTypeError("Argument not a Color or a number")
        return Color(
            r=op(self.r, r),
            g=op(self.g, g),
            b=op(self.b, b),
            alpha=self.alpha,
        )

    def add(self, other: Color | float) -> Color:
        return self._combine(other, lambda a, b: a + b)

    def subtract(self, other: Color | float) -> Color:
        return self._combine(other, lambda a, b: a - b)

    def multiply(self, other: Color | float) -> Color:
        return self._combine(other, lambda a, b: a * b)

    def divide(self, other: Color | float) -> Color:
        return self._combine(other, _div)

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __truediv__ = divide

    def equal(self, other: Color) -> bool:
        """Compara r, g, b. El alpha no entra en la comparación."""
        require(other, ComponentKind.COLOR, "Argument not an instance of Color")
        return self.r == other.r and self.g == other.g and self.b == other.b

    @staticmethod
    def lerp(a: Color, b: Color, t: float) -> Color:
        if not is_kind(a, ComponentKind.COLOR) or not is_kind(b, ComponentKind.COLOR):
            raise ComponentTypeError("Argument not an instance of Color")
        if not is_number(t):
            raise ComponentTypeError("Argument must be a number")
        return Color(b).subtract(a).multiply(t)

    # -----------------------------
    # Colores con nombre
    # -----------------------------
    @classmethod
    def red(cls) -> Color:
        return cls(r=255, g=0, b=0)

    @classmethod
    def green(cls) -> Color:
        return cls(r=0, g=255, b=0)

    @classmethod
    def blue(cls) -> Color:
        return cls(r=0, g=0, b=255)

    @classmethod
    def black(cls) -> Color:
        return cls(r=0, g=0, b=0)

    @classmethod
    def white(cls) -> Color:
        return cls(r=255, g=255, b=255)

    @classmethod
    def cyan(cls) -> Color:
        return cls(r=0, g=255, b=255)

    @classmethod
    def magenta(cls) -> Color:
        return cls(r=255, g=0, b=255)

    @classmethod
    def yellow(cls) -> Color:
        return cls(r=255, g=255, b=0)

    @classmethod
    def grey(cls) -> Color:
        return cls(r=128, g=128, b=128)

    # -----------------------------
    def to_pygame(self) -> pygame.Color:
        c = self.clamp()
        return pygame.Color(c.r, c.g, c.b, _round_half_up(c.alpha * 255))
