from __future__ import annotations

import weakref
from typing import Any, Iterator

import pygame

from gamekit.components.base import (
    Component,
    ComponentKind,
    ComponentTypeError,
    Options,
    is_kind,
    require,
)
from gamekit.util.math import divide as _div, is_number


class Vector2(Component):
    """
    Vector 2D de floats.

    Las operaciones aritméticas nunca mutan: siempre devuelven un Vector2 nuevo.
    `parent` es una referencia débil al componente dueño (nunca lo mantiene vivo).
    """

    kind = ComponentKind.VECTOR2

    def __init__(self, options: Options = None, **kwargs: Any) -> None:
        options = self._options(options, **kwargs)
        self._extend(Component)
        self._parent: weakref.ref | None = None
        self.x = 0.0
        self.y = 0.0
        self._construct(options)

    @property
    def parent(self) -> Component | None:
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, value: Component | None) -> None:
        self._parent = weakref.ref(value) if value is not None else None

    def owned_by(self, owner: Component) -> Vector2:
        """
        Este vector si no tiene dueño (o ya es de owner); si es de otro
        componente, una copia. Un Vector2 nunca queda con dos dueños.
        """
        current = self.parent
        if current is None or current is owner:
            self.parent = owner
            return self
        return Vector2(x=self.x, y=self.y, parent=owner)

    # -----------------------------
    # Aritmética
    # -----------------------------
    def add(self, other: Vector2 | float) -> Vector2:
        x, y = self._operand(other)
        return Vector2(x=self.x + x, y=self.y + y)

    def subtract(self, other: Vector2 | float) -> Vector2:
        x, y = self._operand(other)
        return Vector2(x=self.x - x, y=self.y - y)

    def multiply(self, other: Vector2 | float) -> Vector2:
        x, y = self._operand(other)
        return Vector2(x=self.x * x, y=self.y * y)

    def divide(self, other: Vector2 | float) -> Vector2:
        x, y = self._operand(other)
        return Vector2(x=_div(self.x, x), y=_div(self.y, y))

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __truediv__ = divide

    def equal(self, other: Vector2) -> bool:
        require(other, ComponentKind.VECTOR2, "Argument not an instance of Vector2")
        return self.x == other.x and self.y == other.y

    @staticmethod
    def lerp(a: Vector2, b: Vector2, t: float) -> Vector2:
        """(b - a) * t componente a componente."""
        if not is_kind(a, ComponentKind.VECTOR2) or not is_kind(b, ComponentKind.VECTOR2):
            raise ComponentTypeError("Argument not an instance of Vector2")
        if not is_number(t):
            raise ComponentTypeError("Argument must be a number")
        return b.subtract(a).multiply(t)

    @staticmethod
    def _operand(other: object) -> tuple[float, float]:
        if is_kind(other, ComponentKind.VECTOR2):
            return other.x, other.y
        if is_number(other):
            return other, other
        if isinstance(other, Component):
            raise ComponentTypeError("Object not an instance of Vector2")
        raise ComponentTypeError("Argument not a Vector2 or a number")

    # -----------------------------
    # pygame
    # -----------------------------
    def to_pygame(self) -> pygame.Vector2:
        return pygame.Vector2(self.x, self.y)

    @classmethod
    def from_pygame(cls, vec: pygame.Vector2, parent: Component | None = None) -> Vector2:
        return cls(x=float(vec.x), y=float(vec.y), parent=parent)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Vector2({self.x!r}, {self.y!r})"
