from __future__ import annotations

import math
from typing import Any

from gamekit.components.base import (
    Component,
    ComponentKind,
    ComponentTypeError,
    Options,
    is_kind,
    require,
)
from gamekit.components.vector2 import Vector2
from gamekit.util.math import divide as _div, is_number


def wrap_rotation(degrees: float) -> float:
    """Reduce a (-360, 360) con módulo truncado: -10 sigue siendo -10."""
    if math.isinf(degrees):
        # inf % 360 no tiene valor definido
        return math.nan
    return math.fmod(degrees, 360)


class Transform(Component):
    """
    Posición (Vector2) + rotación en grados.

    translate() es la única operación que muta; el resto devuelve Transforms nuevos.
    """

    kind = ComponentKind.TRANSFORM

    def __init__(self, options: Options = None, **kwargs: Any) -> None:
        options = self._options(options, **kwargs)
        self._extend(Component)
        self.rotation = 0.0
        self.position = Vector2(parent=self)
        self._construct(options)

        if is_number(self.rotation):
            self.rotation = wrap_rotation(self.rotation)
        if is_kind(self.position, ComponentKind.VECTOR2):
            self.position = self.position.owned_by(self)

    def fields(self) -> dict[str, Any]:
        # copia la posición: dos Transforms nunca comparten el mismo Vector2
        values = super().fields()
        if is_kind(self.position, ComponentKind.VECTOR2):
            values["position"] = Vector2(self.position)
        return values

    # -----------------------------
    # Mutación in situ
    # -----------------------------
    def translate(self, value: Vector2 | Transform) -> Vector2 | None:
        """
        Desplaza ESTE Transform (muta position / rotation).

        - Vector2: suma x, y a position y devuelve position.
        - Transform: suma position y rotation (módulo 360), devuelve None.
        """
        if is_kind(value, ComponentKind.TRANSFORM):
            self.position.x += value.position.x
            self.position.y += value.position.y
            self.rotation = wrap_rotation(self.rotation + value.rotation)
            return None
        if is_kind(value, ComponentKind.VECTOR2):
            self.position.x += value.x
            self.position.y += value.y
            return self.position
        raise ComponentTypeError("Vector must be an instance of Vector2 or Transform")

    # -----------------------------
    # Aritmética
    # -----------------------------
    def add(self, transform: Transform) -> Transform:
        self._check(transform)
        return Transform(
            position=self.position.add(transform.position),
            rotation=self.rotation + transform.rotation,
        )

    def subtract(self, transform: Transform) -> Transform:
        self._check(transform)
        return Transform(
            position=self.position.subtract(transform.position),
            rotation=self.rotation - transform.rotation,
        )

    def multiply(self, transform: Transform) -> Transform:
        self._check(transform)
        return Transform(
            position=self.position.multiply(transform.position),
            rotation=self.rotation * transform.rotation,
        )

    def divide(self, transform: Transform) -> Transform:
        self._check(transform)
        return Transform(
            position=self.position.divide(transform.position),
            rotation=_div(self.rotation, transform.rotation),
        )

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __truediv__ = divide

    def equal(self, transform: Transform) -> bool:
        require(transform, ComponentKind.TRANSFORM, "Argument not an instance of Transform")
        return self.position.equal(transform.position) and self.rotation == transform.rotation

    @staticmethod
    def lerp(a: Transform, b: Transform, t: float) -> Transform:
        if not is_kind(a, ComponentKind.TRANSFORM) or not is_kind(b, ComponentKind.TRANSFORM):
            raise ComponentTypeError("Argument not an instance of Transform")
        if not is_number(t):
            raise ComponentTypeError("Argument must be a number")
        return Transform(
            position=Vector2.lerp(a.position, b.position, t),
            rotation=(b.rotation - a.rotation) * t,
        )

    @staticmethod
    def _check(transform: object) -> None:
        require(transform, ComponentKind.TRANSFORM, "Object not an instance of Transform")

    def __repr__(self) -> str:
        return f"Transform(position={self.position!r}, rotation={self.rotation!r})"
