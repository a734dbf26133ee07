from __future__ import annotations

import logging
from typing import Any

from gamekit.components.base import Component, ComponentKind, Options, is_kind, require
from gamekit.components.vector2 import Vector2
from gamekit.core.config import PhysicsConfig

logger = logging.getLogger(__name__)


class Physics2D(Component):
    """
    Componente de física simple: gravedad + velocidad.

    El scheduler externo llama fixed_update(dt) una vez por tick.
    """

    kind = ComponentKind.PHYSICS2D

    FORCE_SCALE = 10.0

    def __init__(self, options: Options = None, **kwargs: Any) -> None:
        options = self._options(options, **kwargs)
        self._extend(Component)
        self.gravity = Vector2(y=9.81, parent=self)
        self.velocity = Vector2(parent=self)
        self.force_scale = self.FORCE_SCALE
        self._construct(options)

        if is_kind(self.gravity, ComponentKind.VECTOR2):
            self.gravity = self.gravity.owned_by(self)
        if is_kind(self.velocity, ComponentKind.VECTOR2):
            self.velocity = self.velocity.owned_by(self)

    def fields(self) -> dict[str, Any]:
        values = super().fields()
        for key in ("gravity", "velocity"):
            if is_kind(values[key], ComponentKind.VECTOR2):
                values[key] = Vector2(values[key])
        return values

    @classmethod
    def from_config(cls, config: PhysicsConfig, options: Options = None, **kwargs: Any) -> Physics2D:
        gx, gy = config.gravity
        seeded: dict[str, Any] = {
            "gravity": Vector2(x=gx, y=gy),
            "force_scale": config.force_scale,
        }
        seeded.update(cls._options(options, **kwargs))
        return cls(seeded)

    def fixed_update(self, timestep: float) -> Vector2:
        force = self.gravity.multiply(timestep * self.force_scale)
        logger.debug("fixed_update dt=%s force=%r", timestep, force)
        return self.add_force(force)

    def add_force(self, force: Vector2) -> Vector2:
        """Suma force a velocity (in situ) y devuelve velocity."""
        require(force, ComponentKind.VECTOR2, "Force must be an instance of Vector2")
        updated = self.velocity.add(force)
        self.velocity.x, self.velocity.y = updated.x, updated.y
        return self.velocity

    def __repr__(self) -> str:
        return f"Physics2D(gravity={self.gravity!r}, velocity={self.velocity!r})"
