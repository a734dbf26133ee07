from __future__ import annotations

from typing import Any

import pygame

from gamekit.components.base import ComponentKind, Options, is_kind
from gamekit.components.color import Color
from gamekit.components.vector2 import Vector2
from gamekit.entities.base import AppLike, Entity


class Particle(Entity):
    """Partícula: velocidad propia, radio, vida y color."""

    def __init__(self, options: Options = None, **kwargs: Any) -> None:
        options = self._options(options, **kwargs)
        self._extend(Entity)
        self.speed = Vector2(parent=self)
        self.radius = 1
        self.life = 1
        self.remaining_life = 1
        self.color = Color(r=255, g=255, b=255, alpha=1)
        self._construct(options)

        if is_kind(self.speed, ComponentKind.VECTOR2):
            self.speed = self.speed.owned_by(self)
        # la vida restante siempre arranca llena
        self.remaining_life = self.life

    def render(self, app: AppLike, screen: pygame.Surface) -> None:
        pos = self.transform.position
        center = (int(pos.x), int(pos.y))
        radius = max(1, int(self.radius))
        pygame.draw.circle(screen, self.color.to_pygame(), center, radius)
