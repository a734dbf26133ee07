from __future__ import annotations

from typing import Any, Protocol

import pygame

from gamekit.components.base import Component, ComponentKind, Options, is_kind
from gamekit.components.transform import Transform


class AppLike(Protocol):
    """Lo mínimo que una entidad puede necesitar del mundo."""
    pass


class Entity(Component):
    """
    Unidad básica del juego: un contenedor de componentes.

    - No conoce escenas
    - No gestiona el loop (el scheduler externo llama update / fixed_update)
    - Los componentes se crean con el mismo protocolo extend / construct
    """

    kind = ComponentKind.ENTITY
    defaults = {
        "transform": Transform,
        "physics": None,
    }

    def __init__(self, options: Options = None, **kwargs: Any) -> None:
        options = self._options(options, **kwargs)
        self._extend(Entity)
        self._construct(options)

    def fixed_update(self, dt: float) -> None:
        """Paso fijo de simulación: integra la gravedad si hay Physics2D."""
        if is_kind(self.physics, ComponentKind.PHYSICS2D):
            self.physics.fixed_update(dt)

    def on_spawn(self, app: AppLike) -> None:
        """Se llama cuando la entidad entra en escena."""
        pass

    def on_despawn(self, app: AppLike) -> None:
        """Se llama cuando la entidad sale de escena."""
        pass

    def update(self, app: AppLike, dt: float) -> None:
        """Lógica por frame."""
        pass

    def render(self, app: AppLike, screen: pygame.Surface) -> None:
        """Dibujo."""
        pass
