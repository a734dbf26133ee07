from __future__ import annotations

import logging
from enum import Enum
from collections.abc import Mapping
from typing import Any, ClassVar, Optional, Union

logger = logging.getLogger(__name__)


class ComponentKind(Enum):
    VECTOR2 = "vector2"
    COLOR = "color"
    TRANSFORM = "transform"
    PHYSICS2D = "physics2d"
    ENTITY = "entity"


class ComponentTypeError(TypeError):
    """Operando que no es ni un componente compatible ni un número."""


Options = Optional[Union[Mapping[str, Any], "Component"]]


class Component:
    """
    Base de todos los componentes.

    Construcción en dos fases, siempre en este orden:
      1. _extend(Base): registra capacidades y siembra defaults de Base
      2. el constructor concreto pone sus propios defaults
      3. _construct(options): copia las opciones reconocidas (ganan siempre)
    """

    kind: ClassVar[ComponentKind | None] = None
    defaults: ClassVar[dict[str, Any]] = {}

    capabilities: ClassVar[frozenset[ComponentKind]] = frozenset()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        kinds = {c.kind for c in cls.__mro__ if getattr(c, "kind", None) is not None}
        cls.capabilities = frozenset(kinds)

    # -----------------------------
    # Protocolo extend / construct
    # -----------------------------
    def _extend(self, base: type[Component]) -> None:
        self._capabilities = type(self).capabilities | base.capabilities
        for klass in reversed(base.__mro__):
            for key, value in vars(klass).get("defaults", {}).items():
                # factories (clases, lambdas) -> instancia nueva por objeto
                setattr(self, key, value() if callable(value) else value)

    def _construct(self, options: Options = None) -> None:
        for key, value in self._options(options).items():
            if not self._accepts(key):
                logger.debug("%s: ignoring unknown option %r", type(self).__name__, key)
                continue
            setattr(self, key, value)

    def _accepts(self, key: str) -> bool:
        # solo campos de instancia ya sembrados (o properties como Vector2.parent)
        if key.startswith("_"):
            return False
        if key in vars(self):
            return True
        return isinstance(getattr(type(self), key, None), property)

    @staticmethod
    def _options(options: Options = None, **kwargs: Any) -> dict[str, Any]:
        if options is None:
            merged: dict[str, Any] = {}
        elif isinstance(options, Component):
            merged = options.fields()
        elif isinstance(options, Mapping):
            merged = dict(options)
        else:
            raise ComponentTypeError(
                f"options must be a mapping or a component, got {type(options).__name__}"
            )
        merged.update(kwargs)
        return merged

    # -----------------------------
    def fields(self) -> dict[str, Any]:
        """Campos públicos (lo que se copia al clonar un componente)."""
        return {k: v for k, v in vars(self).items() if not k.startswith("_")}

    def is_a(self, kind: ComponentKind) -> bool:
        return kind in getattr(self, "_capabilities", type(self).capabilities)


def is_kind(value: object, kind: ComponentKind) -> bool:
    return isinstance(value, Component) and value.is_a(kind)


def require(value: object, kind: ComponentKind, message: str) -> None:
    if not is_kind(value, kind):
        raise ComponentTypeError(message)
