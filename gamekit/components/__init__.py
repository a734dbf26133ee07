from .base import Component, ComponentKind, ComponentTypeError
from .vector2 import Vector2
from .color import Color
from .transform import Transform
from .physics2d import Physics2D

__all__ = [
    "Component",
    "ComponentKind",
    "ComponentTypeError",
    "Vector2",
    "Color",
    "Transform",
    "Physics2D",
]
