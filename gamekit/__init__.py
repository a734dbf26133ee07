from .components import (
    Color,
    Component,
    ComponentKind,
    ComponentTypeError,
    Physics2D,
    Transform,
    Vector2,
)
from .core import PhysicsConfig, load_physics_config
from .entities import Entity, Particle

__all__ = [
    "Color",
    "Component",
    "ComponentKind",
    "ComponentTypeError",
    "Entity",
    "Particle",
    "Physics2D",
    "PhysicsConfig",
    "Transform",
    "Vector2",
    "load_physics_config",
]
