from .config import DEFAULT_SETTINGS, PhysicsConfig, load_physics_config

__all__ = [
    "DEFAULT_SETTINGS",
    "PhysicsConfig",
    "load_physics_config",
]
