from .base import AppLike, Entity
from .particle import Particle

__all__ = [
    "AppLike",
    "Entity",
    "Particle",
]
