from .math import clamp, divide, flip, invert, is_number, lerp, random_range

__all__ = [
    "clamp",
    "divide",
    "flip",
    "invert",
    "is_number",
    "lerp",
    "random_range",
]
