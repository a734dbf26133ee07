from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# settings.toml que viaja con el paquete
DEFAULT_SETTINGS = Path(__file__).resolve().parents[1] / "settings.toml"


@dataclass(frozen=True)
class PhysicsConfig:
    gravity: tuple[float, float] = (0.0, 9.81)  # m/s²
    force_scale: float = 10.0  # fixed_update: gravity * (dt * force_scale)


def load_physics_config(path: str | Path = DEFAULT_SETTINGS) -> PhysicsConfig:
    """
    Lee la tabla [physics] de un settings.toml.

    Si el fichero no existe o falta alguna clave, se usan los valores por defecto.
    """
    path = Path(path)
    if not path.exists():
        logger.info("settings file %s not found, using physics defaults", path)
        return PhysicsConfig()

    with path.open("rb") as fh:
        data = tomllib.load(fh)

    section = data.get("physics", {})
    if not isinstance(section, dict):
        raise ValueError(f"[physics] in {path} must be a table")

    cfg = PhysicsConfig(
        gravity=_parse_gravity(section.get("gravity", PhysicsConfig.gravity)),
        force_scale=_parse_number("force_scale", section.get("force_scale", PhysicsConfig.force_scale)),
    )
    logger.info("loaded physics settings from %s: %s", path, cfg)
    return cfg


def _parse_gravity(value: Any) -> tuple[float, float]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"physics.gravity must be a [x, y] array, got {value!r}")
    return (_parse_number("gravity.x", value[0]), _parse_number("gravity.y", value[1]))


def _parse_number(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"physics.{name} must be a number, got {value!r}")
    return float(value)
