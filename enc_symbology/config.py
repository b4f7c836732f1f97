"""
Mariner parameters for the enc_symbology package.

This module provides the mariner-selected settings that drive depth
shading, safety contour highlighting, sounding prefixes and restriction
boundaries. Procedures read them by name through ``MarinerParameters.get``.
"""

import json
import math
from dataclasses import dataclass, asdict, fields
from enum import Enum
from pathlib import Path
from typing import Union

import yaml

from .exceptions import InvalidParameterError


class MarinerParam(str, Enum):
    """Names recognised by ``MarinerParameters.get``."""

    SAFETY_CONTOUR = "safety_contour"
    SHALLOW_CONTOUR = "shallow_contour"
    DEEP_CONTOUR = "deep_contour"
    SAFETY_DEPTH = "safety_depth"
    DATUM_OFFSET = "datum_offset"
    TWO_SHADES = "two_shades"
    SHALLOW_PATTERN = "shallow_pattern"
    SYMBOLIZED_BOUNDARIES = "symbolized_boundaries"


@dataclass
class MarinerParameters:
    """Mariner settings consumed by the conditional symbology procedures.

    Attributes:
        safety_contour: Depth (m) of the own-ship safety contour.
        shallow_contour: Depth (m) separating the two shallow water shades.
        deep_contour: Depth (m) below which water is shaded as deep.
        safety_depth: Depth (m) below which soundings use the bold prefix.
        datum_offset: Vertical correction (m) added to raw depths before any
            comparison against the thresholds above.
        two_shades: Collapse the four water shades into two.
        shallow_pattern: Overlay a pattern on the shallowest water band.
        symbolized_boundaries: Draw restricted area boundaries with
            symbolized (composed) lines instead of plain dashes.
    """

    safety_contour: float = 30.0
    shallow_contour: float = 2.0
    deep_contour: float = 30.0
    safety_depth: float = 30.0
    datum_offset: float = 0.0
    two_shades: bool = False
    shallow_pattern: bool = False
    symbolized_boundaries: bool = True

    def __post_init__(self):
        """Coerce numeric strings coming from config files or the CLI."""
        for name in ("safety_contour", "shallow_contour", "deep_contour",
                     "safety_depth", "datum_offset"):
            value = getattr(self, name)
            try:
                setattr(self, name, float(value))
            except (TypeError, ValueError):
                raise InvalidParameterError(f"{name} must be a number, got {value!r}")
        for name in ("two_shades", "shallow_pattern", "symbolized_boundaries"):
            setattr(self, name, _to_bool(getattr(self, name), name))

    def get(self, name: Union[MarinerParam, str]) -> float:
        """Read a parameter as a number.

        Boolean flags are returned as 1.0 or 0.0.

        Args:
            name: A ``MarinerParam`` member or its string value.

        Returns:
            The parameter value as a float.

        Raises:
            InvalidParameterError: If the name is not a mariner parameter.
        """
        try:
            param = MarinerParam(name)
        except ValueError:
            raise InvalidParameterError(f"Unknown mariner parameter: {name!r}")
        return float(getattr(self, param.value))

    def with_overrides(self, **overrides) -> "MarinerParameters":
        """Return a copy with some settings replaced; ``None`` values are ignored."""
        data = asdict(self)
        for key, value in overrides.items():
            if value is None:
                continue
            if key not in data:
                raise InvalidParameterError(f"Unknown mariner parameter: {key!r}")
            data[key] = value
        return MarinerParameters(**data)

    @classmethod
    def load_from_file(cls, path: Path) -> "MarinerParameters":
        """Load parameters from a YAML or JSON file.

        Args:
            path: Path to configuration file (.yaml, .yml, or .json).

        Returns:
            MarinerParameters instance with loaded settings.

        Raises:
            ValueError: If file format is not supported.
            FileNotFoundError: If file does not exist.
            InvalidParameterError: If the file names unknown settings.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, 'r') as f:
            if path.suffix in ['.yaml', '.yml']:
                data = yaml.safe_load(f)
            elif path.suffix == '.json':
                data = json.load(f)
            else:
                raise ValueError(f"Unsupported file format: {path.suffix}. Use .yaml, .yml, or .json")

        data = data or {}
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidParameterError(f"Unknown mariner parameters in {path}: {', '.join(unknown)}")

        return cls(**data)

    def save_to_file(self, path: Path) -> None:
        """Save parameters to a YAML or JSON file.

        Raises:
            ValueError: If file format is not supported.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = asdict(self)

        with open(path, 'w') as f:
            if path.suffix in ['.yaml', '.yml']:
                yaml.dump(data, f, default_flow_style=False, sort_keys=False)
            elif path.suffix == '.json':
                json.dump(data, f, indent=2)
            else:
                raise ValueError(f"Unsupported file format: {path.suffix}. Use .yaml, .yml, or .json")

    def validate(self) -> bool:
        """Validate parameter values.

        Returns:
            True if the parameters are valid.

        Raises:
            InvalidParameterError: If any parameter is invalid.
        """
        for name in ("safety_contour", "shallow_contour", "deep_contour",
                     "safety_depth", "datum_offset"):
            if not math.isfinite(getattr(self, name)):
                raise InvalidParameterError(f"{name} must be finite")

        if self.shallow_contour > self.safety_contour:
            raise InvalidParameterError("shallow_contour must not exceed safety_contour")

        if self.safety_contour > self.deep_contour:
            raise InvalidParameterError("safety_contour must not exceed deep_contour")

        return True


def _to_bool(value, name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)) and value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value.strip().lower() in ("1", "true", "yes", "on", "0", "false", "no", "off"):
        return value.strip().lower() in ("1", "true", "yes", "on")
    raise InvalidParameterError(f"{name} must be a boolean, got {value!r}")


def get_default_parameters() -> MarinerParameters:
    """Get default mariner parameters.

    Returns:
        MarinerParameters instance with default values.
    """
    return MarinerParameters()
