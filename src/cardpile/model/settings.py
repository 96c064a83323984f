"""Pile settings and their JSON persistence."""

import json
import logging
import math
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from cardpile.errors import SettingsError, ValidationError, validate_number

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path.home() / ".config" / "cardpile" / "pile_settings.json"


@dataclass
class PileSettings:
    """Bounds and scale parameters for one pile.

    Attributes:
        max_nodes: Max nodes allowed for this pile
        max_curvature: Max curvature applied to the line of nodes
        max_node_spacing: Max spacing between two neighbouring nodes
        max_width: Max width the whole line of nodes may span
        rotation_offset: Rotation offset in degrees applied to each node
        origin_offset: Offset of the pile origin from the panel center
    """

    max_nodes: int = 100
    max_curvature: float = 1.0
    max_node_spacing: float = 100.0
    max_width: float = 800.0
    rotation_offset: float = 0.0
    origin_offset: tuple[float, float] = (0.0, 0.0)

    def validate(self) -> None:
        """Check the settings are usable by the layout engine.

        Raises:
            SettingsError: If a bound is out of its allowed range
        """
        for name in ("max_curvature", "max_node_spacing", "max_width", "rotation_offset"):
            if not math.isfinite(getattr(self, name)):
                raise SettingsError(f"{name} must be finite, got {getattr(self, name)}")
        if not all(math.isfinite(v) for v in self.origin_offset):
            raise SettingsError(f"origin_offset must be finite, got {self.origin_offset}")
        if self.max_nodes <= 0:
            raise SettingsError(f"max_nodes must be positive, got {self.max_nodes}")
        if self.max_width < 0:
            raise SettingsError(f"max_width must not be negative, got {self.max_width}")
        if self.max_node_spacing < 0:
            raise SettingsError(
                f"max_node_spacing must not be negative, got {self.max_node_spacing}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to a JSON compatible dictionary."""
        data = asdict(self)
        data["origin_offset"] = list(self.origin_offset)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PileSettings":
        """Create settings from a dictionary.

        Unknown keys are ignored and missing keys keep their defaults.

        Args:
            data: Mapping of field names to values

        Returns:
            A new PileSettings instance

        Raises:
            SettingsError: If a value has the wrong type
        """
        if not isinstance(data, dict):
            raise SettingsError(f"expected a mapping, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        try:
            for key, value in data.items():
                if key not in known:
                    continue
                if key == "origin_offset":
                    if not isinstance(value, (list, tuple)) or len(value) != 2:
                        raise ValidationError(key, value, "pair of numbers")
                    for component in value:
                        validate_number(component, key)
                    kwargs[key] = (float(value[0]), float(value[1]))
                elif key == "max_nodes":
                    validate_number(value, key, integer=True)
                    kwargs[key] = value
                else:
                    validate_number(value, key)
                    kwargs[key] = float(value)
        except ValidationError as e:
            raise SettingsError(str(e)) from e

        return cls(**kwargs)


def save_settings(settings: PileSettings, path: Path | None = None) -> Path:
    """Save pile settings to disk as JSON.

    Args:
        settings: Settings to save
        path: Optional custom path for the settings file.
              Defaults to ~/.config/cardpile/pile_settings.json

    Returns:
        Path the settings were written to
    """
    save_path = path or DEFAULT_SETTINGS_PATH

    # Create parent directories if needed
    save_path.parent.mkdir(parents=True, exist_ok=True)

    payload = {"version": "1.0", "settings": settings.to_dict()}
    with open(save_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)

    logger.debug(f"Saved pile settings to {save_path}")
    return save_path


def load_settings(path: Path | None = None, strict: bool = False) -> PileSettings:
    """Load pile settings from disk.

    Args:
        path: Optional custom path for the settings file.
              Defaults to ~/.config/cardpile/pile_settings.json
        strict: Raise instead of falling back to defaults

    Returns:
        The loaded settings, or default settings if loading fails

    Raises:
        SettingsError: If strict and the file is missing or invalid
    """
    load_path = path or DEFAULT_SETTINGS_PATH

    if not load_path.exists():
        if strict:
            raise SettingsError(f"settings file not found: {load_path}")
        return PileSettings()

    try:
        with open(load_path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        # Older files hold the mapping at top level
        data = payload.get("settings", payload) if isinstance(payload, dict) else payload
        settings = PileSettings.from_dict(data)
        settings.validate()
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
        if strict:
            raise SettingsError(f"cannot read {load_path}: {e}") from e
        logger.warning(f"Failed to read pile settings from {load_path}: {e}")
        return PileSettings()
    except SettingsError as e:
        if strict:
            raise
        logger.warning(f"Ignoring invalid pile settings in {load_path}: {e.reason}")
        return PileSettings()

    logger.debug(f"Loaded pile settings from {load_path}")
    return settings
