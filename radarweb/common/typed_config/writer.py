"""Typed config update API.

MERGE pattern: existing values are kept and only the given keys change.
Unknown field names raise UnknownFieldError.
"""

from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Callable, Dict, Optional

from radarweb.common.typed_config.models import RadarConfig

_logger = logging.getLogger(__name__)


class UnknownFieldError(AttributeError):
    """Raised for a field name the config dataclass does not have."""

    pass


def _to_json_safe(value: Any) -> Any:
    """tuple -> list, recursively; everything else as-is or str()."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (tuple, list)):
        return [_to_json_safe(v) for v in value]
    if isinstance(value, dict):
        return {k: _to_json_safe(v) for k, v in value.items()}
    return str(value)


class TypedConfigWriter:
    """Partial updates of the "radar" section.

    Invalid value handling:
        - Invalid values are normalized to defaults (or clamped)
        - A WARNING is logged when the stored value differs from the input
        - The normalized value (not the invalid input) is stored

    Example:
        >>> writer = TypedConfigWriter(config_dict)
        >>> result = writer.update_radar(skip_web_line_count=-5)
        >>> assert result.skip_web_line_count == 0
    """

    SECTION = "radar"

    def __init__(
        self,
        config_dict: Dict[str, Any],
        save_func: Optional[Callable[[str], None]] = None,
    ) -> None:
        """Args:
        config_dict: Reference to the config dictionary (will be mutated)
        save_func: Called with the section name after every update
        """
        self._config = config_dict
        self._save = save_func

    def update_radar(self, **kwargs: Any) -> RadarConfig:
        """Update some fields of the radar section.

        Raises:
            UnknownFieldError: a field name does not exist on RadarConfig
        """
        valid_fields = {f.name for f in fields(RadarConfig)}
        unknown = set(kwargs.keys()) - valid_fields
        if unknown:
            raise UnknownFieldError(f"RadarConfig has no field(s): {sorted(unknown)}")

        existing = self._config.get(self.SECTION)
        merged = dict(existing) if isinstance(existing, dict) else {}
        merged.update(kwargs)

        validated = RadarConfig.from_dict({k: v for k, v in merged.items() if k in valid_fields})

        persist = dict(merged)
        for key, input_val in kwargs.items():
            normalized_val = getattr(validated, key)
            persist[key] = _to_json_safe(normalized_val)
            if self._should_warn(input_val, normalized_val):
                _logger.warning(
                    "TypedConfigWriter: RadarConfig.%s value %r was normalized to %r",
                    key,
                    input_val,
                    normalized_val,
                )

        self._config[self.SECTION] = persist
        if self._save is not None:
            self._save(self.SECTION)
        return validated

    def _should_warn(self, input_val: Any, output_val: Any) -> bool:
        """Warn on fallbacks and clamps, not on expected conversions ("3" -> 3, "" -> None)."""
        if input_val is None or input_val == "":
            return False
        if isinstance(input_val, str) and not isinstance(output_val, str):
            try:
                return float(input_val) != output_val
            except (TypeError, ValueError):
                return input_val.lower() not in ("true", "false", "1", "0", "yes", "no")
        return input_val != output_val
