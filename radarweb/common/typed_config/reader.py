# radarweb/common/typed_config/reader.py
#
# TypedConfigReader - typed view over a plain config dict.

from typing import Any

from radarweb.common.typed_config.models import RadarConfig


class TypedConfigReader:
    """Typed config reader.

    from_dict() runs on every call, so the latest values are always returned.
    The section dict is copied before parsing.

    Usage:
        reader = TypedConfigReader(config_dict)
        radar = reader.get_radar()  # RadarConfig
    """

    def __init__(self, config_dict: dict[str, Any]) -> None:
        self._config = config_dict

    def get_radar(self) -> RadarConfig:
        raw = self._config.get("radar")
        snapshot = dict(raw) if isinstance(raw, dict) else {}
        return RadarConfig.from_dict(snapshot)
