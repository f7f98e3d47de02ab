# radarweb/common/typed_config - typed accessors for the chart options
#
# The "radar" section is parsed into a frozen dataclass; invalid values fall
# back to defaults instead of raising.

from radarweb.common.typed_config.models import (
    RadarConfig,
    safe_bool,
    safe_float,
    safe_int,
    safe_optional_float,
)
from radarweb.common.typed_config.reader import TypedConfigReader
from radarweb.common.typed_config.writer import TypedConfigWriter, UnknownFieldError

__all__ = [
    "RadarConfig",
    "TypedConfigReader",
    "TypedConfigWriter",
    "UnknownFieldError",
    "safe_int",
    "safe_float",
    "safe_bool",
    "safe_optional_float",
]
