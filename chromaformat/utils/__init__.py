from .default import value_or_default
from .bounds import bound_channels, is_unit_range

__all__ = ["value_or_default", "bound_channels", "is_unit_range"]
