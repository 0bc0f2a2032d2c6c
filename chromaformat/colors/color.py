from __future__ import annotations
from typing import ClassVar, Optional, Self
import numpy as np
from boundednumbers import BoundType

from ..types.color_types import ColorValue, RGBTuple, RGBATuple, VALID_CHANNEL_COUNTS, element_to_array
from ..types.format_type import BYTE_MAX
from ..utils import bound_channels, value_or_default


class Color:
    """
    Immutable RGBA color with unit channels in [0, 1].

    Accepts a 3- or 4-element tuple, list or 1-D ndarray; alpha defaults
    to 1.0. Out-of-range channels are bounded with ``bound_type``
    (``BoundType.CLAMP`` by default, ``BoundType.IGNORE`` keeps them).
    """
    __slots__ = ('_value', '_bound_type', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 4
    default_alpha: ClassVar[float] = 1.0

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorValue | Color, *, bound_type: Optional[BoundType] = None) -> None:
        # A copied Color keeps its own bound type unless one is given
        if isinstance(value, Color):
            bound_type = value_or_default(bound_type, value.bound_type)
            value = value.value
        bound_type = value_or_default(bound_type, BoundType.CLAMP)

        arr = element_to_array(value)
        if arr.ndim != 1 or arr.shape[0] not in VALID_CHANNEL_COUNTS:
            raise ValueError(
                f"{self.__class__.__name__} expects 3 or 4 channels, got shape {arr.shape}"
            )
        if not np.all(np.isfinite(arr)):
            raise ValueError(f"{self.__class__.__name__} channels must be finite, got {arr.tolist()}")

        if arr.shape[0] == 3:
            arr = np.append(arr, self.default_alpha)

        arr = bound_channels(arr, bound_type)

        # safe assignment; __setattr__ still allows it during init
        self._value = tuple(float(v) for v in arr)
        self._bound_type = bound_type

        # freeze instance: no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_channels(
        cls,
        red: float,
        green: float,
        blue: float,
        alpha: float = 1.0,
        *,
        bound_type: BoundType = BoundType.CLAMP,
    ) -> Self:
        return cls((red, green, blue, alpha), bound_type=bound_type)

    @classmethod
    def from_bytes(cls, red: int, green: int, blue: int, alpha: int = BYTE_MAX) -> Self:
        """Build a color from 0..255 channel values."""
        return cls(np.array([red, green, blue, alpha], dtype=float) / BYTE_MAX)

    @classmethod
    def random(cls, rng: Optional[np.random.Generator] = None) -> Self:
        """Draw all four channels uniformly from [0, 1)."""
        if rng is None:
            rng = np.random.default_rng()
        return cls(rng.random(cls.num_channels))

    def with_alpha(self, alpha: float) -> Self:
        """Return a new instance with the alpha channel replaced, bounded the same way."""
        return self.__class__(self.rgb + (alpha,), bound_type=self._bound_type)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> RGBATuple:
        return self._value

    @property
    def bound_type(self) -> BoundType:
        return self._bound_type

    @property
    def rgb(self) -> RGBTuple:
        return self._value[:3]

    @property
    def red(self) -> float:
        return self._value[0]

    @property
    def green(self) -> float:
        return self._value[1]

    @property
    def blue(self) -> float:
        return self._value[2]

    @property
    def alpha(self) -> float:
        return self._value[3]

    @property
    def is_opaque(self) -> bool:
        return self._value[3] == 1.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        r, g, b, a = self._value
        return f"{self.__class__.__name__}(red={r}, green={g}, blue={b}, alpha={a})"
