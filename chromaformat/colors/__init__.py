"""
Chromaformat Color Value
========================

The immutable :class:`Color` consumed by every formatter.

>>> from chromaformat.colors import Color
>>> red = Color((1.0, 0.0, 0.0))
>>> red.value
(1.0, 0.0, 0.0, 1.0)
>>> red.with_alpha(0.5).alpha
0.5

Channels outside [0, 1] are clamped unless ``bound_type=BoundType.IGNORE``
is passed, in which case they are kept and a ``UserWarning`` is issued.
"""

from .color import Color

__all__ = ['Color']
