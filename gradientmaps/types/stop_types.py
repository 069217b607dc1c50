from __future__ import annotations
from typing import List, NamedTuple, Optional
from .color_types import RGBA


class ColorStop(NamedTuple):
    """
    A color paired with a position along the ramp.

    ``pos`` is a percentage in [0, 100], or ``None`` while it still has to be
    filled in by the resolver.
    """

    color: RGBA
    pos: Optional[float] = None

    @property
    def is_positioned(self) -> bool:
        return self.pos is not None

    def with_pos(self, pos: Optional[float]) -> ColorStop:
        return self._replace(pos=None if pos is None else float(pos))


StopList = List[ColorStop]
