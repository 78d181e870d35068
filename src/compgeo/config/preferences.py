# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Typed canvas preferences.

Each preference is a named value holder parameterized by its storage type.
Values live in a :class:`PreferenceStore`; persisting a store is left to the
presentation layer.
"""

from dataclasses import dataclass
from typing import Dict, Generic, Optional, Tuple, TypeVar

from ..errors import InvalidArgumentError

T = TypeVar('T')


@dataclass(frozen=True)
class Preference(Generic[T]):
    """
    A named preference with a default value and a storage type.

    :param name: Key under which the value is stored.
    :type name: str
    :param default: Value used while nothing has been stored.
    :type default: T
    :param value_type: Python type every stored value must have.
    :type value_type: type
    """
    name: str
    default: T
    value_type: type

    def validate(self, value: T) -> T:
        # bool is a subclass of int; keep the two preference kinds apart
        if isinstance(value, bool) != (self.value_type is bool) or not isinstance(value, self.value_type):
            raise InvalidArgumentError(
                f"Preference {self.name} expects {self.value_type.__name__}, got {value!r}")
        return value


POINT_RADIUS: Preference[int] = Preference('POINT_RADIUS', 4, int)
RANDOM_POINT_COUNT: Preference[int] = Preference('RANDOM_POINT_COUNT', 3, int)
CONVEX_HULL_COLOR: Preference[int] = Preference('CONVEX_HULL_COLOR', 0x7fff0000, int)  # transparent red
DRAW_POINTS: Preference[bool] = Preference('DRAW_POINTS', True, bool)
SMOOTH_EDGES: Preference[bool] = Preference('SMOOTH_EDGES', True, bool)
COLOR_VORONOI_CELL_REGIONS: Preference[bool] = Preference('COLOR_VORONOI_CELL_REGIONS', True, bool)
SHOW_POINTS_LABEL: Preference[bool] = Preference('SHOW_POINTS_LABEL', True, bool)

ALL_PREFERENCES: Tuple[Preference, ...] = (
    POINT_RADIUS,
    RANDOM_POINT_COUNT,
    CONVEX_HULL_COLOR,
    DRAW_POINTS,
    SMOOTH_EDGES,
    COLOR_VORONOI_CELL_REGIONS,
    SHOW_POINTS_LABEL,
)


class PreferenceStore:
    """In-memory preference values keyed by preference name."""

    def __init__(self, values: Optional[Dict[str, object]] = None):
        self._values: Dict[str, object] = {}
        known = {p.name: p for p in ALL_PREFERENCES}
        for name, value in (values or {}).items():
            if name not in known:
                raise InvalidArgumentError(f"Unknown preference: {name}")
            self.set(known[name], value)

    def get(self, preference: Preference[T]) -> T:
        return self._values.get(preference.name, preference.default)

    def set(self, preference: Preference[T], value: T) -> None:
        self._values[preference.name] = preference.validate(value)

    def reset(self) -> None:
        """Restore every preference to its default."""
        self._values.clear()

    def as_dict(self) -> Dict[str, object]:
        return {p.name: self.get(p) for p in ALL_PREFERENCES}
