"""The scene description loaded from a ``.cub`` file."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

UNSET = -1
_RULE = "-" * 20


class Texture(IntEnum):
    """Wall texture slots, in the order they are stored."""

    NO = 0
    SO = 1
    EA = 2
    WE = 3


def _unset_color() -> list[int]:
    return [UNSET, UNSET, UNSET]


def _empty_textures() -> list[Optional[str]]:
    return [None] * len(Texture)


@dataclass
class CubMap:
    """Wall textures, floor and ceiling colours and the map grid of a scene.

    Colours and sizes hold ``-1`` until they have been read.
    """

    textures: list[Optional[str]] = field(default_factory=_empty_textures)
    floor_color: list[int] = field(default_factory=_unset_color)
    ceiling_color: list[int] = field(default_factory=_unset_color)
    grid: list[str] = field(default_factory=list)
    width: int = UNSET
    height: int = UNSET

    def summary(self) -> str:
        """A human-readable report of the loaded settings, one item per line."""

        def texture_line(slot: Texture) -> str:
            path = self.textures[slot]
            return f"{slot.name}: {path if path else 'Not Loaded'}"

        def color_text(color: list[int]) -> str:
            return ", ".join(str(part) for part in color)

        lines = [
            _RULE,
            "MAP INIT------------",
            _RULE,
            *(texture_line(slot) for slot in Texture),
            f"floor_color: {color_text(self.floor_color)}",
            f"ceiling_color: {color_text(self.ceiling_color)}",
            f"width: {self.width}",
            f"height: {self.height}",
            _RULE,
            "MAP INIT END--------",
            _RULE,
        ]
        return "\n".join(lines)

    def settings_complete(self) -> bool:
        """True once every texture and both colours have been read."""
        if any(not path for path in self.textures):
            return False
        return self.floor_color[0] != UNSET and self.ceiling_color[0] != UNSET