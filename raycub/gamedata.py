"""Game state records and their debug dump."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

WIN_WIDTH = 640
WIN_HEIGHT = 480
TEX_SIZE = 64

NORTH = 0
SOUTH = 1
EAST = 2
WEST = 3

_YELLOW = "\033[33m"
_RESET = "\033[0m"


@dataclass
class Player:
    """Position, view direction, camera plane and pending input of the player."""

    direction: str = "\0"
    pos_x: float = 0.0
    pos_y: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0
    has_moved: int = 0
    move_x: int = 0
    move_y: int = 0
    rotate: int = 0


@dataclass
class TexInfo:
    """Texture paths, floor and ceiling colours and texture sampling state."""

    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    floor: list[int] | None = None
    ceiling: list[int] | None = None
    hex_floor: int = 0x0
    hex_ceiling: int = 0x0
    size: int = TEX_SIZE
    step: float = 0.0
    pos: float = 0.0
    x: int = 0
    y: int = 0
    index: int = 0


@dataclass
class MapInfo:
    """The scene file's lines and the dimensions of the map found in it."""

    path: str | None = None
    file: list[str] = field(default_factory=list)
    line_count: int = 0
    height: int = 0
    width: int = 0
    index_end_of_map: int = 0


@dataclass
class Ray:
    """State of one ray cast through the map."""

    camera_x: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    map_x: int = 0
    map_y: int = 0
    step_x: int = 0
    step_y: int = 0
    sidedist_x: float = 0.0
    sidedist_y: float = 0.0
    deltadist_x: float = 0.0
    deltadist_y: float = 0.0
    wall_dist: float = 0.0
    wall_x: float = 0.0
    side: int = 0
    line_height: int = 0
    draw_start: int = 0
    draw_end: int = 0


@dataclass
class GameData:
    """Everything the game knows about the scene, the player and the frame."""

    win_width: int = WIN_WIDTH
    win_height: int = WIN_HEIGHT
    player: Player = field(default_factory=Player)
    texinfo: TexInfo = field(default_factory=TexInfo)
    mapinfo: MapInfo = field(default_factory=MapInfo)
    map: list[str] | None = None
    ray: Ray = field(default_factory=Ray)
    texture_pixels: list[list[int]] | None = None
    textures: list[list[int]] | None = None


def format_char_tab(rows) -> str:
    """Render rows of text framed by blank lines."""
    return "\n" + "".join(f"{row}\n" for row in rows) + "\n"


def _text(value: str | None) -> str:
    return "(null)" if value is None else value


def _format_mapinfo(data: GameData) -> str:
    tex = data.texinfo
    return "".join(
        (
            f"{_YELLOW}\n---- MAP\n{_RESET}",
            f"Map height: {data.mapinfo.height}\n",
            f"Map width: {data.mapinfo.width}\n",
            format_char_tab(data.map or []),
            f"{_YELLOW}\n---- TEXTURES & COLORS\n{_RESET}",
            f"Color ceiling: #{tex.hex_ceiling:x}\n",
            f"Color floor: #{tex.hex_floor:x}\n",
            f"Texture north: {_text(tex.north)}\n",
            f"Texture south: {_text(tex.south)}\n",
            f"Texture east: {_text(tex.east)}\n",
            f"Texture west: {_text(tex.west)}\n",
        )
    )


def _format_player(data: GameData) -> str:
    player = data.player
    return "".join(
        (
            f"{_YELLOW}\n---- PLAYER\n{_RESET}",
            "Player pos: ",
            f"x = {player.pos_x:f}, y = {player.pos_y:f}\n",
            f"Player direction: {player.direction} ",
            f"(x = {player.dir_x:f}, y = {player.dir_y:f})\n",
        )
    )


def format_data(data: GameData) -> str:
    """Describe the map, textures, colours and player for debugging."""
    return _format_mapinfo(data) + _format_player(data) + "\n"


def debug_display_data(data: GameData, stream: TextIO | None = None) -> None:
    """Write the debug description of the game data to a stream, stdout by default."""
    (stream or sys.stdout).write(format_data(data))