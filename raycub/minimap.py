"""Top-down minimap around the player."""

from __future__ import annotations

from dataclasses import dataclass, field

from .gamedata import GameData
from .image import Image

MMAP_PIXEL_SIZE = 128
MMAP_VIEW_DIST = 4
MMAP_COLOR_PLAYER = 0x00FF00
MMAP_COLOR_WALL = 0x808080
MMAP_COLOR_FLOOR = 0xE6E6E6
MMAP_COLOR_SPACE = 0x404040

_BORDER = 5
_TILE_COLORS = {
    "P": MMAP_COLOR_PLAYER,
    "1": MMAP_COLOR_WALL,
    "0": MMAP_COLOR_FLOOR,
    " ": MMAP_COLOR_SPACE,
}


@dataclass
class Minimap:
    """The visible part of the map: one character per tile, 'P' for the player."""

    rows: list[str] = field(default_factory=list)
    view_dist: int = MMAP_VIEW_DIST
    offset_x: int = 0
    offset_y: int = 0

    @property
    def size(self) -> int:
        """Number of tiles along each side."""
        return 2 * self.view_dist + 1

    @property
    def tile_size(self) -> int:
        """Side of one tile in pixels."""
        return MMAP_PIXEL_SIZE // (2 * self.view_dist)

    @property
    def image_size(self) -> int:
        """Side of the minimap image in pixels."""
        return MMAP_PIXEL_SIZE + self.tile_size

    def screen_position(self, win_height: int) -> tuple[int, int]:
        """Top-left corner of the minimap in a window of the given height."""
        return self.tile_size, win_height - (MMAP_PIXEL_SIZE + self.tile_size * 2)


def mmap_offset(view_dist: int, size: int, mapsize: int, pos: int) -> int:
    """First map coordinate shown so that pos stays in view."""
    if pos > view_dist:
        if mapsize - pos > view_dist + 1:
            return pos - view_dist
        return mapsize - size
    return 0


def _cell(data: GameData, grid, mx: int, my: int) -> str:
    if my >= data.mapinfo.height or mx >= data.mapinfo.width:
        return "\0"
    if int(data.player.pos_x) == mx and int(data.player.pos_y) == my:
        return "P"
    row = grid[my] if 0 <= my < len(grid) else ""
    char = row[mx] if 0 <= mx < len(row) else "\0"
    return char if char in ("0", "1") else "\0"


def generate_minimap(data: GameData) -> Minimap:
    """Build the minimap rows around the player.

    A row stops at the first cell that is off the map or neither wall nor floor.
    """
    minimap = Minimap()
    minimap.offset_x = mmap_offset(
        minimap.view_dist, minimap.size, data.mapinfo.width, int(data.player.pos_x)
    )
    minimap.offset_y = mmap_offset(
        minimap.view_dist, minimap.size, data.mapinfo.height, int(data.player.pos_y)
    )
    grid = data.map or []
    for y in range(min(minimap.size, data.mapinfo.height)):
        cells = "".join(
            _cell(data, grid, x + minimap.offset_x, y + minimap.offset_y)
            for x in range(min(minimap.size, data.mapinfo.width))
        )
        minimap.rows.append(cells.split("\0", 1)[0])
    return minimap


def draw_minimap(minimap: Minimap) -> Image:
    """Paint the minimap tiles and a border into a new image."""
    tile = minimap.tile_size
    side = minimap.image_size
    image = Image(side, side)
    for y, row in enumerate(minimap.rows[:minimap.size]):
        for x, char in enumerate(row[:minimap.size]):
            color = _TILE_COLORS.get(char)
            if color is None:
                continue
            for i in range(tile):
                for j in range(tile):
                    image.set_pixel(x * tile + j, y * tile + i, color)
    for y in range(side):
        for x in range(side):
            if x < _BORDER or x > side - _BORDER or y < _BORDER or y > side - _BORDER:
                image.set_pixel(x, y, MMAP_COLOR_SPACE)
    return image