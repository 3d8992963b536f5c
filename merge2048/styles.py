from dataclasses import dataclass

LIGHT_TEXT = "#f9f6f2"


@dataclass(frozen=True)
class TileStyle:
    color: str
    bg_color: str
    font_size: int

    @property
    def light_text(self) -> bool:
        return self.color == LIGHT_TEXT


TILE_STYLES: dict[int, TileStyle] = {
    0: TileStyle("#ccc1b4", "#ccc1b4", 56),
    2: TileStyle("#776e65", "#eee4da", 56),
    4: TileStyle("#776e65", "#ede0c8", 56),
    8: TileStyle(LIGHT_TEXT, "#f2b179", 56),
    16: TileStyle(LIGHT_TEXT, "#f59563", 56),
    32: TileStyle(LIGHT_TEXT, "#f67c5f", 56),
    64: TileStyle(LIGHT_TEXT, "#f65e3b", 56),
    128: TileStyle(LIGHT_TEXT, "#edcf72", 48),
    256: TileStyle(LIGHT_TEXT, "#edcc61", 48),
    512: TileStyle(LIGHT_TEXT, "#edc850", 48),
    1024: TileStyle(LIGHT_TEXT, "#edc53f", 40),
    2048: TileStyle(LIGHT_TEXT, "#edc22e", 40),
}

# Used for tiles above 2048
DEFAULT_STYLE = TileStyle(LIGHT_TEXT, "#3c3a32", 32)


def style_for(value: int) -> TileStyle:
    return TILE_STYLES.get(int(value), DEFAULT_STYLE)
