"""Swatch sheet rendering for hexrgb."""

import math

import click
import matplotlib.patches as patches
import matplotlib.pyplot as plt

from .color_utils import Color, rgb_to_hex
from .colors import LuminanceMethod, classify

# Label text color for each tone of the tile underneath
_LABEL_COLORS = {"light": "black", "dark": "white"}


def create_png_grid(
    colors: list[Color],
    columns: int,
    output_file: str,
    tile_size: int = 32,
    tile_margin: int = 5,
    background_color: tuple[float, float, float] = (1.0, 1.0, 1.0),
    method: LuminanceMethod = "approximate",
) -> None:
    """Create a PNG image with one labelled tile per color, arranged in a grid.

    Each tile carries its HEX code, written in black on light tiles and in
    white on dark ones.
    """
    n_colors = len(colors)
    if n_colors == 0:
        raise ValueError("No colors provided")

    rows = math.ceil(n_colors / columns)

    w = (columns * (tile_size + tile_margin)) + tile_margin
    # Extra bottom margin
    h = (rows * (tile_size + tile_margin)) + tile_margin + tile_margin

    fig, ax = plt.subplots(figsize=(w / 100, h / 100), dpi=100)  # type: ignore[misc]

    fig.patch.set_facecolor(background_color)
    ax.set_facecolor(background_color)

    ax.set_xlim(0, w)
    ax.set_ylim(0, h)
    ax.axis("off")

    font_size = max(tile_size // 6, 4)

    for i, color in enumerate(colors):
        row = i // columns
        col = i % columns

        # Flip the y-axis so the first row is drawn at the top
        x = tile_margin + col * (tile_size + tile_margin)
        y = h - tile_margin - (row + 1) * (tile_size + tile_margin)

        rect = patches.Rectangle(
            (x, y), tile_size, tile_size, linewidth=0, facecolor=color.normalized
        )
        ax.add_patch(rect)

        ax.text(
            x + tile_size / 2,
            y + tile_size / 2,
            rgb_to_hex(*color.rgb),
            ha="center",
            va="center",
            fontsize=font_size,
            color=_LABEL_COLORS[classify(color, method=method)],
        )

    plt.tight_layout()
    plt.savefig(output_file, bbox_inches="tight", pad_inches=0, dpi=100)  # type: ignore[misc]
    plt.close()

    click.echo(f"PNG swatches saved to: {output_file}")
