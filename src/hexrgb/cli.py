"""Command-line interface for hexrgb."""

import json
import sys

import click

from . import __version__
from .color_utils import format_color_output, parse_color
from .colors import classify, get_luminance
from .image_generation import create_png_grid


@click.command()
@click.version_option(version=__version__, prog_name="hexrgb")
@click.argument("colors", nargs=-1, required=True)
@click.option(
    "-f",
    "--format",
    type=click.Choice(["hex", "rgb", "raw"], case_sensitive=False),
    default="hex",
    help="Representation to convert the colors to (default: hex)",
)
@click.option(
    "-F",
    "--output-format",
    type=click.Choice(["grid", "json", "png"], case_sensitive=False),
    default="grid",
    help="Output format (default: grid)",
)
@click.option(
    "-m",
    "--luminance-method",
    type=click.Choice(["approximate", "relative"], case_sensitive=False),
    default="approximate",
    help=(
        "Luminance used for the light/dark split (default: approximate). "
        "Options: "
        "approximate (weighted channel sum), "
        "relative (gamma-corrected WCAG relative luminance)"
    ),
)
@click.option(
    "-c",
    "--columns",
    type=click.IntRange(1, 32),
    default=4,
    help="Number of columns for the PNG layout (default: 4)",
)
@click.option(
    "-o", "--output", type=str, help="Output file path (required for PNG format)"
)
@click.option(
    "--tile-size",
    type=click.IntRange(8, 128),
    default=32,
    help="Size of square tiles in pixels for PNG format (default: 32)",
)
@click.option(
    "--tile-margin",
    type=click.IntRange(0, 20),
    default=5,
    help="Margin between tiles in pixels for PNG format (default: 5)",
)
def main(
    colors: tuple[str, ...],
    format: str,
    output_format: str,
    luminance_method: str,
    columns: int,
    output: str,
    tile_size: int,
    tile_margin: int,
) -> None:
    """Convert HEX and RGB(A) colors and tell whether each one is light or dark.

    COLORS are HEX (#RGB, #RRGGBB, #RRGGBBAA) or RGB(A) strings
    (rgb(R, G, B), rgba(R, G, B, A)).

    Examples:

        hexrgb "#ff0000"

        hexrgb "rgb(255, 0, 0)" "rgba(0, 0, 0, 0.5)"

        hexrgb "#0f0" "#12345680" --format rgb

        hexrgb "#ffffff" "#000000" -F json

        hexrgb "#777777" -m relative

        hexrgb "#f00" "#0f0" "#00f" -F png -c 3 -o swatches.png
    """
    try:
        parsed = [parse_color(color) for color in colors]

        format_type = format.lower()
        method = luminance_method.lower()

        converted = format_color_output(parsed, format_type)
        tones = [classify(color, method=method) for color in parsed]  # type: ignore[arg-type]

        if output_format == "json":
            records = [
                {
                    "input": source,
                    "output": value,
                    "tone": tone,
                    "luminance": round(get_luminance(*color.rgb, method=method), 4),  # type: ignore[arg-type]
                }
                for source, value, tone, color in zip(colors, converted, tones, parsed)
            ]
            click.echo(json.dumps(records, indent=2))
        elif output_format == "png":
            if not output:
                click.echo("Error: PNG output requires -o/--output filename", err=True)
                sys.exit(1)

            try:
                create_png_grid(
                    parsed, columns, output, tile_size, tile_margin, method=method  # type: ignore[arg-type]
                )
            except Exception as e:
                click.echo(f"Error creating PNG: {e}", err=True)
                sys.exit(1)
        else:  # grid format
            click.echo(
                f"Converted {len(converted)} colors to {format_type} "
                f"({method} luminance):"
            )
            click.echo()

            for source, value, tone in zip(colors, converted, tones):
                click.echo(f"  {source:24}  {value:32}  {tone}")

    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Unexpected error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
