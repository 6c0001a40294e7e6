"""
SVG palette rendering.

Lays colors out on a fixed-width grid of square tiles and serializes the
grid as a self-contained SVG document.
"""

from collections.abc import Iterable, Sequence

COLUMNS = 10
TILE_SIZE = 64
SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def to_grid(colors: Iterable[str], size: int = COLUMNS) -> list[list[str]]:
    """
    Split colors into rows of ``size`` cells; the last row may be shorter.

    Args:
        colors: Colors in placement order
        size: Row width

    Returns:
        Row-major grid, empty for no colors
    """
    if size < 1:
        raise ValueError(f"Row size must be positive, got {size}")

    items = list(colors)
    return [items[i:i + size] for i in range(0, len(items), size)]


def render_svg(grid: Sequence[Sequence[str]]) -> str:
    """
    Serialize a color grid as SVG.

    The canvas is always ``COLUMNS`` tiles wide, even when the last row is
    shorter, and one tile high per row. Each cell becomes a ``<rect>`` at
    its column/row offset filled with the cell's color.

    Args:
        grid: Row-major grid of canonical hex colors

    Returns:
        SVG document
    """
    width = COLUMNS * TILE_SIZE
    height = len(grid) * TILE_SIZE

    parts = [
        f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" '
        f'fill="none" xmlns="{SVG_NAMESPACE}">'
    ]
    for i, row in enumerate(grid):
        for j, color in enumerate(row):
            parts.append(
                f'<rect x="{j * TILE_SIZE}" y="{i * TILE_SIZE}" '
                f'width="{TILE_SIZE}" height="{TILE_SIZE}" fill="{color}" />'
            )
    parts.append("</svg>")

    return "".join(parts)


def render_palette(colors: Iterable[str]) -> str:
    """Render colors, in order, as an SVG tile grid."""
    return render_svg(to_grid(colors))
