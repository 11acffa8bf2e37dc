"""
Image export for a finished grid canvas.

Each non-blank cell is drawn as a monospace character at its grid position,
coloured by its palette entry, on a dark background.
"""

import matplotlib.pyplot as plt

from bonsai.canvas import BLANK, GridCanvas

# 16-colour terminal palette (xterm defaults)
PALETTE = (
    "#000000", "#cd0000", "#00cd00", "#cdcd00",
    "#0000ee", "#cd00cd", "#00cdcd", "#e5e5e5",
    "#7f7f7f", "#ff0000", "#00ff00", "#ffff00",
    "#5c5cff", "#ff00ff", "#00ffff", "#ffffff",
)
BACKGROUND = "#101010"


def render_canvas(
    canvas: GridCanvas,
    cell_size: float = 0.12,
    fontsize: float = 8.0,
) -> tuple[plt.Figure, plt.Axes]:
    """
    Draw a canvas with matplotlib.

    Args:
        canvas: Canvas to draw
        cell_size: Width of one cell in inches (height is twice the width)
        fontsize: Glyph font size in points

    Returns:
        (figure, axes) tuple
    """
    width, height = canvas.bounds()
    fig, ax = plt.subplots(figsize=(width * cell_size, height * cell_size * 2))
    fig.patch.set_facecolor(BACKGROUND)
    ax.set_facecolor(BACKGROUND)
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)  # Flip Y for screen coords
    ax.axis("off")

    for y in range(height):
        for x in range(width):
            char = canvas.cell(x, y)
            if char == BLANK:
                continue
            color = PALETTE[int(canvas.colors[y, x]) % len(PALETTE)]
            weight = "bold" if canvas.bold[y, x] else "normal"
            ax.text(
                x + 0.5, y + 0.5, char,
                color=color, fontsize=fontsize, fontweight=weight,
                family="monospace", ha="center", va="center",
            )

    return fig, ax


def save_canvas(filepath: str, canvas: GridCanvas, dpi: int = 150) -> None:
    """Render and save a canvas to file."""
    fig, _ = render_canvas(canvas)
    fig.savefig(filepath, dpi=dpi, facecolor=fig.get_facecolor(), bbox_inches="tight", pad_inches=0.1)
    plt.close(fig)
    print(f"Saved to {filepath}")
