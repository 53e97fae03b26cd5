# Alphabet mapping figure: plain letters on top, cipher letters below,
# one line per letter, letters from the input drawn highlighted.

from typing import List, Optional

import matplotlib.pyplot as plt

from .mapping import MappingEntry


def plot_mapping(entries: List[MappingEntry], title: str = "Alphabet mapping"):
    """
    Build the mapping figure and return it (does not show or save).
    """
    fig, ax = plt.subplots(figsize=(14, 3.5))
    n = len(entries)

    for e in entries:
        color = "tab:orange" if e.is_highlighted else "lightgray"
        width = 2.0 if e.is_highlighted else 1.0
        ax.plot([e.plain_index, e.cipher_index], [1, 0], color=color, linewidth=width, zorder=1)

    for e in entries:
        weight = "bold" if e.is_highlighted else "normal"
        ax.text(e.plain_index, 1.08, e.plain_letter.upper(), ha="center", va="bottom", fontweight=weight)
        ax.text(e.plain_index, 1.25, str(e.plain_index), ha="center", va="bottom", fontsize=7, color="gray")
    for e in entries:
        ax.text(e.cipher_index, -0.08, e.cipher_letter.upper(), ha="center", va="top")
        ax.text(e.cipher_index, -0.25, str(e.cipher_index), ha="center", va="top", fontsize=7, color="gray")

    ax.set_xlim(-1, n)
    ax.set_ylim(-0.5, 1.5)
    ax.set_title(title)
    ax.axis("off")
    fig.tight_layout()
    return fig


def show_or_save(fig, path: Optional[str] = None):
    if path:
        fig.savefig(path, dpi=120)
        print(f"Mapping figure saved to '{path}'.")
    else:
        plt.show()
    plt.close(fig)
