"""Confusion matrix figure for an evaluation result."""

from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .config import LABELS


def plot_confusion(result, path, title="Confusion Matrix"):
    cm = result.confusion
    fig, ax = plt.subplots()
    im = ax.imshow(cm, cmap="Blues")
    ticks = list(range(len(LABELS)))
    ax.set_xticks(ticks); ax.set_yticks(ticks)
    ax.set_xticklabels(LABELS); ax.set_yticklabels(LABELS)
    ax.set_xlabel("Predicted"); ax.set_ylabel("Actual")
    ax.set_title(f"{title} (acc={result.accuracy:.3f})")
    for i in ticks:
        for j in ticks:
            ax.text(j, i, int(cm[i, j]), ha="center", va="center", color="black")
    fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04)
    plt.tight_layout()
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(path, dpi=150)
    plt.close(fig)
    return path
