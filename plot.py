from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence, Union
import logging

import matplotlib.pyplot as plt

from interval import Interval
from polynomial import Polynomial

logger = logging.getLogger(__name__)

DEFAULT_SAMPLES = 50
MIN_SAMPLES = 2


@dataclass(frozen=True)
class InsufficientSamples:
    """Returned, not raised, when a plot asks for fewer than two samples."""

    requested: int

    @property
    def message(self) -> str:
        return "Requested less than 2 samples for plotting."

    def __str__(self) -> str:
        return self.message


@dataclass
class Series:
    label: str
    xs: List[float] = field(default_factory=list)
    ys: List[float] = field(default_factory=list)


def sample(p: Polynomial, domain: Interval, samples: int = DEFAULT_SAMPLES) -> Series:
    xs = domain.linspace(samples)
    return Series(str(p), xs, [p.at(x) for x in xs])


def plot(
    polynomials: Sequence[Polynomial],
    left: float,
    right: float,
    samples: int = DEFAULT_SAMPLES,
    output: str = "plot",
) -> Union[Path, InsufficientSamples]:
    """Sample each polynomial on [left, right] and draw them into ``<output>.png``.

    Returns the written path, or InsufficientSamples when ``samples < 2``.
    """
    if samples < MIN_SAMPLES:
        return InsufficientSamples(samples)
    if len(polynomials) == 0:
        raise ValueError("Nothing to plot")
    if not left < right:
        raise ValueError(f"Empty plotting domain [{left}, {right}]")

    domain = Interval.closed(left, right)
    series = [sample(p, domain, samples) for p in polynomials]
    path = Path(f"{output}.png")

    fig, ax = plt.subplots(figsize=(8, 5))
    try:
        ax.axhline(0, color="black", linewidth=0.5)
        if domain.contains(0.0):
            ax.axvline(0, color="black", linewidth=0.5)
        for s in series:
            ax.plot(s.xs, s.ys, label=s.label)
        ax.set_xlim(domain.left(), domain.right())
        ax.set_xlabel("x")
        ax.set_ylabel("p(x)")
        ax.set_title(output)
        ax.legend()
        ax.grid(True)
        fig.savefig(path, dpi=150)
    finally:
        plt.close(fig)
    logger.info("Plotted %d polynomial(s) on %s into %s", len(series), domain, path)
    return path
