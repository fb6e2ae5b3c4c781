"""
MACS Figure
===========

Two-panel figure for a MACS run:
    - left:  pointwise cross section sigma(E) on log-log axes
    - right: MACS versus thermal energy kT

Example:
    >>> from nucmacs.visualization import MacsFigure
    >>> fig = MacsFigure(title='Mo-94(n,g) JEFF-3.1')
    >>> fig.add_dataset(dataset)
    >>> fig.add_macs(table)
    >>> fig.save('mo94_macs.png')
    >>> fig.close()
"""

from pathlib import Path
from typing import Optional, Tuple, Union

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.axes import Axes
from matplotlib.figure import Figure


class MacsFigure:
    """
    Cross-section and MACS plot.

    Attributes:
        fig: Matplotlib Figure
        ax_xs: Axes with sigma(E)
        ax_macs: Axes with MACS(kT)
    """

    def __init__(
        self,
        title: Optional[str] = None,
        figsize: Tuple[float, float] = (12, 5),
        grid_alpha: float = 0.3,
    ):
        self.fig, (self.ax_xs, self.ax_macs) = plt.subplots(1, 2, figsize=figsize)

        self.ax_xs.set_xscale('log')
        self.ax_xs.set_yscale('log')
        self.ax_xs.set_xlabel('Energy (MeV)', fontsize=12, fontweight='bold')
        self.ax_xs.set_ylabel('Cross Section (barns)', fontsize=12, fontweight='bold')
        self.ax_xs.grid(True, alpha=grid_alpha, which='both')

        self.ax_macs.set_xlabel('kT (keV)', fontsize=12, fontweight='bold')
        self.ax_macs.set_ylabel('MACS (mb)', fontsize=12, fontweight='bold')
        self.ax_macs.grid(True, alpha=grid_alpha)

        if title:
            self.fig.suptitle(title, fontsize=14, fontweight='bold')

    @staticmethod
    def _clean_data(energies: np.ndarray, xs: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Drop NaN and non-positive values (log axes)."""
        energies = np.asarray(energies, dtype=float)
        xs = np.asarray(xs, dtype=float)
        mask = np.isfinite(energies) & np.isfinite(xs) & (energies > 0) & (xs > 0)
        return energies[mask], xs[mask]

    def add_cross_section(
        self,
        energies_MeV: np.ndarray,
        xs: np.ndarray,
        label: Optional[str] = None,
        **kwargs,
    ) -> 'MacsFigure':
        """Plot a pointwise cross section (MeV, barns)."""
        energies_MeV, xs = self._clean_data(energies_MeV, xs)
        kwargs.setdefault('linewidth', 1.2)
        self.ax_xs.plot(energies_MeV, xs, label=label, **kwargs)
        if label:
            self.ax_xs.legend(loc='best', fontsize=10)
        return self

    def add_dataset(self, dataset, label: Optional[str] = None, **kwargs) -> 'MacsFigure':
        """Plot a CrossSectionDataset, labelled by its library by default."""
        if label is None:
            label = dataset.library or None
        return self.add_cross_section(
            dataset.energies_MeV(), dataset.cross_sections(), label=label, **kwargs
        )

    def add_macs(self, table: pd.DataFrame, label: Optional[str] = None, **kwargs) -> 'MacsFigure':
        """Plot a MACS table (columns T_keV, MACS_mb)."""
        kwargs.setdefault('marker', 'o')
        self.ax_macs.plot(table['T_keV'], table['MACS_mb'], label=label, **kwargs)
        # mark the temperatures on the sigma(E) panel
        for temperature in table['T_keV']:
            self.ax_xs.axvline(temperature * 1e-3, color='gray', linestyle=':', alpha=0.6)
        if label:
            self.ax_macs.legend(loc='best', fontsize=10)
        return self

    def save(self, filepath: Union[str, Path], dpi: int = 150, **kwargs) -> 'MacsFigure':
        """Save to file (format from extension)."""
        self.fig.tight_layout()
        self.fig.savefig(filepath, dpi=dpi, bbox_inches='tight', **kwargs)
        return self

    def get_figure(self) -> Tuple[Figure, Tuple[Axes, Axes]]:
        return self.fig, (self.ax_xs, self.ax_macs)

    def close(self) -> None:
        """Close the figure and free resources."""
        plt.close(self.fig)
