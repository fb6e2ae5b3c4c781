"""
Console Report
==============

Plain-text rendering of a resolved dataset and its MACS table.
"""

from typing import List

import pandas as pd

from nucmacs.exfor.models import EV_TO_MEV


def format_dataset_summary(dataset) -> str:
    """Point count and first point (MeV, barn) of a dataset."""
    lines = [f"Downloaded {len(dataset.points)} data points from API"]
    if dataset.points:
        first = dataset.points[0]
        lines.append(
            f"First point: E = {first.energy * EV_TO_MEV:g} MeV, σ = {first.cross_section:g} barn"
        )
    return '\n'.join(lines)


def format_macs_table(table: pd.DataFrame, title: str = '') -> str:
    """
    Render a MACS table (columns T_keV, MACS_mb) as text.

    Example output::

        T(keV)    MACS(mb)
        --------------------
           8.0      123.456789
    """
    lines: List[str] = []
    if title:
        lines.append(f"=== {title} ===")
        lines.append('')
    lines.append("T(keV)    MACS(mb)")
    lines.append("-" * 20)
    for row in table.itertuples(index=False):
        lines.append(f"{row.T_keV:6.1f}    {row.MACS_mb:12.6f}")
    return '\n'.join(lines)
