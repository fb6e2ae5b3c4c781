"""
Visualization Module
====================

Main Classes:
    MacsFigure: Cross section sigma(E) and MACS(kT) side by side
"""

from .macs_figure import MacsFigure

__all__ = ['MacsFigure']
