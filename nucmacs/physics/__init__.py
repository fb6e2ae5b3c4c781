"""
Physics Module
==============

Maxwellian averaging of pointwise cross sections.
"""

from nucmacs.physics.macs import (
    KB,
    calculate_macs,
    compute_macs_for_dataset,
    macs_table,
    trapezoid_area,
)

__all__ = [
    'KB',
    'calculate_macs',
    'compute_macs_for_dataset',
    'macs_table',
    'trapezoid_area',
]
