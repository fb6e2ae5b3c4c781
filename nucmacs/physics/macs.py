"""
Maxwellian-Averaged Cross Section
=================================

MACS of a pointwise cross section at thermal energy kT:

    MACS = 2 a^2 / (sqrt(pi) (kT)^2) * Integral[ sigma(E) E exp(-a E / kT) dE ]

where a = A / (1 + A) is the reduced-mass factor and A the atomic mass
number. The integral is a piecewise trapezoidal sum over the tabulated
points; the declared interpolation law of the data is not used.

Units:
    energies        MeV
    cross sections  barns
    temperature     keV (kT)
    result          millibarns

Example:
    >>> energies = [0.001, 0.002, 0.003]   # MeV
    >>> xs = [10.0, 8.0, 6.0]              # barns
    >>> calculate_macs(energies, xs, atomic_mass=94.0, temperature_keV=30.0)
"""

import logging
from typing import Callable, Sequence, Union

import numpy as np
import pandas as pd

from nucmacs.errors import ValidationError

logger = logging.getLogger(__name__)

# Boltzmann constant (MeV/K)
KB = 8.617e-11

ArrayLike = Union[Sequence[float], np.ndarray]


def trapezoid_area(
    f: Callable[[float, float], float],
    x1: float,
    x2: float,
    y1: float,
    y2: float,
) -> float:
    """Area under ``f`` between (x1, y1) and (x2, y2) by the trapezoidal rule."""
    return 0.5 * (f(x1, y1) + f(x2, y2)) * (x2 - x1)


def calculate_macs(
    energies_MeV: ArrayLike,
    cross_sections_barns: ArrayLike,
    atomic_mass: float,
    temperature_keV: float,
) -> float:
    """
    Calculate the Maxwellian-averaged cross section at one temperature.

    The thermal energy is obtained through the Kelvin temperature
    (keV -> MeV -> K -> MeV) so that results reproduce reference values
    computed the same way.

    Args:
        energies_MeV: Energy grid in MeV, ascending
        cross_sections_barns: Cross sections in barns, same length
        atomic_mass: Atomic mass number A (e.g., 94 for Mo-94)
        temperature_keV: Thermal energy kT in keV

    Returns:
        MACS in millibarns. A single point gives 0.0.

    Raises:
        ValidationError: On length mismatch, empty input, non-positive
            temperature or non-positive atomic mass
            (see ``ValidationError.constraint``)
    """
    energies = np.asarray(energies_MeV, dtype=float)
    cross_sections = np.asarray(cross_sections_barns, dtype=float)

    if len(energies) != len(cross_sections):
        raise ValidationError(
            ValidationError.LENGTH_MISMATCH,
            f"Energy and cross section vectors must have the same length "
            f"(got {len(energies)} and {len(cross_sections)})",
        )
    if len(energies) == 0:
        raise ValidationError(ValidationError.EMPTY_INPUT, "Input vectors cannot be empty")
    if not temperature_keV > 0:
        raise ValidationError(
            ValidationError.NON_POSITIVE_TEMPERATURE,
            f"Temperature must be positive (got {temperature_keV} keV)",
        )
    if not atomic_mass > 0:
        raise ValidationError(
            ValidationError.NON_POSITIVE_MASS,
            f"Atomic mass must be positive (got {atomic_mass})",
        )

    temperature_K = (temperature_keV * 1e-3) / KB
    a = atomic_mass / (1.0 + atomic_mass)

    def integrand(e: float, cs: float) -> float:
        return cs * e * np.exp(-(a * e) / (KB * temperature_K))

    integral = 0.0
    for i in range(1, len(energies)):
        integral += trapezoid_area(
            integrand,
            energies[i - 1],
            energies[i],
            cross_sections[i - 1],
            cross_sections[i],
        )

    kT = KB * temperature_K
    normalization = (2.0 * a ** 2) / (np.sqrt(np.pi) * kT ** 2)

    macs_barns = normalization * integral
    return float(macs_barns * 1000.0)


def macs_table(
    energies_MeV: ArrayLike,
    cross_sections_barns: ArrayLike,
    atomic_mass: float,
    temperatures_keV: Sequence[float],
) -> pd.DataFrame:
    """
    MACS at several temperatures.

    Returns:
        DataFrame with columns T_keV, MACS_mb (input order)
    """
    rows = []
    for temperature in temperatures_keV:
        macs = calculate_macs(energies_MeV, cross_sections_barns, atomic_mass, temperature)
        logger.debug(f"kT = {temperature} keV: MACS = {macs:.6f} mb")
        rows.append({'T_keV': float(temperature), 'MACS_mb': macs})
    return pd.DataFrame(rows, columns=['T_keV', 'MACS_mb'])


def compute_macs_for_dataset(
    dataset,
    atomic_mass: float,
    temperatures_keV: Sequence[float],
) -> pd.DataFrame:
    """
    MACS table for a :class:`~nucmacs.exfor.CrossSectionDataset`.

    The dataset's eV energies are converted to MeV before integration.
    """
    return macs_table(
        dataset.energies_MeV(),
        dataset.cross_sections(),
        atomic_mass,
        temperatures_keV,
    )
