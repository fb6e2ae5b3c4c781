"""Tests for the Maxwellian-averaged cross-section integration."""

import math

import numpy as np
import pandas as pd
import pytest

from nucmacs.errors import ValidationError
from nucmacs.physics.macs import (
    KB,
    calculate_macs,
    compute_macs_for_dataset,
    macs_table,
    trapezoid_area,
)
from nucmacs.exfor.models import CrossSectionDataset, CrossSectionPoint


def _two_point_reference(e1, e2, s1, s2, A, T_keV):
    """Trapezoidal MACS of two points, written out by hand (mb)."""
    T_K = (T_keV * 1e-3) / KB
    kT = KB * T_K
    a = A / (1.0 + A)
    g1 = s1 * e1 * math.exp(-(a * e1) / kT)
    g2 = s2 * e2 * math.exp(-(a * e2) / kT)
    integral = 0.5 * (g1 + g2) * (e2 - e1)
    norm = 2.0 * a ** 2 / (math.sqrt(math.pi) * kT ** 2)
    return norm * integral * 1000.0


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------

class TestValidation:

    def test_length_mismatch(self):
        with pytest.raises(ValidationError) as exc_info:
            calculate_macs([0.001, 0.002, 0.003], [10.0, 8.0], 94.0, 30.0)
        assert exc_info.value.constraint == ValidationError.LENGTH_MISMATCH

    def test_empty_input(self):
        with pytest.raises(ValidationError) as exc_info:
            calculate_macs([], [], 94.0, 30.0)
        assert exc_info.value.constraint == ValidationError.EMPTY_INPUT

    def test_length_checked_before_emptiness(self):
        with pytest.raises(ValidationError) as exc_info:
            calculate_macs([], [1.0], 94.0, 30.0)
        assert exc_info.value.constraint == ValidationError.LENGTH_MISMATCH

    @pytest.mark.parametrize('temperature', [0.0, -5.0, float('nan')])
    def test_non_positive_temperature(self, temperature):
        with pytest.raises(ValidationError) as exc_info:
            calculate_macs([0.001, 0.002], [10.0, 8.0], 94.0, temperature)
        assert exc_info.value.constraint == ValidationError.NON_POSITIVE_TEMPERATURE

    @pytest.mark.parametrize('atomic_mass', [0.0, -1.0, -94.0, float('nan')])
    def test_non_positive_atomic_mass(self, atomic_mass):
        with pytest.raises(ValidationError) as exc_info:
            calculate_macs([0.001, 0.002], [10.0, 8.0], atomic_mass, 30.0)
        assert exc_info.value.constraint == ValidationError.NON_POSITIVE_MASS

    def test_temperature_checked_before_mass(self):
        with pytest.raises(ValidationError) as exc_info:
            calculate_macs([0.001, 0.002], [10.0, 8.0], -1.0, 0.0)
        assert exc_info.value.constraint == ValidationError.NON_POSITIVE_TEMPERATURE

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            calculate_macs([0.001], [1.0, 2.0], 94.0, 30.0)


# ---------------------------------------------------------------------------
# Numerical behaviour
# ---------------------------------------------------------------------------

class TestCalculateMacs:

    def test_single_point_is_zero(self):
        assert calculate_macs([0.001], [10.0], 94.0, 30.0) == 0.0

    def test_two_point_matches_closed_form(self):
        expected = _two_point_reference(0.001, 0.002, 10.0, 8.0, 94.0, 30.0)
        result = calculate_macs([0.001, 0.002], [10.0, 8.0], 94.0, 30.0)
        assert result == pytest.approx(expected, rel=1e-9)

    def test_kelvin_round_trip_matches_direct_kT(self):
        """Going through Kelvin gives the same value as kT = T_keV * 1e-3."""
        energies = np.linspace(1e-4, 0.5, 400)
        xs = 1.0 / np.sqrt(energies)
        A, T_keV = 94.0, 25.0

        kT = T_keV * 1e-3
        a = A / (1.0 + A)
        g = xs * energies * np.exp(-a * energies / kT)
        integral = np.sum(0.5 * (g[1:] + g[:-1]) * np.diff(energies))
        direct = 2.0 * a ** 2 / (np.sqrt(np.pi) * kT ** 2) * integral * 1000.0

        assert calculate_macs(energies, xs, A, T_keV) == pytest.approx(direct, rel=1e-9)

    def test_constant_cross_section_limit(self):
        """For constant sigma, MACS -> 2/sqrt(pi) * sigma on a fine, wide grid."""
        sigma = 2.5
        energies = np.linspace(0.0, 2.0, 20001)  # MeV, >60 kT at 30 keV
        xs = np.full_like(energies, sigma)

        result_mb = calculate_macs(energies, xs, 94.0, 30.0)
        expected_mb = 2.0 / np.sqrt(np.pi) * sigma * 1000.0
        assert result_mb == pytest.approx(expected_mb, rel=1e-4)

    def test_idempotent(self):
        energies = [0.001, 0.002, 0.004, 0.01]
        xs = [10.0, 8.0, 5.0, 2.0]
        first = calculate_macs(energies, xs, 94.0, 30.0)
        second = calculate_macs(energies, xs, 94.0, 30.0)
        assert first == second

    def test_accepts_numpy_arrays(self):
        energies = np.array([0.001, 0.002])
        xs = np.array([10.0, 8.0])
        assert calculate_macs(energies, xs, 94.0, 30.0) == pytest.approx(
            calculate_macs([0.001, 0.002], [10.0, 8.0], 94.0, 30.0)
        )

    def test_returns_python_float(self):
        result = calculate_macs([0.001, 0.002], [10.0, 8.0], 94.0, 30.0)
        assert isinstance(result, float)


class TestTrapezoidArea:

    def test_linear_function_is_exact(self):
        area = trapezoid_area(lambda x, y: y, 1.0, 3.0, 2.0, 4.0)
        assert area == pytest.approx(6.0)

    def test_zero_width(self):
        assert trapezoid_area(lambda x, y: x * y, 2.0, 2.0, 5.0, 5.0) == 0.0


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

class TestMacsTable:

    def test_one_row_per_temperature_in_order(self):
        table = macs_table([0.001, 0.002, 0.003], [10.0, 8.0, 6.0], 94.0, [90.0, 8.0, 30.0])

        assert isinstance(table, pd.DataFrame)
        assert list(table.columns) == ['T_keV', 'MACS_mb']
        assert list(table['T_keV']) == [90.0, 8.0, 30.0]
        for row in table.itertuples(index=False):
            assert row.MACS_mb == calculate_macs(
                [0.001, 0.002, 0.003], [10.0, 8.0, 6.0], 94.0, row.T_keV
            )

    def test_invalid_temperature_propagates(self):
        with pytest.raises(ValidationError):
            macs_table([0.001, 0.002], [10.0, 8.0], 94.0, [30.0, 0.0])

    def test_dataset_energies_converted_to_mev(self):
        dataset = CrossSectionDataset(points=(
            CrossSectionPoint(1000.0, 10.0),
            CrossSectionPoint(2000.0, 8.0),
        ))
        table = compute_macs_for_dataset(dataset, 94.0, [30.0])

        expected = calculate_macs([0.001, 0.002], [10.0, 8.0], 94.0, 30.0)
        assert table['MACS_mb'].iloc[0] == pytest.approx(expected, rel=1e-12)
