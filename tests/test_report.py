"""Tests for console report rendering."""

import pandas as pd

from nucmacs.exfor.models import CrossSectionDataset, CrossSectionPoint
from nucmacs.report import format_dataset_summary, format_macs_table


def test_macs_table_layout():
    table = pd.DataFrame({'T_keV': [8.0, 30.0], 'MACS_mb': [123.4567891, 45.0]})
    lines = format_macs_table(table).splitlines()

    assert lines[0] == "T(keV)    MACS(mb)"
    assert lines[1] == "-" * 20
    assert lines[2] == "   8.0      123.456789"
    assert lines[3] == "  30.0       45.000000"


def test_macs_table_title():
    table = pd.DataFrame({'T_keV': [30.0], 'MACS_mb': [1.0]})
    text = format_macs_table(table, title='MACS Calculation for JEFF-3.1 Mo-94(n,g)')
    assert text.startswith('=== MACS Calculation for JEFF-3.1 Mo-94(n,g) ===\n\nT(keV)')


def test_dataset_summary():
    dataset = CrossSectionDataset(points=(CrossSectionPoint(1000.0, 10.0), CrossSectionPoint(2000.0, 8.0)))
    text = format_dataset_summary(dataset)
    assert "Downloaded 2 data points" in text
    assert "E = 0.001 MeV" in text
    assert "σ = 10 barn" in text


def test_dataset_summary_without_points():
    assert format_dataset_summary(CrossSectionDataset(points=())) == "Downloaded 0 data points from API"
