"""Shared fixtures: canned EXFOR web-service bodies and a fake urlopen response."""

import json
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))


def make_section(sect_id, pen_sect_id, lib_name, **extra):
    """Section record using the archive's own key spellings."""
    record = {
        'Targ': 'Mo-94', 'ZT': 42, 'AT': 94, 'NSUB': 10, 'MT': 102, 'MF': 3,
        'R': 'N,G', 'RC': 'SIG', 'EvalID': 100 + sect_id,
        'SectID': sect_id, 'PenSectID': pen_sect_id,
        'LibID': 7, 'LibName': lib_name, 'DATE': '2005-01', 'AUTH': 'A.Evaluator',
    }
    record.update(extra)
    return record


def make_dataset(points, **extra):
    record = {
        'id': 'E4R40001', 'FILE': 'JEFF-3.1', 'dataType': 'SIG',
        'LIBRARY': 'JEFF-3.1', 'TARGET': 'Mo-94', 'TEMP': 0.0, 'NSUB': 10,
        'MAT': 4234, 'MF': 3, 'MT': 102, 'REACTION': 'N,G',
        'COLUMNS': ['E', 'Sig'], 'defaultInterpolation': 'Lin-Lin',
        'nPts': len(points),
        'pts': [{'E': e, 'Sig': s} for e, s in points],
    }
    record.update(extra)
    return record


def fake_response(payload, status=200):
    """Context-manager mock standing in for the object urlopen returns."""
    response = MagicMock()
    response.status = status
    if isinstance(payload, bytes):
        response.read.return_value = payload
    else:
        response.read.return_value = json.dumps(payload).encode('utf-8')
    response.__enter__.return_value = response
    return response


@pytest.fixture
def listing_payload():
    return {
        'format': 'json', 'now': '2025-06-01 12:00', 'program': 'e4list', 'req': 1,
        'sections': [
            make_section(11, 1, 'ENDF-B-VIII.1'),
            make_section(22, 2, 'JEFF-3.1'),
            make_section(33, 3, 'JENDL-5'),
        ],
    }


@pytest.fixture
def sig_payload():
    return {
        'format': 'json', 'now': '2025-06-01 12:00', 'program': 'e4sig',
        'datasets': [make_dataset([(1000.0, 10.0), (2000.0, 8.0), (3000.0, 6.0)])],
    }
