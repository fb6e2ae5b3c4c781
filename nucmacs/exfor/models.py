"""
EXFOR Response Records
======================

Immutable records parsed from the EXFOR web-service JSON bodies.

Records:
    Section: One candidate entry of an ``e4list`` listing
    SectionListing: The ``e4list`` envelope
    CrossSectionPoint: One (energy, cross section) sample
    CrossSectionDataset: Resolved point series of one section
    CrossSectionResponse: The ``e4sig`` envelope

Energies are kept in eV exactly as delivered by the archive. Use
:meth:`CrossSectionDataset.energies_MeV` to get the MeV grid expected by
:func:`nucmacs.physics.calculate_macs`.

Example:
    >>> listing = SectionListing.from_json(json.loads(body))
    >>> [s.lib_name for s in listing.sections]
    ['JEFF-3.1', 'ENDF-B-VIII.1', 'JENDL-5']
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

import numpy as np
import pandas as pd

from nucmacs.exfor.schema import (
    DATASET_FIELDS,
    LISTING_FIELDS,
    POINT_FIELDS,
    RESPONSE_FIELDS,
    SECTION_FIELDS,
    parse_fields,
)

# Archive energies are in eV; the MACS engine works in MeV
EV_TO_MEV = 1e-6


def ev_to_mev(energy_eV):
    """Convert eV (scalar or array) to MeV."""
    return np.asarray(energy_eV, dtype=float) * EV_TO_MEV


@dataclass(frozen=True)
class Section:
    """
    Candidate measurement/evaluation entry from an ``e4list`` query.

    Attributes:
        target: Target nuclide (e.g., 'Mo-94')
        z: Proton number
        a: Mass number
        nsub: Sub-library code (10 = incident neutron)
        mt: ENDF reaction type
        mf: ENDF file number
        r: Reaction code
        rc: Reference code
        eval_id: Evaluation identifier
        sect_id: Section identifier
        pen_sect_id: Parent section identifier (needed for ``e4sig``)
        lib_id: Library identifier
        lib_name: Library name (e.g., 'JEFF-3.1')
        date: Submission date
        auth: Authors
    """

    sect_id: int
    pen_sect_id: int
    lib_name: str
    target: str = ''
    z: int = 0
    a: int = 0
    nsub: int = 0
    mt: int = 0
    mf: int = 0
    r: str = ''
    rc: str = ''
    eval_id: int = 0
    lib_id: int = 0
    date: str = ''
    auth: str = ''

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> 'Section':
        return cls(**parse_fields(payload, SECTION_FIELDS, 'Section'))


@dataclass(frozen=True)
class SectionListing:
    """Envelope of an ``e4list`` response."""

    sections: Tuple[Section, ...]
    format: str = ''
    now: str = ''
    program: str = ''
    req: int = 0

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> 'SectionListing':
        values = parse_fields(payload, LISTING_FIELDS, 'E4 listing')
        values['sections'] = tuple(Section.from_json(s) for s in values['sections'])
        return cls(**values)


@dataclass(frozen=True)
class CrossSectionPoint:
    """One sample: energy in eV, cross section and uncertainty in barns."""

    energy: float
    cross_section: float
    uncertainty: Optional[float] = None

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> 'CrossSectionPoint':
        return cls(**parse_fields(payload, POINT_FIELDS, 'CrossSectionPoint'))


@dataclass(frozen=True)
class CrossSectionDataset:
    """
    Pointwise cross section of one evaluated-library section.

    Points keep the archive order (energy-ascending). ``default_interpolation``
    is informational only; MACS integration is always trapezoidal.

    Attributes:
        id: Dataset identifier
        file: Originating file
        data_type: Data type string
        library: Library name
        target: Target nuclide
        temp: Temperature (K)
        nsub: Sub-library code
        mat: ENDF material number
        mf: ENDF file number
        mt: ENDF reaction type
        reaction: Reaction string
        columns: Column names as declared by the archive
        default_interpolation: Declared interpolation scheme
        n_pts: Declared point count
        points: Ordered samples
    """

    points: Tuple[CrossSectionPoint, ...]
    id: str = ''
    file: str = ''
    data_type: str = ''
    library: str = ''
    target: str = ''
    temp: float = 0.0
    nsub: int = 0
    mat: int = 0
    mf: int = 0
    mt: int = 0
    reaction: str = ''
    columns: Tuple[str, ...] = field(default_factory=tuple)
    default_interpolation: str = ''
    n_pts: int = 0

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> 'CrossSectionDataset':
        values = parse_fields(payload, DATASET_FIELDS, 'CrossSectionDataset')
        values['points'] = tuple(CrossSectionPoint.from_json(p) for p in values['points'])
        return cls(**values)

    def __len__(self) -> int:
        return len(self.points)

    def energies_eV(self) -> np.ndarray:
        """Energy grid as delivered (eV)."""
        return np.array([p.energy for p in self.points], dtype=float)

    def energies_MeV(self) -> np.ndarray:
        """Energy grid in MeV."""
        return ev_to_mev(self.energies_eV())

    def cross_sections(self) -> np.ndarray:
        """Cross sections in barns."""
        return np.array([p.cross_section for p in self.points], dtype=float)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Point series as a DataFrame.

        Returns:
            DataFrame with columns: Energy_eV, Energy_MeV, CrossSection,
            Uncertainty (NaN where the archive gave none)
        """
        uncertainties = [
            np.nan if p.uncertainty is None else p.uncertainty for p in self.points
        ]
        return pd.DataFrame({
            'Energy_eV': self.energies_eV(),
            'Energy_MeV': self.energies_MeV(),
            'CrossSection': self.cross_sections(),
            'Uncertainty': np.asarray(uncertainties, dtype=float),
        })

    def __repr__(self) -> str:
        return (
            f"CrossSectionDataset({self.target} {self.reaction}, library={self.library!r}, "
            f"MAT={self.mat}, MF={self.mf}, MT={self.mt}, points={len(self.points)})"
        )


@dataclass(frozen=True)
class CrossSectionResponse:
    """Envelope of an ``e4sig`` response."""

    datasets: Tuple[CrossSectionDataset, ...]
    format: str = ''
    now: str = ''
    program: str = ''

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> 'CrossSectionResponse':
        values = parse_fields(payload, RESPONSE_FIELDS, 'E4 cross-section response')
        values['datasets'] = tuple(CrossSectionDataset.from_json(d) for d in values['datasets'])
        return cls(**values)
