"""
nucmacs: Maxwellian-Averaged Cross Sections from EXFOR
======================================================

Fetch evaluated neutron cross sections from the IAEA EXFOR/ENDF web service
and compute Maxwellian-averaged cross sections (MACS) for nuclear
astrophysics.

Pipeline:
    1. exfor: list sections, filter by library, fetch the point series
    2. physics: trapezoidal Maxwellian average at each kT

Modules:
    exfor: Web-service client and response records
    physics: MACS integration
    config: Dataclass/YAML configuration
    errors: Error taxonomy
    report: Console tables
    visualization: sigma(E) and MACS(kT) figure

Example:
    >>> from nucmacs import ExforClient, compute_macs_for_dataset
    >>> dataset = ExforClient().resolve_dataset('Mo-94', 'n,g', 'JEFF-3.1')
    >>> table = compute_macs_for_dataset(dataset, atomic_mass=94, temperatures_keV=[30])

License: MIT
"""

__version__ = "0.1.0"

from nucmacs.errors import (
    EmptyDatasetError,
    FetchError,
    MacsError,
    NoMatchError,
    TransportError,
    ValidationError,
)
from nucmacs.exfor import (
    CrossSectionDataset,
    CrossSectionPoint,
    CrossSectionResponse,
    ExforClient,
    Section,
    list_sections,
    resolve_dataset,
    select_by_library,
)
from nucmacs.physics import calculate_macs, compute_macs_for_dataset, macs_table

__all__ = [
    "MacsError",
    "TransportError",
    "FetchError",
    "NoMatchError",
    "EmptyDatasetError",
    "ValidationError",
    "Section",
    "CrossSectionPoint",
    "CrossSectionDataset",
    "CrossSectionResponse",
    "ExforClient",
    "list_sections",
    "select_by_library",
    "resolve_dataset",
    "calculate_macs",
    "macs_table",
    "compute_macs_for_dataset",
]
