"""
EXFOR Archive Access
====================

Client and response records for the IAEA EXFOR/ENDF web service.

Main Classes:
    ExforClient: Two-step e4list/e4sig lookup
    Section, SectionListing: Listing records
    CrossSectionPoint, CrossSectionDataset, CrossSectionResponse: Point data
"""

from nucmacs.exfor.models import (
    EV_TO_MEV,
    CrossSectionDataset,
    CrossSectionPoint,
    CrossSectionResponse,
    Section,
    SectionListing,
    ev_to_mev,
)
from nucmacs.exfor.client import (
    ExforClient,
    available_libraries,
    list_sections,
    resolve_dataset,
    select_by_library,
)

__all__ = [
    'EV_TO_MEV',
    'ev_to_mev',
    'Section',
    'SectionListing',
    'CrossSectionPoint',
    'CrossSectionDataset',
    'CrossSectionResponse',
    'ExforClient',
    'available_libraries',
    'list_sections',
    'resolve_dataset',
    'select_by_library',
]
