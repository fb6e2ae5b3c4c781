"""
EXFOR Web-Service Client
========================

Resolves a (target, reaction, library) triple to one pointwise
cross-section dataset using the IAEA EXFOR/ENDF web service.

Lookup is a two-step process:
    1. ``e4list``: list every section for (target, reaction, quantity)
    2. keep sections whose library name matches exactly, take the first
    3. ``e4sig``: fetch the point series of that section

Each request is issued once. Transport and decoding problems raise
:class:`~nucmacs.errors.TransportError`; a valid listing without the
requested library raises :class:`~nucmacs.errors.NoMatchError`; an empty
point-series envelope raises :class:`~nucmacs.errors.EmptyDatasetError`.

Library names must be spelled exactly as the archive lists them
(``"ENDF-B-VIII.1"``, not ``"ENDF/B-VIII.1"``). Use
:func:`available_libraries` on a listing to see what is on offer.

Example:
    >>> from nucmacs.exfor import ExforClient
    >>> client = ExforClient()
    >>> dataset = client.resolve_dataset('Mo-94', 'n,g', 'JEFF-3.1')
    >>> energies = dataset.energies_MeV()
    >>> xs = dataset.cross_sections()
"""

import json
import logging
from http.client import HTTPException
from typing import Any, Dict, Iterable, List, Optional
from urllib.error import HTTPError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from nucmacs.config import ExforConfig
from nucmacs.errors import EmptyDatasetError, NoMatchError, TransportError
from nucmacs.exfor.models import (
    CrossSectionDataset,
    CrossSectionResponse,
    Section,
    SectionListing,
)

logger = logging.getLogger(__name__)

LIST_ENDPOINT = 'e4list'
SIG_ENDPOINT = 'e4sig'


def select_by_library(sections: Iterable[Section], lib_name: str) -> List[Section]:
    """
    Keep the sections whose library name equals ``lib_name``.

    Exact, case-sensitive comparison; listing order is preserved.
    Returns an empty list when nothing matches.
    """
    return [section for section in sections if section.lib_name == lib_name]


def available_libraries(sections: Iterable[Section]) -> List[str]:
    """Distinct library names, in listing order."""
    seen = []
    for section in sections:
        if section.lib_name not in seen:
            seen.append(section.lib_name)
    return seen


class ExforClient:
    """
    HTTP client for the EXFOR ``e4list`` / ``e4sig`` endpoints.

    The client keeps no state between calls apart from its configuration,
    so one instance can serve any number of independent lookups.

    Attributes:
        config: ExforConfig with base URL, quantity code and timeout
    """

    def __init__(self, config: Optional[ExforConfig] = None):
        self.config = config if config is not None else ExforConfig()

    def _build_url(self, endpoint: str, params: Dict[str, Any]) -> str:
        # the service switches to JSON on a bare 'json' flag
        base = self.config.base_url.rstrip('/')
        return f"{base}/{endpoint}?{urlencode(params)}&json"

    def _get_json(self, endpoint: str, params: Dict[str, Any]) -> Any:
        """Issue one GET request and decode the JSON body."""
        url = self._build_url(endpoint, params)
        request = Request(url, headers={
            'Accept': 'application/json',
            'User-Agent': self.config.user_agent,
        })
        logger.debug(f"GET {url}")

        kwargs = {}
        if self.config.timeout is not None:
            kwargs['timeout'] = self.config.timeout

        try:
            with urlopen(request, **kwargs) as response:
                status = response.status
                body = response.read()
        except HTTPError as e:
            raise TransportError(f"HTTP {e.code} {e.reason}", endpoint, url) from e
        except (OSError, HTTPException) as e:
            # URLError, timeouts, resets, truncated bodies and bad status lines
            raise TransportError(f"Request failed: {e!r}", endpoint, url) from e

        # non-HTTP handlers (file://, data:) report no status
        if status is not None and not 200 <= status < 300:
            raise TransportError(f"Unexpected HTTP status {status}", endpoint, url)

        try:
            return json.loads(body.decode('utf-8'))
        except ValueError as e:
            raise TransportError(f"Malformed JSON body: {e}", endpoint, url) from e

    def fetch_listing(
        self,
        target: str,
        reaction: str,
        quantity: Optional[str] = None,
    ) -> SectionListing:
        """
        Query ``e4list`` and return the whole listing envelope.

        Args:
            target: Target nuclide (e.g., 'Mo-94')
            reaction: Reaction (e.g., 'n,g')
            quantity: Quantity code. Defaults to ``config.quantity`` ('SIG').

        Raises:
            TransportError: On network, HTTP or decoding failure
        """
        params = {
            'Target': target,
            'Reaction': reaction,
            'Quantity': quantity if quantity is not None else self.config.quantity,
        }
        payload = self._get_json(LIST_ENDPOINT, params)
        try:
            listing = SectionListing.from_json(payload)
        except ValueError as e:
            raise TransportError(
                f"Malformed listing: {e}", LIST_ENDPOINT, self._build_url(LIST_ENDPOINT, params)
            ) from e

        logger.info(f"{target}({reaction}): {len(listing.sections)} sections listed")
        return listing

    def list_sections(
        self,
        target: str,
        reaction: str,
        quantity: Optional[str] = None,
    ) -> List[Section]:
        """List the candidate sections for (target, reaction, quantity)."""
        return list(self.fetch_listing(target, reaction, quantity).sections)

    def fetch_datasets(self, section: Section) -> CrossSectionResponse:
        """
        Query ``e4sig`` for the point series of one section.

        Raises:
            TransportError: On network, HTTP or decoding failure
        """
        params = {'SectID': section.sect_id, 'PenSectID': section.pen_sect_id}
        payload = self._get_json(SIG_ENDPOINT, params)
        try:
            return CrossSectionResponse.from_json(payload)
        except ValueError as e:
            raise TransportError(
                f"Malformed cross-section response: {e}",
                SIG_ENDPOINT, self._build_url(SIG_ENDPOINT, params),
            ) from e

    def resolve_dataset(self, target: str, reaction: str, lib_name: str) -> CrossSectionDataset:
        """
        Resolve (target, reaction, library) to one cross-section dataset.

        The first section matching ``lib_name`` in archive order is used; no
        ranking by date or evaluation is applied.

        Args:
            target: Target nuclide (e.g., 'Mo-94', 'Zr-92')
            reaction: Reaction (e.g., 'n,g', 'n,p')
            lib_name: Library name exactly as listed (e.g., 'JEFF-3.1',
                'ENDF-B-VIII.1', 'JENDL-5')

        Returns:
            First dataset of the resolved section

        Raises:
            TransportError: Either request failed
            NoMatchError: No section of that library
            EmptyDatasetError: The section returned zero datasets
        """
        sections = self.list_sections(target, reaction)
        matches = select_by_library(sections, lib_name)

        if not matches:
            raise NoMatchError(target, reaction, lib_name, available_libraries(sections))

        if len(matches) > 1:
            logger.warning(
                f"{len(matches)} sections match library {lib_name!r}; "
                f"using the first (SectID={matches[0].sect_id})"
            )

        section = matches[0]
        response = self.fetch_datasets(section)
        if not response.datasets:
            raise EmptyDatasetError(section.sect_id, section.pen_sect_id)

        dataset = response.datasets[0]
        logger.info(
            f"Resolved {target}({reaction}) {lib_name}: "
            f"SectID={section.sect_id}, {len(dataset.points)} points"
        )
        return dataset

    def __repr__(self) -> str:
        return f"ExforClient(base_url={self.config.base_url!r})"


# ---------------------------------------------------------------------------
# Module-level convenience wrappers (default configuration)
# ---------------------------------------------------------------------------

def list_sections(target: str, reaction: str, quantity: str = 'SIG') -> List[Section]:
    """List candidate sections using a default-configured client."""
    return ExforClient().list_sections(target, reaction, quantity)


def resolve_dataset(target: str, reaction: str, lib_name: str) -> CrossSectionDataset:
    """Resolve a dataset using a default-configured client."""
    return ExforClient().resolve_dataset(target, reaction, lib_name)
