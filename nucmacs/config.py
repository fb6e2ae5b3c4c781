"""
Configuration
=============

Dataclass configuration for the archive client and for a MACS run.

A run can be described in a YAML file::

    target: Mo-94
    reaction: n,g
    library: JEFF-3.1
    atomic_mass: 94
    temperatures_keV: [8, 25, 30, 90]
    exfor:
      base_url: https://www-nds.iaea.org/exfor
      timeout: 60

and loaded with :func:`load_run_config`.
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from nucmacs import __version__

DEFAULT_BASE_URL = 'https://www-nds.iaea.org/exfor'
DEFAULT_TEMPERATURES_KEV = (8.0, 25.0, 30.0, 90.0)


@dataclass
class ExforConfig:
    """Settings for the EXFOR web-service client.

    Attributes:
        base_url: Root of the EXFOR web service (no trailing slash needed)
        quantity: Quantity code for listings ('SIG' = cross section)
        timeout: Socket timeout in seconds. None keeps the transport default.
        user_agent: User-Agent header sent with every request
    """

    base_url: str = DEFAULT_BASE_URL
    quantity: str = 'SIG'
    timeout: Optional[float] = None
    user_agent: str = f'nucmacs/{__version__}'


@dataclass
class MacsRunConfig:
    """One MACS computation: what to fetch and at which temperatures."""

    target: str
    reaction: str
    library: str
    atomic_mass: float
    temperatures_keV: Tuple[float, ...] = DEFAULT_TEMPERATURES_KEV
    exfor: ExforConfig = field(default_factory=ExforConfig)

    def __post_init__(self):
        self.atomic_mass = float(self.atomic_mass)
        self.temperatures_keV = tuple(float(t) for t in self.temperatures_keV)


def parse_temperatures(text: str) -> Tuple[float, ...]:
    """
    Parse a comma-separated temperature list (keV).

    Args:
        text: e.g. ``"8,25,30,90"``

    Returns:
        Tuple of floats in the given order

    Raises:
        ValueError: If an entry is not a number or the list is empty
    """
    items = [item.strip() for item in text.split(',') if item.strip()]
    if not items:
        raise ValueError("Temperature list is empty")
    try:
        return tuple(float(item) for item in items)
    except ValueError:
        raise ValueError(f"Invalid temperature list: {text!r}") from None


def _build(cls, data: Dict[str, Any], where: str):
    known = {f.name for f in fields(cls)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown keys in {where}: {sorted(unknown)}")
    return cls(**data)


def run_config_from_dict(data: Dict[str, Any]) -> MacsRunConfig:
    """Build a MacsRunConfig from a plain mapping (e.g. parsed YAML)."""
    data = dict(data)
    exfor = data.pop('exfor', None) or {}
    temperatures = data.get('temperatures_keV')
    if isinstance(temperatures, str):
        data['temperatures_keV'] = parse_temperatures(temperatures)
    config = _build(MacsRunConfig, data, 'run config')
    config.exfor = _build(ExforConfig, exfor, "'exfor' section")
    return config


def load_run_config(path: Union[str, Path]) -> MacsRunConfig:
    """
    Load a MACS run description from YAML.

    Args:
        path: YAML file path

    Returns:
        MacsRunConfig

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the YAML is not a mapping or has unknown keys
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a YAML mapping")
    try:
        return run_config_from_dict(data)
    except TypeError as exc:
        # missing required keys
        raise ValueError(f"Invalid config file {path}: {exc}") from exc


def dump_run_config(config: MacsRunConfig, path: Union[str, Path]) -> None:
    """Write a MacsRunConfig as YAML."""
    props = {
        'target': config.target,
        'reaction': config.reaction,
        'library': config.library,
        'atomic_mass': config.atomic_mass,
        'temperatures_keV': list(config.temperatures_keV),
        'exfor': {f.name: getattr(config.exfor, f.name) for f in fields(ExforConfig)},
    }
    with open(path, 'w') as f:
        yaml.dump(props, f, default_flow_style=False, sort_keys=False)


__all__ = [
    'DEFAULT_BASE_URL',
    'DEFAULT_TEMPERATURES_KEV',
    'ExforConfig',
    'MacsRunConfig',
    'parse_temperatures',
    'run_config_from_dict',
    'load_run_config',
    'dump_run_config',
]
