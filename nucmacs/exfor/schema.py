"""
Declarative Field-Alias Tables
==============================

The EXFOR web service is not perfectly stable in the key spellings it uses
(``"LibName"`` vs ``"lib_name"``, ``"pts"`` vs ``"points"`` ...). Each record
type is described here by a table mapping a canonical attribute name to:

    keys      -- accepted JSON keys, tried in order (first present wins)
    convert   -- callable applied to the raw JSON value
    default   -- value used when no key is present, or REQUIRED

Adding a newly observed spelling is a one-line change to the relevant table.
"""

from typing import Any, Callable, Dict, Mapping, NamedTuple, Optional, Tuple


class _Required:
    def __repr__(self) -> str:
        return 'REQUIRED'


REQUIRED = _Required()


class FieldSpec(NamedTuple):
    keys: Tuple[str, ...]
    convert: Callable[[Any], Any]
    default: Any = REQUIRED


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


def _str_tuple(value: Any) -> Tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    return tuple(str(v) for v in value)


# ---------------------------------------------------------------------------
# Record tables
# ---------------------------------------------------------------------------

SECTION_FIELDS: Dict[str, FieldSpec] = {
    'target':      FieldSpec(('target', 'Targ'), str, ''),
    'z':           FieldSpec(('z', 'ZT'), int, 0),
    'a':           FieldSpec(('a', 'AT'), int, 0),
    'nsub':        FieldSpec(('nsub', 'NSUB'), int, 0),
    'mt':          FieldSpec(('mt', 'MT'), int, 0),
    'mf':          FieldSpec(('mf', 'MF'), int, 0),
    'r':           FieldSpec(('r', 'R'), str, ''),
    'rc':          FieldSpec(('rc', 'RC'), str, ''),
    'eval_id':     FieldSpec(('eval_id', 'EvalID'), int, 0),
    'sect_id':     FieldSpec(('sect_id', 'SectID'), int),
    'pen_sect_id': FieldSpec(('pen_sect_id', 'PenSectID'), int),
    'lib_id':      FieldSpec(('lib_id', 'LibID'), int, 0),
    'lib_name':    FieldSpec(('lib_name', 'LibName'), str),
    'date':        FieldSpec(('date', 'DATE'), str, ''),
    'auth':        FieldSpec(('auth', 'AUTH'), str, ''),
}

POINT_FIELDS: Dict[str, FieldSpec] = {
    'energy':        FieldSpec(('energy', 'E'), float),
    'cross_section': FieldSpec(('cross_section', 'Sig'), float),
    'uncertainty':   FieldSpec(('uncertainty', 'dSig'), _optional_float, None),
}

# 'points' is converted by the dataset parser itself (nested records)
DATASET_FIELDS: Dict[str, FieldSpec] = {
    'id':                    FieldSpec(('id',), str, ''),
    'file':                  FieldSpec(('file', 'FILE'), str, ''),
    'data_type':             FieldSpec(('data_type', 'dataType'), str, ''),
    'library':               FieldSpec(('library', 'LIBRARY'), str, ''),
    'target':                FieldSpec(('target', 'TARGET'), str, ''),
    'temp':                  FieldSpec(('temp', 'TEMP'), float, 0.0),
    'nsub':                  FieldSpec(('nsub', 'NSUB'), int, 0),
    'mat':                   FieldSpec(('mat', 'MAT'), int, 0),
    'mf':                    FieldSpec(('mf', 'MF'), int, 0),
    'mt':                    FieldSpec(('mt', 'MT'), int, 0),
    'reaction':              FieldSpec(('reaction', 'REACTION'), str, ''),
    'columns':               FieldSpec(('columns', 'COLUMNS'), _str_tuple, ()),
    'default_interpolation': FieldSpec(('default_interpolation', 'defaultInterpolation'), str, ''),
    'n_pts':                 FieldSpec(('n_pts', 'nPts'), int, 0),
    'points':                FieldSpec(('points', 'pts'), list),
}

LISTING_FIELDS: Dict[str, FieldSpec] = {
    'format':   FieldSpec(('format',), str, ''),
    'now':      FieldSpec(('now',), str, ''),
    'program':  FieldSpec(('program',), str, ''),
    'req':      FieldSpec(('req',), int, 0),
    'sections': FieldSpec(('sections',), list),
}

RESPONSE_FIELDS: Dict[str, FieldSpec] = {
    'format':   FieldSpec(('format',), str, ''),
    'now':      FieldSpec(('now',), str, ''),
    'program':  FieldSpec(('program',), str, ''),
    'datasets': FieldSpec(('datasets',), list),
}


def parse_fields(
    payload: Mapping[str, Any],
    fields: Mapping[str, FieldSpec],
    record: str,
) -> Dict[str, Any]:
    """
    Resolve every attribute of ``fields`` from a decoded JSON object.

    A JSON ``null`` is treated like an absent key.

    Args:
        payload: Decoded JSON object
        fields: Alias table for the record type
        record: Record name used in error messages

    Returns:
        Dict of canonical attribute name -> converted value

    Raises:
        ValueError: If the payload is not an object, a required attribute
            is missing, or a value cannot be converted
    """
    if not isinstance(payload, Mapping):
        raise ValueError(f"{record} must be a JSON object, got {type(payload).__name__}")

    values = {}
    for attr, spec in fields.items():
        raw = None
        for key in spec.keys:
            if payload.get(key) is not None:
                raw = payload[key]
                break

        if raw is None:
            if spec.default is REQUIRED:
                raise ValueError(
                    f"{record} is missing required field '{attr}' "
                    f"(accepted keys: {', '.join(spec.keys)})"
                )
            values[attr] = spec.default
            continue

        try:
            values[attr] = spec.convert(raw)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"{record} field '{attr}' has invalid value {raw!r}") from exc

    return values
