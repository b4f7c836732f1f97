"""
Decoding of coded attribute values.

Attribute values arrive from the feature store as raw strings such as
``"1,3"`` or ``"5.5"``, as numbers, as integer lists, or as ``None``/``""``
meaning "present but unknown". The decoders here turn them into typed
values and keep "absent", "present but empty" and "list of codes" apart.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional, Tuple

from ..constants import MAX_LIST_LENGTH, MAX_CODE_VALUE
from ..logging_config import DiagnosticLog, get_diagnostics

logger = logging.getLogger("enc_symbology.chart.attributes")


class ListState(Enum):
    """Three-way state of a coded list attribute."""

    ABSENT = "absent"
    EMPTY = "empty"
    VALUES = "values"


@dataclass(frozen=True)
class CodedList:
    """An ordered list of small attribute codes.

    Attributes:
        state: Whether the attribute is absent, present but empty, or holds codes.
        codes: The decoded codes, in attribute order (empty unless ``state`` is VALUES).

    Example:
        >>> colours = decode_list("1,3")
        >>> colours.contains_any(3, 4)
        True
        >>> colours.first
        1
    """

    state: ListState
    codes: Tuple[int, ...] = ()

    @property
    def is_absent(self) -> bool:
        return self.state is ListState.ABSENT

    @property
    def is_present(self) -> bool:
        return self.state is not ListState.ABSENT

    @property
    def first(self) -> Optional[int]:
        return self.codes[0] if self.codes else None

    def contains_any(self, *codes: int) -> bool:
        return any(code in self.codes for code in codes)

    def __contains__(self, code: object) -> bool:
        return code in self.codes

    def __iter__(self) -> Iterator[int]:
        return iter(self.codes)

    def __len__(self) -> int:
        return len(self.codes)


ABSENT = CodedList(ListState.ABSENT)
EMPTY = CodedList(ListState.EMPTY)


def is_empty_value(raw: Any) -> bool:
    """Return True when a raw value marks a present but unknown attribute."""
    if raw is None:
        return True
    if isinstance(raw, str) and not raw.strip():
        return True
    if isinstance(raw, (list, tuple)) and len(raw) == 0:
        return True
    return False


def decode_list(
    raw: Any,
    attribute: str = "",
    diagnostics: Optional[DiagnosticLog] = None
) -> CodedList:
    """
    Decode a raw coded-list value.

    Tokens that are not integers in ``0..255`` are dropped with a
    diagnostic, and lists longer than fifteen codes are truncated.

    Args:
        raw: Raw attribute value (string, number, sequence or None)
        attribute: Attribute code, used in diagnostics
        diagnostics: Diagnostics log (process default when omitted)

    Returns:
        CodedList in the EMPTY or VALUES state
    """
    if is_empty_value(raw):
        return EMPTY

    diagnostics = diagnostics or get_diagnostics()

    if isinstance(raw, str):
        tokens = [token.strip() for token in raw.split(",")]
    elif isinstance(raw, (list, tuple)):
        tokens = list(raw)
    else:
        tokens = [raw]

    codes = []
    for token in tokens:
        code = _to_code(token)
        if code is None:
            diagnostics.report("attributes", f"malformed code in {attribute or 'list'}", repr(token))
            continue
        codes.append(code)

    if len(codes) > MAX_LIST_LENGTH:
        diagnostics.report("attributes", f"{attribute or 'list'} longer than {MAX_LIST_LENGTH} codes",
                           f"{len(codes)} codes, extra codes dropped")
        codes = codes[:MAX_LIST_LENGTH]

    if not codes:
        return EMPTY

    return CodedList(ListState.VALUES, tuple(codes))


def _to_code(token: Any) -> Optional[int]:
    if isinstance(token, bool):
        return None
    if isinstance(token, str):
        if not token:
            return None
        try:
            value = float(token)
        except ValueError:
            return None
    elif isinstance(token, (int, float)):
        value = float(token)
    else:
        return None

    if not math.isfinite(value) or value != int(value):
        return None
    code = int(value)
    if code < 0 or code > MAX_CODE_VALUE:
        return None
    return code


def decode_number(
    raw: Any,
    attribute: str = "",
    diagnostics: Optional[DiagnosticLog] = None
) -> Optional[float]:
    """
    Decode a raw numeric attribute value.

    Args:
        raw: Raw attribute value
        attribute: Attribute code, used in diagnostics
        diagnostics: Diagnostics log (process default when omitted)

    Returns:
        The value as float, or None when empty or not a number
    """
    if is_empty_value(raw) or isinstance(raw, bool):
        return None
    if isinstance(raw, (list, tuple)):
        raw = raw[0]
    try:
        value = float(raw)
    except (TypeError, ValueError):
        (diagnostics or get_diagnostics()).report(
            "attributes", f"non-numeric {attribute or 'value'}", repr(raw))
        return None
    if not math.isfinite(value):
        return None
    return value


def decode_text(raw: Any) -> Optional[str]:
    """Decode a raw attribute value as text; None when empty."""
    if is_empty_value(raw):
        return None
    if isinstance(raw, (list, tuple)):
        return ",".join(str(item) for item in raw)
    if isinstance(raw, float) and raw == int(raw):
        return str(int(raw))
    return str(raw)
