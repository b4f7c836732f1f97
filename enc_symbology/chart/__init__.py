"""
Chart feature model for enc_symbology.

This module provides the in-memory representation of charted objects read
by the cross-reference index and the symbology procedures:
- Feature with geometry kind, coordinates and raw coded attributes
- Set-once touch references to related features, stored by identifier
- Decoders that keep "absent", "present but empty" and coded lists apart
- A loader for YAML/JSON cell fixture files

Main Classes:
    Feature: A charted object instance
    CodedList: Decoded coded-list attribute with its three-way state

Example:
    >>> from enc_symbology.chart import Feature
    >>>
    >>> light = Feature(7, "LIGHTS", "Point", [[10.0, 20.0]],
    ...                 attributes={"COLOUR": "1,3", "SECTR1": 90, "SECTR2": 180})
    >>> light.attribute_list("COLOUR").codes
    (1, 3)
"""

from .attributes import CodedList, ListState, decode_list, decode_number, decode_text
from .feature import Extent, Feature, GeometryKind, ScaleMinimum, TouchCategory
from .loader import feature_from_dict, load_cell

__all__ = [
    "CodedList",
    "ListState",
    "decode_list",
    "decode_number",
    "decode_text",
    "Extent",
    "Feature",
    "GeometryKind",
    "ScaleMinimum",
    "TouchCategory",
    "feature_from_dict",
    "load_cell",
]
