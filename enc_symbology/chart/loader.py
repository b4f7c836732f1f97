"""
Loader for chart cell fixture files.

A cell file is YAML or JSON holding a list of features with their class,
geometry kind, coordinates and raw attributes. It is a convenient stand-in
for a real feature store when symbolizing from the command line or in
tests; it does not decode S-57 data.

Example cell file::

    name: harbour
    features:
      - id: 1
        class: DEPARE
        kind: Area
        coordinates: [[0, 0], [10, 0], [10, 10], [0, 10]]
        attributes: {DRVAL1: 5, DRVAL2: 8}
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from ..exceptions import FeatureError
from .feature import Feature

logger = logging.getLogger("enc_symbology.chart.loader")


def feature_from_dict(data: Dict[str, Any]) -> Feature:
    """
    Build a Feature from its dictionary form.

    Args:
        data: Mapping with ``id``, ``class``, ``kind``, ``coordinates`` and
            optional ``attributes``

    Returns:
        Feature instance

    Raises:
        FeatureError: If a required key is missing or a value is malformed
    """
    missing = [key for key in ("id", "class", "kind", "coordinates") if key not in data]
    if missing:
        raise FeatureError(f"Feature definition missing {', '.join(missing)}: {data!r}")

    try:
        feature_id = int(data["id"])
    except (TypeError, ValueError):
        raise FeatureError(f"Feature id must be an integer, got {data['id']!r}")

    attributes = data.get("attributes") or {}
    if not isinstance(attributes, dict):
        raise FeatureError(f"Feature {feature_id}: attributes must be a mapping")

    try:
        return Feature(
            feature_id=feature_id,
            class_name=str(data["class"]),
            geometry_kind=str(data["kind"]).capitalize(),
            coordinates=data["coordinates"],
            attributes=dict(attributes),
        )
    except (TypeError, ValueError) as e:
        raise FeatureError(f"Feature {feature_id}: {e}") from e


def load_cell(path: Union[str, Path]) -> List[Feature]:
    """
    Load the features of a cell file.

    Args:
        path: Path to a .yaml, .yml or .json cell file

    Returns:
        Features in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file format is not supported
        FeatureError: If a feature definition is malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Cell file not found: {path}")

    with open(path, 'r') as f:
        if path.suffix in ['.yaml', '.yml']:
            data = yaml.safe_load(f)
        elif path.suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported file format: {path.suffix}. Use .yaml, .yml, or .json")

    if isinstance(data, dict):
        records = data.get("features") or []
    elif isinstance(data, list):
        records = data
    else:
        raise FeatureError(f"Cell file {path} holds no feature list")

    features = [feature_from_dict(record) for record in records]
    logger.debug(f"Loaded {len(features)} features from {path}")
    return features
