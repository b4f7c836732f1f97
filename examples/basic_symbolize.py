"""
Basic Symbolization Example

This example demonstrates the simplest workflow: load a cell fixture,
load the mariner settings, and compute the render instruction of every
feature in the cell.

Output: One line per feature with its procedure and render instruction.
"""

import logging
from pathlib import Path

from enc_symbology import (
    MarinerParameters,
    SymbologyError,
    load_cell,
    lookup_procedure,
    symbolize_cell,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# ============================================================================
# Basic Symbolization
# ============================================================================

cell_path = Path(__file__).with_name("harbour.yaml")
config_path = Path(__file__).with_name("mariner.yaml")

print("Symbolizing chart cell:")
print(f"  Cell: {cell_path.name}")
print(f"  Settings: {config_path.name}")
print()

try:
    params = MarinerParameters.load_from_file(config_path)
    params.validate()
    print(f"  Safety contour: {params.safety_contour} m")
    print(f"  Safety depth: {params.safety_depth} m")
    print()

    features = load_cell(cell_path)
    by_id = {feature.feature_id: feature for feature in features}
    instructions = symbolize_cell(features, params=params)

    for feature_id, instruction in instructions.items():
        feature = by_id[feature_id]
        procedure = lookup_procedure(feature)
        print(f"{feature_id:>4}  {feature.class_name:<7} {procedure:<9} {instruction.serialize()}")

    print()
    always_visible = [
        feature_id for feature_id, feature in by_id.items()
        if feature.scale_minimum.name == "ALWAYS_VISIBLE"
    ]
    print(f"Always visible regardless of scale: {always_visible}")

except SymbologyError as e:
    print(f"Error symbolizing cell: {e}")
    print()
    print("Common issues:")
    print("  - Two features in the cell share an identifier")
    print("  - A sounding has no depth coordinate")
    print("  - Mariner settings are inconsistent (shallow > safety > deep)")

except Exception as e:
    print(f"Error symbolizing cell: {e}")
