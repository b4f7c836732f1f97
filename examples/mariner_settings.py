"""
Mariner Settings Example

This example demonstrates how the same cell renders differently as the
mariner changes the safety contour, the number of water shades and the
datum offset. The cross-reference index is built once and the engine is
re-run with each set of settings.

Output: The depth area, contour and sounding instructions for each setting.
"""

import logging
from pathlib import Path

from enc_symbology import (
    MarinerParameters,
    SymbologyEngine,
    SymbologyError,
    build_index,
    get_diagnostics,
    load_cell,
    lookup_procedure,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# ============================================================================
# Load the cell and build the index once
# ============================================================================

cell_path = Path(__file__).with_name("harbour.yaml")
base = MarinerParameters.load_from_file(Path(__file__).with_name("mariner.yaml"))

settings = {
    "Harbour settings": base,
    "Deeper safety contour": base.with_overrides(safety_contour=30.0, safety_depth=30.0),
    "Two shades": base.with_overrides(two_shades=True),
    "Datum offset -2 m": base.with_overrides(datum_offset=-2.0),
}

shown_classes = ("DEPARE", "DRGARE", "DEPCNT", "SOUNDG")

try:
    features = load_cell(cell_path)
    index = build_index(features)
    engine = SymbologyEngine(index, base, get_diagnostics())

    # ========================================================================
    # Re-run the procedures for each setting
    # ========================================================================

    for title, params in settings.items():
        params.validate()
        engine.params = params

        print(f"{title}:")
        print(f"  safety contour {params.safety_contour} m, "
              f"two shades {params.two_shades}, datum offset {params.datum_offset} m")
        for feature in features:
            if feature.class_name not in shown_classes:
                continue
            instruction = engine.run(lookup_procedure(feature), feature)
            print(f"  {feature.feature_id:>4}  {feature.class_name:<7} {instruction.serialize()}")
        print()

except SymbologyError as e:
    print(f"Error symbolizing cell: {e}")
    print()
    print("Common issues:")
    print("  - Overrides leave shallow_contour deeper than safety_contour")
    print("  - The cell file holds duplicate feature identifiers")

except Exception as e:
    print(f"Error symbolizing cell: {e}")
