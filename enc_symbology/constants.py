"""
Constants for the enc_symbology package.

This module defines the feature class groups used by the cross-reference
index, the coded attribute tables consulted by the symbology procedures,
and the default class-to-procedure lookup used by the API and CLI.
"""

from typing import Dict, FrozenSet, Tuple

# ============================================================================
# Feature class groups
# ============================================================================

# Features that can carry a topmark: floating platforms and buoys
LIGHT_PLATFORM_CLASSES: FrozenSet[str] = frozenset({"LITFLT", "LITVES"})
BUOY_CLASS_PREFIX = "BOY"

LIGHT_CLASS = "LIGHTS"
TOPMARK_CLASS = "TOPMAR"
LATERAL_BUOY_CLASS = "BOYLAT"

DEPTH_AREA_CLASS = "DEPARE"
DREDGED_AREA_CLASS = "DRGARE"
DEPTH_CONTOUR_CLASS = "DEPCNT"
UNSURVEYED_AREA_CLASS = "UNSARE"
COASTLINE_CLASS = "COALNE"

# Isolated dangers that search for a depth reference
HAZARD_CLASSES: FrozenSet[str] = frozenset({"OBSTRN", "UWTROC", "WRECKS"})

# ============================================================================
# Depth defaults and limits (metres)
# ============================================================================

# Above this depth an isolated danger is not considered dangerous
DANGER_DEPTH_LIMIT = 20.0

# Default depth of a danger by water level when VALSOU is missing
WATLEV_DEFAULT_DEPTH = -15.0
AWASH_DEPTH = 0.0
COVERS_UNCOVERS_DEPTH = 0.01
FOUL_GROUND_DEPTH = 0.01
NON_DANGEROUS_WRECK_DEPTH = 20.0

# Bias applied to soundings before truncation to digits
SOUNDING_BIAS = 0.01

# Attribute lists are limited to this many codes
MAX_LIST_LENGTH = 15
MAX_CODE_VALUE = 255

# ============================================================================
# Coded attribute values
# ============================================================================

# QUAPOS values meaning a position of low accuracy
LOW_ACCURACY_QUAPOS: Tuple[int, ...] = (2, 3, 4, 5, 6, 7, 8, 9)

# QUASOU values meaning a sounding of doubtful quality
LOW_ACCURACY_QUASOU: Tuple[int, ...] = (3, 4, 5, 8, 9)
STATUS_EXISTENCE_DOUBTFUL = 18
TECSOU_SWEPT = 6

# WATLEV
WATLEV_PARTLY_SUBMERGED = 1
WATLEV_DRY = 2
WATLEV_SUBMERGED = 3
WATLEV_COVERS_UNCOVERS = 4
WATLEV_AWASH = 5

CATOBS_FOUL_GROUND = 6

# ============================================================================
# Restriction codes
# ============================================================================

RESTRN_ENTRY: Tuple[int, ...] = (7, 8, 14)
RESTRN_ANCHORING: Tuple[int, ...] = (1, 2)
RESTRN_FISHING: Tuple[int, ...] = (3, 4, 5, 6)
# Restrictions that raise an entry or anchoring restriction to the stricter symbol
RESTRN_PROHIBITIVE: Tuple[int, ...] = (1, 2, 3, 4, 5, 6)
# Restrictions that add an information marker
RESTRN_INFORMATION: Tuple[int, ...] = (9, 10, 11, 12, 13)

CATREA_STRICT: Tuple[int, ...] = (1, 8, 9, 12, 14, 19, 21, 25)
CATREA_INFORMATION: Tuple[int, ...] = (4, 5, 6, 7, 10, 18, 20, 22, 23, 24)

# ============================================================================
# Light codes and abbreviations
# ============================================================================

CATLIT_DIRECTIONAL = 1
CATLIT_MOIRE = 16
CATLIT_FLOOD = (8, 11)
CATLIT_STRIP = 9
CATLIT_EMERGENCY = 17

COLOUR_WHITE = 1
COLOUR_RED = 3
COLOUR_GREEN = 4
COLOUR_MAGENTA = 12
# Colours that make a light on a shared position flare at 45 degrees
FLARE_COLOURS: Tuple[int, ...] = (1, 5, 11)
YELLOWISH_COLOURS: Tuple[int, ...] = (1, 6, 11)

# LITVIS values for faint or obscured sectors
LITVIS_FAINT: Tuple[int, ...] = (3, 7, 8)

# Light description placeholder for unrecognised codes
UNKNOWN_CODE_TEMPLATE = "<{attribute}?{code}>"

CATLIT_ABBREVIATIONS: Dict[int, str] = {
    1: "Dir ",
    5: "Aero ",
    6: "Aero ",
}
# CATLIT codes that add nothing to the description
CATLIT_SILENT: FrozenSet[int] = frozenset({0, 3, 4, 12, 13})

LITCHR_ABBREVIATIONS: Dict[int, str] = {
    1: "F",
    2: "Fl",
    3: "LFl",
    4: "Q",
    5: "VQ",
    6: "UQ",
    7: "Iso",
    8: "Oc",
    9: "IQ",
    10: "IVQ",
    11: "IUQ",
    12: "Mo",
    13: "FFl",
    14: "Fl+LFl",
    15: "AlOc Fl",
    16: "FLFl",
    17: "AlOc",
    18: "AlLFl",
    19: "AlFl",
    20: "Al",
    25: "Q+LFl",
    26: "VQ+LFl",
    27: "UQ+LFl",
    28: "Al",
    29: "AlF Fl",
}

COLOUR_ABBREVIATIONS: Dict[int, str] = {
    1: "W",
    3: "R",
    4: "G",
    5: "Bu",
    6: "Y",
    9: "Am",
    10: "Vi",
    11: "Or",
}

STATUS_ABBREVIATIONS: Dict[int, str] = {
    2: "occas",
    7: "temp",
    8: "priv",
    11: "exting",
}

# ============================================================================
# Topmark symbols by TOPSHP
# ============================================================================

TOPMARK_FLOATING: Dict[int, str] = {
    1: "TOPMAR02", 2: "TOPMAR04", 3: "TOPMAR10", 4: "TOPMAR12",
    5: "TOPMAR13", 6: "TOPMAR14", 7: "TOPMAR65", 8: "TOPMAR17",
    9: "TOPMAR16", 10: "TOPMAR08", 11: "TOPMAR07", 12: "TOPMAR14",
    13: "TOPMAR05", 14: "TOPMAR06", 17: "TMARDEF2", 18: "TOPMAR10",
    19: "TOPMAR13", 20: "TOPMAR14", 21: "TOPMAR13", 22: "TOPMAR14",
    23: "TOPMAR14", 24: "TOPMAR02", 25: "TOPMAR04", 26: "TOPMAR10",
    27: "TOPMAR17", 28: "TOPMAR18", 29: "TOPMAR02", 30: "TOPMAR17",
    31: "TOPMAR14", 32: "TOPMAR10", 33: "TMARDEF2",
}
TOPMARK_FLOATING_DEFAULT = "TMARDEF2"

TOPMARK_RIGID: Dict[int, str] = {
    1: "TOPMAR22", 2: "TOPMAR24", 3: "TOPMAR30", 4: "TOPMAR32",
    5: "TOPMAR33", 6: "TOPMAR34", 7: "TOPMAR85", 8: "TOPMAR86",
    9: "TOPMAR36", 10: "TOPMAR28", 11: "TOPMAR27", 12: "TOPMAR14",
    13: "TOPMAR25", 14: "TOPMAR26", 15: "TOPMAR88", 16: "TOPMAR87",
    17: "TMARDEF1", 18: "TOPMAR30", 19: "TOPMAR33", 20: "TOPMAR34",
    21: "TOPMAR33", 22: "TOPMAR34", 23: "TOPMAR34", 24: "TOPMAR22",
    25: "TOPMAR24", 26: "TOPMAR30", 27: "TOPMAR86", 28: "TOPMAR89",
    29: "TOPMAR22", 30: "TOPMAR86", 31: "TOPMAR14", 32: "TOPMAR30",
    33: "TMARDEF1",
}
TOPMARK_RIGID_DEFAULT = "TMARDEF1"

# ============================================================================
# Default procedure lookup
# ============================================================================

# (class name, geometry kind) -> procedure; "*" matches any geometry kind
DEFAULT_LOOKUP: Dict[Tuple[str, str], str] = {
    ("DEPARE", "Area"): "DEPARE01",
    ("DRGARE", "Area"): "DEPARE01",
    ("DEPARE", "Line"): "DEPCNT02",
    ("DEPCNT", "Line"): "DEPCNT02",
    ("LIGHTS", "*"): "LIGHTS05",
    ("OBSTRN", "*"): "OBSTRN04",
    ("UWTROC", "*"): "OBSTRN04",
    ("WRECKS", "*"): "WRECKS02",
    ("RESARE", "*"): "RESARE02",
    ("SOUNDG", "*"): "SOUNDG02",
    ("TOPMAR", "*"): "TOPMAR01",
    ("LNDARE", "*"): "QUAPOS01",
    ("COALNE", "*"): "QUAPOS01",
    ("SLCONS", "*"): "SLCONS03",
    ("M_COVR", "*"): "DATCVR01",
    ("M_CSCL", "*"): "DATCVR01",
    ("clrlin", "*"): "CLRLIN01",
    ("leglin", "*"): "LEGLIN02",
    ("ownshp", "*"): "OWNSHP02",
    ("pastrk", "*"): "PASTRK01",
    ("vessel", "*"): "VESSEL01",
    ("vrmebl", "*"): "VRMEBL01",
}

RESTRICTED_ACTIVITY_CLASSES: Tuple[str, ...] = (
    "ACHARE", "CBLARE", "DMPGRD", "DWRTPT", "FAIRWY", "ICNARE", "ISTZNE",
    "MARCUL", "MIPARE", "OSPARE", "PIPARE", "PRCARE", "SPLARE", "SUBTLN",
    "TESARE", "TSSCRS", "TSSLPT", "TSSRON",
)
for _name in RESTRICTED_ACTIVITY_CLASSES:
    DEFAULT_LOOKUP[(_name, "*")] = "RESTRN01"
del _name
