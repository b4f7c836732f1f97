"""
Custom exceptions for the enc_symbology package.

Only structural faults are raised to the caller. Missing attributes,
unresolved cross-references and unrecognised codes are reported through
the diagnostics log and never raise (see ``logging_config.DiagnosticLog``).
"""


class SymbologyError(Exception):
    """Base exception class for all enc_symbology errors."""
    pass


class DataIntegrityError(SymbologyError):
    """
    Raised when a feature violates a structural invariant.

    This is a fault of the upstream feature store, for example a sounding
    feature that reports several points or carries no depth coordinate.
    The procedure produces no instruction and the fault is surfaced.
    """
    pass


class IndexStateError(SymbologyError):
    """
    Raised when the cross-reference index is used out of order.

    Every feature of a cell must be classified before any is linked;
    classifying after linking has started is refused.
    """
    pass


class InstructionSyntaxError(SymbologyError):
    """
    Raised when a serialized instruction string cannot be parsed.
    """
    pass


class FeatureError(SymbologyError):
    """
    Raised when a feature definition is malformed.

    Used by the cell loader for unknown geometry kinds, empty coordinate
    sequences or missing identifiers.
    """
    pass


class InvalidParameterError(SymbologyError):
    """
    Raised for invalid user inputs.

    This exception is used for mariner parameter validation failures such
    as an unknown parameter name, non-finite depths or contours given out
    of order.
    """
    pass
