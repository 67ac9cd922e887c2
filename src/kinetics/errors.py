"""
Exception types raised by the kinetics package.
Numeric domain problems (negative square-root operands etc.) are never raised;
they surface as NaN/Infinity in the derived records.
"""


class KineticsError(Exception):
    """Base class for all package errors"""


class ConfigurationError(KineticsError, ValueError):
    """Invalid parameter value, or a lookup of an unknown parameter name"""


class SessionStateError(KineticsError, RuntimeError):
    """Operation not allowed in the current session state (e.g. ingest while idle)"""
