class EmojiFtlError(Exception):
    """Base class for errors that abort the whole run."""


class LocaleResolutionError(EmojiFtlError):
    """A locale could not be derived from an input path."""


class PairingOrderError(EmojiFtlError):
    """A locale group did not list its primary source before the derived one."""
