# errors.py - exceptions raised by the directory package


class DirectoryError(Exception):
    """Base class for advocate directory errors."""


class LoadError(DirectoryError):
    """The listing endpoint could not be read."""
