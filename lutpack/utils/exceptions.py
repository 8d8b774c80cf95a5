"""Exceptions raised by the lutpack driver and command line."""


class CommandError(Exception):
    """Exception raised for errors in the command execution."""

    pass


class InvalidFileType(Exception):
    """Exception raised for unsupported netlist file types."""

    pass
