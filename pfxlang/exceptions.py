"""Errors.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class PfxException(Exception):
    """
    Base class for errors raised by the PFX runtime.
    """


class UndefinedIdentifierException(PfxException):
    """
    Error for identifiers that were never bound with ``let``.
    """
    def __init__(self, name, line=None, file=None):
        self.name = name
        self.line = line
        self.file = file
        message = f"Identifier '{name}' does not exist"
        if line is not None:
            message += f" on line {line}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class ScriptNotFoundException(PfxException):
    """
    Error for script files that cannot be read.
    """
    def __init__(self, path):
        self.path = path
        super().__init__(f'Could not find file "{path}"')
