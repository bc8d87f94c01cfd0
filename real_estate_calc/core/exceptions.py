"""
Exceptions raised by the finance engine.

Calculations never raise on degenerate numbers; only file export can fail.
"""

from pathlib import Path
from typing import Optional, Union


class RealEstateCalcError(Exception):
    """Base class for errors surfaced to the user."""


class ExportError(RealEstateCalcError):
    """Raised when an amortization schedule cannot be written.

    Attributes:
        message -- explanation of the error
        path -- the target file, if one was chosen
    """
    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = path
        self.message = message
        super().__init__(self.message)
