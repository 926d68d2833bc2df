"""Kernel container types — public re-export surface.

Modules:
  option.py — Optional, Present, Empty
  result.py — Ok, Err, Result
"""

from nullsafe.kernel.types.option import Empty, Optional, Present, empty, of, of_nullable
from nullsafe.kernel.types.result import Err, Ok, Result

__all__ = [
    "Empty",
    "Err",
    "Ok",
    "Optional",
    "Present",
    "Result",
    "empty",
    "of",
    "of_nullable",
]
