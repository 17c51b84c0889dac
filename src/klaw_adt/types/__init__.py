"""Core types: Option, Result, Either and their variants."""

from klaw_adt.types.either import Either, Left, Right, is_left, is_right
from klaw_adt.types.option import Nothing, NothingType, Option, Some, is_none, is_some
from klaw_adt.types.result import Err, Ok, Result, is_err, is_ok

__all__ = [
    'Either',
    'Err',
    'Left',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Right',
    'Some',
    'is_err',
    'is_left',
    'is_none',
    'is_ok',
    'is_right',
    'is_some',
]
