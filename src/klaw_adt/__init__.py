"""klaw-adt: Option, Result and Either algebraic data types for Python 3.13+.

Flat imports (preferred):
    from klaw_adt import Option, Some, Nothing
    from klaw_adt import Result, Ok, Err
    from klaw_adt import Either, Left, Right
    from klaw_adt import UnwrapError

Submodule imports (for organization):
    from klaw_adt.types.option import Option, Some, Nothing
    from klaw_adt.types.result import Result, Ok, Err
    from klaw_adt.types.either import Either, Left, Right
"""

# Configuration
from klaw_adt._config import Config, get_config, init

# Logging
from klaw_adt._logging import configure_logging, get_logger

# Errors
from klaw_adt.errors import NotLeftError, NotRightError, NothingError, UnwrapError

# Types
from klaw_adt.types import (
    Either,
    Err,
    Left,
    Nothing,
    NothingType,
    Ok,
    Option,
    Result,
    Right,
    Some,
    is_err,
    is_left,
    is_none,
    is_ok,
    is_right,
    is_some,
)

__all__ = [
    # Configuration
    'Config',
    # Either types
    'Either',
    # Result types
    'Err',
    'Left',
    'NotLeftError',
    'NotRightError',
    # Option types
    'Nothing',
    'NothingError',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Right',
    'Some',
    # Errors
    'UnwrapError',
    # Logging
    'configure_logging',
    'get_config',
    'get_logger',
    'init',
    # Predicates
    'is_err',
    'is_left',
    'is_none',
    'is_ok',
    'is_right',
    'is_some',
]
