"""ellefe-core: Option and Result types with async counterparts.

Tagged unions for optional values (``Option``) and fallible computations
(``Result``), lazily evaluated async wrappers (``OptionAsync``,
``ResultAsync``), and a few small value utilities.

Flat imports (preferred):
    from ellefe_core import Option, Some, Nothing, Result, Ok, Err
    from ellefe_core import OptionAsync, ResultAsync, ok_async, wrap_async

Submodule imports (for organization):
    from ellefe_core.result import Ok, Err, Result
    from ellefe_core.option import Some, Nothing, Option
    from ellefe_core.guards import is_shaped, is_str
    from ellefe_core.duration import Duration
"""

# Configuration and logging
from ellefe_core._config import CoreConfig, get_config, init, reset_config
from ellefe_core._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)

# Serialization
from ellefe_core.codec import dumps, encode

# Decorators
from ellefe_core.decorators import safe, safe_async

# Leaf utilities
from ellefe_core.duration import Duration
from ellefe_core.errors import AbandonedComputationError, EllefeError, UnwrapError
from ellefe_core.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    all_some,
    any_some,
    from_nullable,
    none,
    some,
    wrap_opt,
)

# Async
from ellefe_core.option_async import (
    OptionAsync,
    all_some_async,
    any_some_async,
    from_nullable_async,
    none_async,
    some_async,
    wrap_opt_async,
)
from ellefe_core.result import (
    Err,
    Ok,
    Result,
    all_ok,
    any_ok,
    err,
    from_or,
    from_or_else,
    ok,
    wrap,
    wrap_or,
    wrap_or_else,
)
from ellefe_core.result_async import (
    ResultAsync,
    all_ok_async,
    any_ok_async,
    err_async,
    from_or_async,
    from_or_else_async,
    ok_async,
    wrap_async,
    wrap_or_async,
    wrap_or_else_async,
)
from ellefe_core.unit import UNIT, Unit, unit
from ellefe_core.utils import match, to_string

__all__ = [
    # Async
    'OptionAsync',
    'ResultAsync',
    'all_ok_async',
    'all_some_async',
    'any_ok_async',
    'any_some_async',
    'err_async',
    'from_nullable_async',
    'from_or_async',
    'from_or_else_async',
    'none_async',
    'ok_async',
    'some_async',
    'wrap_async',
    'wrap_opt_async',
    'wrap_or_async',
    'wrap_or_else_async',
    # Option
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'all_some',
    'any_some',
    'from_nullable',
    'none',
    'some',
    'wrap_opt',
    # Result
    'Err',
    'Ok',
    'Result',
    'all_ok',
    'any_ok',
    'err',
    'from_or',
    'from_or_else',
    'ok',
    'wrap',
    'wrap_or',
    'wrap_or_else',
    # Decorators
    'safe',
    'safe_async',
    # Errors
    'AbandonedComputationError',
    'EllefeError',
    'UnwrapError',
    # Utilities
    'UNIT',
    'Duration',
    'Unit',
    'dumps',
    'encode',
    'match',
    'to_string',
    'unit',
    # Configuration and logging
    'CoreConfig',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_config',
    'get_logger',
    'init',
    'remove_log_hook',
    'reset_config',
]

__version__ = '1.3.0a1'
