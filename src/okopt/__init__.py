"""okopt: Option and Result types with pedantic, opt-out runtime checks.

Flat imports (preferred):
    from okopt import Option, Some, Nothing, Result, Ok, Err
    from okopt import relaxed_block_checks, configure

Submodule imports (for organization):
    from okopt.types import Option, Result
    from okopt.presence import present_or
    from okopt.mapping import OptionalDict
"""

# Descriptors
from okopt.accessors import (
    DelegateOptional,
    OptionalAttribute,
    delegate_optional,
    optional_attributes,
)

# Checks and conversions
from okopt.checks import (
    is_option,
    is_result,
    not_type_or_raise,
    require_result,
    to_option,
    type_or,
    type_or_else,
    type_or_raise,
)

# Errors
from okopt.errors import (
    ArgumentError,
    ExpectError,
    NotComparableError,
    NotPresentError,
    OkoptError,
    ResultRequiredError,
    TypeMismatchError,
    UnwrapError,
)
# Mapping
from okopt.mapping import OptionalDict

# Policy
from okopt.policy import (
    Policy,
    configure,
    get_policy,
    lenient_comparison,
    override_policy,
    relaxed_block_checks,
)

# Presence
from okopt.presence import (
    blank_or,
    blank_or_else,
    blank_or_raise,
    is_blank,
    is_present,
    present_or,
    present_or_else,
    present_or_raise,
)

# Types
from okopt.types import (
    Arbitrary,
    ArbitraryType,
    Err,
    Nothing,
    NothingType,
    Ok,
    Option,
    Result,
    Some,
    collect,
)

__all__ = [
    'Arbitrary',
    'ArbitraryType',
    'ArgumentError',
    'DelegateOptional',
    'Err',
    'ExpectError',
    'NotComparableError',
    'NotPresentError',
    'Nothing',
    'NothingType',
    'Ok',
    'OkoptError',
    'Option',
    'OptionalAttribute',
    'OptionalDict',
    'Policy',
    'Result',
    'ResultRequiredError',
    'Some',
    'TypeMismatchError',
    'UnwrapError',
    'blank_or',
    'blank_or_else',
    'blank_or_raise',
    'collect',
    'configure',
    'delegate_optional',
    'get_policy',
    'is_blank',
    'is_option',
    'is_present',
    'is_result',
    'lenient_comparison',
    'not_type_or_raise',
    'optional_attributes',
    'override_policy',
    'present_or',
    'present_or_else',
    'present_or_raise',
    'relaxed_block_checks',
    'require_result',
    'to_option',
    'type_or',
    'type_or_else',
    'type_or_raise',
]
