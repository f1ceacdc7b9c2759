# Clearopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by clearopt.

These exceptions are reserved for developer-facing problems: bad option
declarations, option declarations whose arity does not match the shape of the
bound field, and misuse of the token cursors. User-facing parse problems
(bad values, missing required options, mutual exclusiveness) never raise;
they are collected as `ParsingError` entries on the target instead.

All exceptions inherit from `ClearOptError`, the base exception for the library.

Exception Hierarchy:
- ClearOptError
    ├── OptionDeclarationError
    │   └── OptionContractError
    └── EnumeratorError
"""


class ClearOptError(Exception):
    """Base exception for clearopt."""


class OptionDeclarationError(ClearOptError):
    """Exception raised when an option is declared with invalid metadata."""


class OptionContractError(OptionDeclarationError):
    """Exception raised when an option's arity does not match its field type."""


class EnumeratorError(ClearOptError):
    """Exception raised when a token cursor is read outside of its bounds."""
