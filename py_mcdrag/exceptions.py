"""py_mcdrag exception types.

Exception Hierarchy
-------------------

Exception (built-in Python)
├── ValueError
│   ├── ParseError
│   │   └── ProfileLoadingError
│   ├── InvalidBoundaryLayerCode
│   └── InvalidGeometry
└── RuntimeError
    └── MissingInput

Exception Types
---------------

- ParseError: Raised when a serialized input record is malformed or a numeric
  field can not be read as a number.

- ProfileLoadingError: Raised when a TOML projectile profile can not be loaded.

- InvalidBoundaryLayerCode: Raised when a boundary layer code is not one of
  L/L, L/T or T/T. Contains:
  - code: The rejected input

- InvalidGeometry: Raised when projectile geometry violates a precondition of the
  drag model (e.g. nose length not positive). Contains:
  - field: Name of the offending geometry field
  - value: The rejected value

- MissingInput: Raised by the structured calculator when a result is requested
  before any input was set.
"""
from typing import Any

__all__ = (
    'ParseError',
    'ProfileLoadingError',
    'InvalidBoundaryLayerCode',
    'InvalidGeometry',
    'MissingInput',
)


class ParseError(ValueError):
    """Malformed input error."""


class ProfileLoadingError(ParseError):
    """Projectile profile loading error."""


class InvalidBoundaryLayerCode(ValueError):
    """Exception for unrecognized boundary layer codes.

    Contains:
    - The rejected code
    """

    def __init__(self, code: Any):
        self.code = code
        super().__init__(f"Invalid boundary layer code {code!r}, expected one of L/L, L/T, T/T")


class InvalidGeometry(ValueError):
    """Exception for projectile geometry the drag model can not evaluate.

    Contains:
    - The geometry field name
    - The rejected value
    """

    def __init__(self, field: str, value: Any, reason: str = ""):
        self.field: str = field
        self.value: Any = value
        msg = f"Invalid {field}={value!r}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class MissingInput(RuntimeError):
    """Calculation requested before input was set."""

    def __init__(self, message: str = "No input data set"):
        super().__init__(message)
