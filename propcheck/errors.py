"""
Property-Testing Error Classes

This module defines the exception hierarchy for the property-testing
framework. All framework errors inherit from PropCheckError, enabling
catch-all handling in test harnesses when needed.

Error Hierarchy:
    PropCheckError (base)
    ├── UnregisteredTypeError (no generator registered for a type)
    ├── NullInputError (system under test called without an input)
    ├── NullDependencyError (system under test called without a dependency)
    ├── ConfiguredFailure (mock rule deliberately simulating a dependency fault)
    ├── PropertyFailedError (a property run found a counterexample)
    ├── TableFailedError (one or more table entries failed)
    └── ConfigurationError (invalid runner configuration)
"""


class PropCheckError(Exception):
    """Base exception for all property-testing framework errors."""
    pass


class UnregisteredTypeError(PropCheckError):
    """Raised when the registry has no generator for the requested type.

    Fatal to the property run that triggered it. Register the generator
    before running property tests:

    Example:
        >>> registry.register(StructuredInput, structured_input_spec())
    """

    def __init__(self, type_key):
        self.type_key = type_key
        name = getattr(type_key, "__name__", repr(type_key))
        super().__init__(f"No generator registered for type: {name}")


class NullInputError(PropCheckError):
    """Raised when the system under test is called without an input value."""
    pass


class NullDependencyError(PropCheckError):
    """Raised when the system under test is called without a dependency."""
    pass


class ConfiguredFailure(PropCheckError):
    """Raised by a mock rule to simulate a dependency fault.

    This is expected behavior under specific inputs and is kept distinct
    from accidental errors so reports can tell the two apart.

    Attributes:
        value: The input that triggered the rule (may be None)
    """

    def __init__(self, message: str, value=None):
        self.value = value
        super().__init__(message)


class PropertyFailedError(PropCheckError):
    """Raised by PropertyReport.raise_for_failure() for a failed run."""

    def __init__(self, message: str, report=None):
        self.report = report
        super().__init__(message)


class TableFailedError(PropCheckError):
    """Raised by TableReport.raise_for_failure() when any entry failed."""

    def __init__(self, message: str, report=None):
        self.report = report
        super().__init__(message)


class ConfigurationError(PropCheckError):
    """Raised when runner configuration is invalid or cannot be loaded."""
    pass
