#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the deckedit library.

The toolbar and the serializers never raise on malformed markup or on a
missing selection: those paths degrade to ``None``, a no-op or a toolbar
reset. The exceptions below are reserved for configuration boundaries,
such as passing the wrong options class or requesting an HTML tree builder
that is not installed.

Exception Hierarchy
-------------------
- DeckEditError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a component)

  - ParsingError (input that is not a valid slide document)

  - DependencyError (missing/incompatible packages)

"""

from typing import Any


class DeckEditError(Exception):
    """Base exception class for all deckedit-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(DeckEditError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is given to a component.

    For example, passing ``InlineEditorOptions`` to the fragment serializer.

    Parameters
    ----------
    component_name : str
        Name of the component that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        component_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{component_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'. "
                f"Please provide the correct options type for the component."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(DeckEditError):
    """Exception raised when a slide document cannot be read.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class DependencyError(DeckEditError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    component_name : str
        Name of the component requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    install_command : str, optional
        Suggested pip install command to resolve the issue
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_import_error : ImportError, optional
        The first import error encountered while probing packages

    """

    def __init__(
        self,
        component_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        install_command: str = "",
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        self.original_import_error = original_import_error
        if message is None:
            message_parts = []

            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
                message_parts.append(f"{component_name} requires the following packages: {pkg_list}")

            if version_mismatches:
                mismatch_str = ", ".join(
                    f"'{name}' (requires {required}, but {installed} is installed)"
                    for name, required, installed in version_mismatches
                )
                message_parts.append(f"{component_name} has version mismatches: {mismatch_str}")

            message = "\n".join(message_parts)

            if install_command:
                message += f"\nInstall with: {install_command}"
            else:
                all_packages = missing_packages + [(name, req) for name, req, _ in version_mismatches]
                if all_packages:
                    packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in all_packages)
                    message += f"\nInstall with: pip install --upgrade {packages_str}"

        super().__init__(message)
        self.component_name = component_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.install_command = install_command


__all__ = [
    "DeckEditError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "DependencyError",
]
