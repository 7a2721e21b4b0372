#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/deckedit/utils/decorators.py
"""Utility decorators for deckedit components.

Dependency checks for the HTML tree builders and the optional CLI output,
plus a DEBUG-level timer used around tree serialization.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Tuple

from deckedit.exceptions import DependencyError
from deckedit.utils.packages import check_version_requirement


def check_dependencies(component_name: str, packages: List[Tuple[str, str, str]]) -> None:
    """Raise ``DependencyError`` unless every package imports at the required version.

    Parameters
    ----------
    component_name : str
        Name shown in the error message (e.g., "html", "lxml tree builder")
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples

    Raises
    ------
    DependencyError
        If any package is missing or has an incompatible version

    """
    missing = []
    version_mismatches = []
    original_error = None

    for install_name, import_name, version_spec in packages:
        try:
            importlib.import_module(import_name)

            if version_spec:
                meets_requirement, installed_version = check_version_requirement(install_name, version_spec)
                if not meets_requirement:
                    version_mismatches.append((install_name, version_spec, installed_version or "unknown"))

        except ImportError as e:
            missing.append((install_name, version_spec))
            if original_error is None:
                original_error = e

    if missing or version_mismatches:
        raise DependencyError(
            component_name=component_name,
            missing_packages=missing,
            version_mismatches=version_mismatches,
            original_import_error=original_error,
        ) from original_error


def requires_dependencies(component_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check required dependencies and versions before method execution.

    Parameters
    ----------
    component_name : str
        Name of the component (e.g., "html"). This appears in error messages.
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples where:
        - install_name: Package name for pip install (e.g., "beautifulsoup4")
        - import_name: Module name for import statement (e.g., "bs4")
        - version_spec: Version requirement (e.g., ">=4.12.0" or "" for any version)

    Returns
    -------
    Callable
        Decorated method that checks dependencies before execution

    Examples
    --------
        >>> @requires_dependencies("html", [("beautifulsoup4", "bs4", ">=4.12.0")])
        ... def parse(self, markup):
        ...     from bs4 import BeautifulSoup

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            check_dependencies(component_name, packages)
            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Context manager for timing operations with DEBUG-level logging.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Serializing slide")

    Notes
    -----
    Only measures time when logger has DEBUG level enabled.

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.4f}s")
    else:
        yield
