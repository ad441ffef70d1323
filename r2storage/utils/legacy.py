"""Deprecated construction path kept for callers of the old API.

New code should call ``Builder.build()`` and handle ``ConfigError``.
"""

import warnings

from r2storage.builder import Builder
from r2storage.core.exceptions.exceptions import ConfigError
from r2storage.operator import Operator


def create_client(builder: Builder) -> Operator:
    """
    Build an operator, aborting on incomplete configuration.

    Raises:
        RuntimeError: If a required field is missing. Not a ``StorageError``,
            so callers catching storage errors do not recover from it.
    """
    warnings.warn(
        "create_client() is deprecated; use Builder.build() instead",
        DeprecationWarning,
        stacklevel=2,
    )
    try:
        return builder.build()
    except ConfigError as e:
        raise RuntimeError(f"Cannot create storage client: {e.message}") from e
