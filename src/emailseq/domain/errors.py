"""Domain exception types.

Validation errors are raised by the ``validate()`` methods on the domain
models. :class:`RepositoryError` is raised by repository implementations
when the backing store fails; it always chains the driver exception.
"""

from __future__ import annotations


class SequenceValidationError(ValueError):
    """A sequence or sequence patch failed validation."""


class StepValidationError(ValueError):
    """A step failed validation."""


class RepositoryError(Exception):
    """The backing store failed to complete an operation."""
