#!/usr/bin/env python3
# =============================================================================
#     File: _errors.py
#  Created: 2025-06-02 10:12
#   Author: Bernie Roesler
#
"""
Exceptions raised by the sparsebn package.
"""
# =============================================================================

__all__ = [
    'InternalInvariantError',
    'ShapeError',
    'SparseBNError',
    'ValidationError',
]


class SparseBNError(Exception):
    """Base class for all sparsebn errors."""


class ValidationError(SparseBNError, ValueError):
    """Raised when an input is malformed or outside its allowed range."""


class ShapeError(ValidationError):
    """Raised when a matrix has the wrong number of dimensions or is not
    square."""


class InternalInvariantError(SparseBNError, RuntimeError):
    """Raised when an internal consistency check fails.

    This error indicates a defect in the library, never a problem with the
    user's input.
    """

# =============================================================================
# =============================================================================
