#!/usr/bin/env python3
# =============================================================================
#     File: conftest.py
#  Created: 2025-06-11 11:58
#   Author: Bernie Roesler
#
"""
Configuration file for pytest to set up the testing environment.
"""
# =============================================================================

import numpy as np
import pytest


def pytest_addoption(parser):
    """Add command-line options for pytest."""
    parser.addoption(
        "--seed",
        action="store",
        type=int,
        default=565656,
        help="Seed for the random number generator used by the tests."
    )


@pytest.fixture
def rng(request):
    """A random number generator seeded from the command line."""
    return np.random.default_rng(request.config.getoption('--seed'))

# =============================================================================
# =============================================================================
