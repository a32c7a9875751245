"""Shared fixtures for the pysequent test suite."""

import pytest

from pysequent import Sequent, SequentProver
from pysequent.syntax import atom


@pytest.fixture
def a():
    return atom("A")


@pytest.fixture
def b():
    return atom("B")


@pytest.fixture
def empty_sequent():
    """The sequent with nothing on either side."""
    return Sequent()


@pytest.fixture
def prover():
    """A SequentProver with depth limit 15."""
    return SequentProver(max_depth=15)
