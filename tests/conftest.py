"""
Pytest configuration and shared fixtures for simulator tests.
"""
import pytest
from test_utils import create_test_processes


@pytest.fixture
def two_overlapping_processes():
    """Process 1 arrives while process 0 is running (quantum 2)."""
    return create_test_processes((0, 4), (1, 3))


@pytest.fixture
def late_single_process():
    """One process arriving after the CPU has been idle."""
    return create_test_processes((5, 3))


@pytest.fixture
def simultaneous_processes():
    """Two processes arriving together, each needing exactly one quantum of 2."""
    return create_test_processes((0, 2), (0, 2))


@pytest.fixture
def long_running_processes():
    """Two long processes plus a short one arriving mid-run, for fast-forward tests."""
    return create_test_processes((0, 20), (0, 20), (13, 3))


@pytest.fixture
def process_file(tmp_path):
    """Process definition file for scenario A."""
    path = tmp_path / "processes.txt"
    path.write_text("# arrival burst\n0 4\n1 3\n")
    return path
