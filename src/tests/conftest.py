"""
Pytest configuration and shared fixtures for pytail tests.

This module provides sample files used across multiple test files.
"""

import os
import sys

import pytest

# Add the src directory to the path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


@pytest.fixture
def ten_lines(tmp_path):
    """Create a file with 10 numbered lines."""
    test_file = tmp_path / "ten.txt"
    test_file.write_bytes(b"".join(b"line %d\n" % i for i in range(1, 11)))
    return test_file


@pytest.fixture
def twenty_lines(tmp_path):
    """Create a file with 20 numbered lines."""
    test_file = tmp_path / "twenty.txt"
    test_file.write_bytes(b"".join(b"line %d\n" % i for i in range(1, 21)))
    return test_file


@pytest.fixture
def empty_file(tmp_path):
    """Create an empty file."""
    test_file = tmp_path / "empty.txt"
    test_file.write_bytes(b"")
    return test_file


@pytest.fixture
def unterminated_file(tmp_path):
    """Create a file whose last line has no newline."""
    test_file = tmp_path / "unterminated.txt"
    test_file.write_bytes(b"one\ntwo\nthree")
    return test_file


@pytest.fixture
def binary_file(tmp_path):
    """Create a file with CRLF endings and bytes that are not valid UTF-8."""
    test_file = tmp_path / "binary.dat"
    test_file.write_bytes(b"\xff\xfe head\r\n\x00mid\r\n\x80tail\xc3")
    return test_file
