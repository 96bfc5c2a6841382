#!/usr/bin/env python3
"""Fixtures for testing."""

import pytest

from .helpers import FakeTransport, Recorder


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
