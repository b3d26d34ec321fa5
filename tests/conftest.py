# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Pytest configuration and shared fixtures."""

import random

import pytest


def pytest_addoption(parser):
    """Add custom command-line options."""
    parser.addoption(
        "--port",
        action="store",
        default=None,
        help="Looped-back serial port for integration tests (e.g., /dev/ttyUSB0)",
    )
    parser.addoption(
        "--baudrate",
        action="store",
        type=int,
        default=115200,
        help="Baud rate for integration tests",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless a port was given."""
    if config.getoption("--port"):
        return
    skip = pytest.mark.skip(reason="needs --port with a looped-back serial line")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


@pytest.fixture
def rng():
    """Seeded random generator so failures are reproducible."""
    return random.Random(0xCD9)


@pytest.fixture
def random_data(rng):
    """4096 pseudo-random bytes."""
    return bytes(rng.getrandbits(8) for _ in range(4096))


@pytest.fixture(scope="session")
def loopback_port(request):
    """Serial port given on the command line."""
    return request.config.getoption("--port")


@pytest.fixture(scope="session")
def loopback_baudrate(request):
    """Baud rate given on the command line."""
    return request.config.getoption("--baudrate")


@pytest.fixture
def transport(loopback_port, loopback_baudrate):
    """Transport on the looped-back port, closed after the test."""
    from cdp_codec.transport import Transport

    transport = Transport(loopback_port, baudrate=loopback_baudrate, timeout=2.0)
    yield transport
    transport.close()
