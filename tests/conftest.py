# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Pytest configuration for integration tests."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options."""
    parser.addoption(
        "--device",
        action="store",
        default="loop://",
        help="Serial port or pyserial URL that echoes writes back (default loop://)",
    )


@pytest.fixture(scope="session")
def device_port(request):
    """Get the device port from command line."""
    return request.config.getoption("--device")


@pytest.fixture
def transport(device_port):
    """Open a transport on the loopback device, closed after the test."""
    from leb128_codec.transport import Transport

    transport = Transport(device_port, timeout=1.0)
    yield transport
    transport.close()
