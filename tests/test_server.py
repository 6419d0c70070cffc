"""Tests for startup port selection."""
import socket

from estatebot.server import find_available_port, port_available

HOST = "127.0.0.1"


def test_busy_port_is_skipped():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as busy:
        busy.bind((HOST, 0))
        taken = busy.getsockname()[1]
        assert not port_available(taken, HOST)
        assert find_available_port(taken, HOST) != taken


def test_free_preferred_port_is_used():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind((HOST, 0))
        free = probe.getsockname()[1]
    assert find_available_port(free, HOST) == free
