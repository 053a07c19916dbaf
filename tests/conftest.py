"""Shared pytest configuration for the crosslinkutils test suite."""

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running scale tests (deselect with -m 'not slow')")


@pytest.fixture
def figure():
    """A small figure-state shaped structure with nested dicts and lists."""
    return {
        'data': [
            {'type': 'histogram', 'x': [1, 2, 3], 'transforms': [{'type': 'filter', 'value': 3}]},
            {'type': 'scatter', 'marker': {'size': 3, 'color': [1, -1]}},
        ],
        'layout': {'xaxis': {'range': [0, 10]}, 'title': 'wbcd'},
    }
