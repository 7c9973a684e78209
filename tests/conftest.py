"""Shared fixtures for placemap tests."""

from unittest.mock import MagicMock

import pytest


class RecordingLibrary:
    """Stand-in map library that records every call made against it."""

    def __init__(self):
        self.calls = []

    def new_map(self, center, zoom, attribution_control=True):
        self.calls.append(("new_map", center, zoom, attribution_control))
        return {"id": "fake-map"}

    def set_view(self, m, center, zoom):
        self.calls.append(("set_view", center, zoom))

    def add_tile_layer(self, m, url, max_zoom, attribution=None):
        self.calls.append(("add_tile_layer", url, max_zoom))

    def add_marker(self, m, location, popup):
        self.calls.append(("add_marker", location, popup))

    def fit_bounds(self, m, bounds, padding=None):
        self.calls.append(("fit_bounds", list(bounds), padding))

    def named(self, name):
        return [c for c in self.calls if c[0] == name]


@pytest.fixture()
def library():
    return RecordingLibrary()


@pytest.fixture()
def make_session():
    """Build a fake HTTP session whose ``get`` answers with the given payload."""

    def _make(payload=None, ok=True, status_code=200):
        resp = MagicMock()
        resp.ok = ok
        resp.status_code = status_code
        resp.json.return_value = payload
        session = MagicMock()
        session.get.return_value = resp
        return session

    return _make
