"""Pytest configuration for photogrid tests.

Installs a stand-in ``gi`` package BEFORE any test module imports
photogrid, so the GLib timers and GTK gestures can be driven by hand
without a display or a running main loop.
"""

import sys
import types
from unittest.mock import MagicMock

import pytest


class FakeMainContext:
    def __init__(self, glib):
        self._glib = glib

    def find_source_by_id(self, source_id):
        return self._glib.sources.get(source_id)


class FakeGLib(types.ModuleType):
    """GLib timeouts that only fire when a test calls ``run_timeouts``."""

    def __init__(self):
        super().__init__("gi.repository.GLib")
        self.sources = {}
        self._next_id = 1
        context = FakeMainContext(self)
        self.MainContext = types.SimpleNamespace(default=lambda: context)

    def timeout_add(self, interval_ms, callback, *args):
        source_id = self._next_id
        self._next_id += 1
        self.sources[source_id] = (interval_ms, callback, args)
        return source_id

    def source_remove(self, source_id):
        return self.sources.pop(source_id, None) is not None

    def run_timeouts(self, rounds=1):
        """Fire every pending timeout ``rounds`` times."""
        for _ in range(rounds):
            for source_id, (_interval, callback, args) in list(self.sources.items()):
                if source_id not in self.sources:
                    continue
                if not callback(*args):
                    self.sources.pop(source_id, None)

    def reset(self):
        self.sources.clear()


class FakeGesture:
    """Records signal handlers so tests can emit gesture signals."""

    def __init__(self):
        self.handlers = {}
        self.grouped_with = None
        self.states = []

    def connect(self, signal, handler):
        self.handlers.setdefault(signal, []).append(handler)

    def emit(self, signal, *args):
        for handler in self.handlers.get(signal, []):
            handler(self, *args)

    def group(self, other):
        self.grouped_with = other

    def set_state(self, state):
        self.states.append(state)


class FakeGestureLongPress(FakeGesture):
    pass


class FakeGestureDrag(FakeGesture):
    pass


class FakeGestureClick(FakeGesture):
    pass


class FakeSimpleAction(FakeGesture):
    """Gio.SimpleAction: activating a disabled action does nothing."""

    def __init__(self, name):
        super().__init__()
        self.name = name
        self.enabled = True

    @classmethod
    def new(cls, name, _parameter_type):
        return cls(name)

    def set_enabled(self, enabled):
        self.enabled = enabled

    def get_enabled(self):
        return self.enabled

    def activate(self, parameter):
        if self.enabled:
            self.emit("activate", parameter)


class FakeSimpleActionGroup:
    def __init__(self):
        self.actions = {}

    def add_action(self, action):
        self.actions[action.name] = action


class FakeWidget:
    """Base for GTK widget subclasses; every widget method is a MagicMock."""

    def __init__(self, *args, **kwargs):
        pass

    def __getattr__(self, name):
        if name.startswith("__"):
            raise AttributeError(name)
        method = MagicMock(name=name)
        setattr(self, name, method)
        return method


FAKE_GLIB = FakeGLib()

_fake_gtk = MagicMock()
_fake_gtk.GestureLongPress = FakeGestureLongPress
_fake_gtk.GestureDrag = FakeGestureDrag
_fake_gtk.GestureClick = FakeGestureClick
_fake_gtk.ScrolledWindow = FakeWidget
_fake_gtk.EventSequenceState = types.SimpleNamespace(
    NONE="none", CLAIMED="claimed", DENIED="denied"
)

_fake_gio = types.ModuleType("gi.repository.Gio")
_fake_gio.SimpleAction = FakeSimpleAction
_fake_gio.SimpleActionGroup = FakeSimpleActionGroup

_fake_gi = types.ModuleType("gi")
_fake_gi.require_version = lambda namespace, version: None
_fake_repository = types.ModuleType("gi.repository")
_fake_repository.GLib = FAKE_GLIB
_fake_repository.Gtk = _fake_gtk
_fake_repository.Gio = _fake_gio
_fake_gi.repository = _fake_repository

sys.modules["gi"] = _fake_gi
sys.modules["gi.repository"] = _fake_repository


@pytest.fixture(autouse=True)
def fake_glib():
    """Provide the fake GLib with no pending timeouts."""
    FAKE_GLIB.reset()
    yield FAKE_GLIB
    FAKE_GLIB.reset()


class FakeViewport:
    """Row-major grid of square cells with a scrollable offset.

    Keys are 0..item_count-1, laid out ``columns`` per row. ``scroll_y``
    moves the content; ``scroll_by`` records every delta.
    """

    def __init__(self, item_count=100, columns=10, cell_size=40, height=800, spacing=0):
        self.item_count = item_count
        self.columns = columns
        self.cell_size = cell_size
        self.spacing = spacing
        self.height = height
        self.scroll_y = 0.0
        self.scroll_calls = []

    def current_visible_cells(self):
        from photogrid.ui.photo_grid.grid_query import VisibleCell

        step = self.cell_size + self.spacing
        cells = []
        for key in range(self.item_count):
            row, col = divmod(key, self.columns)
            top = row * step - self.scroll_y
            if top + self.cell_size > 0 and top < self.height:
                cells.append(
                    VisibleCell(key=key, offset=(col * step, top), size=(self.cell_size, self.cell_size))
                )
        return cells

    def viewport_height(self):
        return self.height

    def scroll_by(self, delta):
        self.scroll_calls.append(delta)
        self.scroll_y += delta

    def center_of(self, key):
        """Viewport point at the middle of ``key``'s cell."""
        step = self.cell_size + self.spacing
        row, col = divmod(key, self.columns)
        half = self.cell_size / 2
        return (col * step + half, row * step - self.scroll_y + half)


@pytest.fixture
def viewport():
    return FakeViewport()
