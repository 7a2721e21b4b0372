"""Pytest configuration and shared fixtures for the deckedit test suite."""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from deckedit.editor import InlineEditor, ManualScheduler, SoupDocument, Viewport
from deckedit.options import InlineEditorOptions

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def scheduler() -> ManualScheduler:
    """Provide a deterministic scheduler."""
    return ManualScheduler()


@pytest.fixture
def notifications() -> list:
    """Collect editor notifications."""
    return []


@pytest.fixture
def make_editor(scheduler, notifications):
    """Build an attached editor over a ``SoupDocument``.

    Returns a factory ``make(markup, viewport=None, **option_overrides)``
    returning ``(editor, document)``; the focused element is the first
    ``contenteditable`` element when there is one.
    """
    editors = []

    def make(markup: str, viewport: Viewport | None = None, **overrides):
        document = SoupDocument(markup)
        editor = InlineEditor(
            document,
            viewport=viewport or Viewport(inner_width=1024),
            options=InlineEditorOptions(**overrides),
            scheduler=scheduler,
            notification_callback=notifications.append,
        )
        editor.attach()
        editable = document.soup.find(attrs={"contenteditable": True})
        if editable is not None:
            document.focus(editable)
        editors.append(editor)
        return editor, document

    yield make

    for editor in editors:
        editor.detach()
