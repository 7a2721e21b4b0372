#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/deckedit/constants.py
"""Default values and shared constants for deckedit.

Values here are referenced by the options dataclasses and by the editor
components; changing them alters the defaults of every new editor.
"""

from __future__ import annotations

from typing import Final

# Structural containers bounding how far formatting introspection walks
DEFAULT_CONTAINERS: Final[str] = "h1,h2,h3,h4,h5,h6,div"

# Containers whose "bold" and list affordances are disabled
TITLE_TAGS: Final[frozenset[str]] = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})

# Tags that stop the upward walk regardless of container configuration
DOCUMENT_ROOT_TAGS: Final[frozenset[str]] = frozenset({"html", "body", "[document]"})

# Tag name under which the toolbar element appears in the host document
DEFAULT_TOOLBAR_TAG: Final[str] = "inline-editor"

DEFAULT_IMG_ANCHOR: Final[str] = "img"
DEFAULT_IMG_PROPERTY_WIDTH: Final[str] = "width"
DEFAULT_IMG_PROPERTY_CSS_FLOAT: Final[str] = "float"

# Toolbar placement offsets below the pointer, in pixels
MOBILE_TOP_OFFSET: Final[int] = 40
DESKTOP_TOP_OFFSET: Final[int] = 10

DEFAULT_TOOLBAR_WIDTH: Final[int] = 280
DEFAULT_TOOLBAR_HEIGHT: Final[int] = 48

# Timer intervals, in seconds
DEFAULT_DISPLAY_DEBOUNCE: Final[float] = 0.3
DEFAULT_STICKY_SCROLL_INTERVAL: Final[float] = 0.05
DEFAULT_IMAGE_ACTIVATION_DELAY: Final[float] = 0.1

STICKY_SCROLL_PROPERTY: Final[str] = "--inline-editor-sticky-scroll"

EDITABLE_SLOT_ATTRIBUTE: Final[str] = "contenteditable"

# Palette offered by the color sub-widget: (hex, label)
DEFAULT_PALETTE: Final[tuple[tuple[str, str], ...]] = (
    ("#8ed1fc", "Light blue"),
    ("#0693e3", "Vivid cyan blue"),
    ("#7bdcb5", "Light green cyan"),
    ("#00d084", "Vivid green cyan"),
    ("#fcb900", "Luminous vivid amber"),
    ("#ff6900", "Luminous vivid orange"),
    ("#f78da7", "Pale pink"),
    ("#cf2e2e", "Vivid red"),
    ("#ffffff", "White"),
    ("#abb8c3", "Cyan bluish gray"),
    ("#000000", "Black"),
)

# Slide template name -> root tag of the host slide component
DEFAULT_SLIDE_TAGS: Final[dict[str, str]] = {
    "title": "deckgo-slide-title",
    "content": "deckgo-slide-content",
    "split": "deckgo-slide-split",
    "gif": "deckgo-slide-gif",
}

HTML_PARSERS: Final[tuple[str, ...]] = ("html.parser", "lxml", "html5lib")
DEFAULT_HTML_PARSER: Final[str] = "html.parser"

# Element the fragment is parsed into; lxml and html5lib add html/body around it
FRAGMENT_ROOT_TAG: Final[str] = "deckedit-fragment"

# (install_name, import_name, version_spec)
DEPS_HTML = [("beautifulsoup4", "bs4", ">=4.12.0")]
DEPS_HTML_PARSER = {
    "html.parser": [],
    "lxml": [("lxml", "lxml", "")],
    "html5lib": [("html5lib", "html5lib", "")],
}
DEPS_RICH = [("rich", "rich", "")]
