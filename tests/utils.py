"""Test utilities for the deckedit test suite."""

from deckedit.editor import PointerEvent, SoupDocument


def press(document: SoupDocument, target, x: float = 100, y: float = 50) -> int:
    """Dispatch a ``mousedown`` on ``target``."""
    return document.dispatch_pointer(PointerEvent(target=target, client_x=x, client_y=y))


def press_and_select(document: SoupDocument, text: str, x: float = 100, y: float = 50) -> None:
    """Press on the element holding ``text``, then select ``text``, as a user drag does."""
    node = next(node for node in document.soup.find_all(string=True) if text in node)
    press(document, node.parent, x, y)
    document.select_text(text)
