#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers rebuilding markup from serialized trees."""

from deckedit.renderers.html import HtmlRenderer, render_html

__all__ = ["HtmlRenderer", "render_html"]
