"""
Renderers for unstable book pages.

Provides the stub page renderer and the SUMMARY.md renderer, both built on
packaged ``str.format`` templates.
"""

from unstable_book_gen.renderers.base import BaseRenderer
from unstable_book_gen.renderers.stub import StubRenderer
from unstable_book_gen.renderers.summary import SummaryRenderer, render_entries, render_summary

__all__ = [
    "BaseRenderer",
    "StubRenderer",
    "SummaryRenderer",
    "render_entries",
    "render_summary",
]
