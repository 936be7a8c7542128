"""
Stub page renderer.

Renders the placeholder page for a feature that has no hand-written
section. The caller decides which of the two templates applies.
"""

from pathlib import Path

from unstable_book_gen.renderers.base import BaseRenderer


class StubRenderer(BaseRenderer):
    """Render stub pages with or without a tracking issue reference."""

    issue_template = "stub-issue.md"
    no_issue_template = "stub-no-issue.md"

    def render_issue(self, name: str, issue: int) -> str:
        return self._render_template(self.issue_template, name=name, issue=issue)

    def render_no_issue(self, name: str) -> str:
        return self._render_template(self.no_issue_template, name=name)

    def generate_stub_issue(self, path: Path, name: str, issue: int) -> Path:
        """Write the stub page for a feature with tracking issue ``issue``."""
        return self.write_page(path, self.render_issue(name, issue))

    def generate_stub_no_issue(self, path: Path, name: str) -> Path:
        """Write the stub page for a feature without a tracking issue."""
        return self.write_page(path, self.render_no_issue(name))
