"""
Base renderer for unstable book pages.

Templates are plain markdown files with ``str.format`` placeholders. They
ship inside the package under ``templates/``; a ``template_dir`` may
override any of them by file name.
"""

from importlib import resources
from pathlib import Path

from unstable_book_gen.errors import io_operation


class BaseRenderer:
    """Base class for page renderers.

    Architecture:
        ```
        template name ──► template_dir/<name>  (if present)
                     └──► package templates/<name>
                                 │
                                 ▼
                          str.format(**fields)
                                 │
                                 ▼
                          write_page(path)
        ```
    """

    def __init__(self, template_dir: Path | None = None):
        """Initialize the renderer.

        Args:
            template_dir: Directory whose templates take precedence over the packaged ones
        """
        self.template_dir = Path(template_dir) if template_dir is not None else None
        self._templates: dict[str, str] = {}

    def _get_template(self, template_name: str) -> str:
        """Load a template by file name.

        Raises:
            BookIOError: If the template cannot be read
        """
        if template_name not in self._templates:
            self._templates[template_name] = self._load_template(template_name)
        return self._templates[template_name]

    def _load_template(self, template_name: str) -> str:
        if self.template_dir is not None:
            override = self.template_dir / template_name
            if override.is_file():
                with io_operation("read template", override):
                    return override.read_text(encoding="utf-8")

        packaged = resources.files("unstable_book_gen") / "templates" / template_name
        with io_operation("read template", str(packaged)):
            return packaged.read_text(encoding="utf-8")

    def _render_template(self, template_name: str, **fields: object) -> str:
        return self._get_template(template_name).format(**fields)

    def write_page(self, path: Path, content: str) -> Path:
        """Create (or replace) ``path`` with ``content``.

        Raises:
            BookIOError: If the file cannot be created or written
        """
        path = Path(path)
        with io_operation("create file", path):
            path.write_text(content, encoding="utf-8")
        return path
