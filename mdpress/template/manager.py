"""Template management for mdpress."""

from pathlib import Path
from typing import Optional

from ..exceptions import TemplateError

DEFAULT_PLACEHOLDER = "{{CONTENT}}"


class TemplateManager:
    """Holds a single page template with one content placeholder."""

    def __init__(self, template_path: Path, placeholder: str = DEFAULT_PLACEHOLDER):
        """Initialize the template manager.

        Args:
            template_path: Path to the HTML template file
            placeholder: Marker replaced with rendered content
        """
        self.template_path = Path(template_path)
        self.placeholder = placeholder
        self._template: Optional[str] = None

    def load(self) -> str:
        """Load the template text, reading the file only once.

        Returns:
            Template text

        Raises:
            TemplateError: If the template file is missing or unreadable
        """
        if self._template is None:
            if not self.template_path.is_file():
                raise TemplateError(f"Template not found: {self.template_path}")
            try:
                self._template = self.template_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise TemplateError(f"Failed to read template {self.template_path}: {e}") from e
        return self._template

    @property
    def has_placeholder(self) -> bool:
        """Whether the template contains the placeholder at least once."""
        return self.placeholder in self.load()

    def substitute(self, content: str) -> str:
        """Put content in place of the first placeholder occurrence.

        A template without the placeholder is returned unchanged.
        """
        return self.load().replace(self.placeholder, content, 1)
