"""Site builder: turns a directory of markdown files into HTML pages."""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Dict, List, Optional

import mistune

from .config import BuildConfig
from .template import TemplateManager

logger = logging.getLogger(__name__)

OUTPUT_SUFFIX = ".html"


def create_renderer() -> mistune.Markdown:
    """Markdown to HTML converter with strikethrough support.

    Raw HTML in the source is passed through as-is.
    """
    return mistune.create_markdown(escape=False, plugins=["strikethrough"])


class SiteBuilder:
    """Builds one HTML page per markdown source file."""

    def __init__(self, config: Optional[BuildConfig] = None):
        """Initialize the site builder and load the page template.

        Args:
            config: Build configuration. Defaults are used when None.

        Raises:
            TemplateError: If the template cannot be loaded
        """
        self.config = config or BuildConfig()
        self.template_manager = TemplateManager(self.config.template_path, self.config.placeholder)
        self.template_manager.load()
        if not self.template_manager.has_placeholder:
            logger.warning(
                "Template %s has no %s placeholder; pages will be copies of the template",
                self.config.template_path,
                self.config.placeholder,
            )
        self.markdown = create_renderer()

    @property
    def input_dir(self) -> Path:
        """Directory scanned for markdown sources."""
        return self.config.input_dir

    @property
    def output_dir(self) -> Path:
        """Directory the pages are written into; it must already exist."""
        return self.config.output_dir

    def list_sources(self) -> List[Path]:
        """Return the regular files in the input directory.

        Raises:
            OSError: If the directory cannot be listed
        """
        sources = []
        for entry in sorted(self.input_dir.iterdir()):
            if entry.is_file():
                sources.append(entry)
            else:
                logger.debug("Skipping %s: not a regular file", entry)
        return sources

    @staticmethod
    def output_name(filename: str) -> str:
        """Map a source filename to its page filename (foo.md -> foo.html)."""
        return Path(filename).with_suffix(OUTPUT_SUFFIX).name

    def render(self, markdown_text: str) -> str:
        """Convert markdown to HTML and place it in the template."""
        return self.template_manager.substitute(self.markdown(markdown_text))

    def build_file(self, source: Path) -> Optional[Path]:
        """Read, render and write a single page.

        Returns:
            The written page path, or None if the source could not be read
            or rendered, or the page could not be written.
        """
        try:
            content = source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read %s: %s", source, e)
            return None

        try:
            page = self.render(content)
        except Exception as e:
            logger.error("Failed to render %s: %s", source, e)
            return None

        target = self.output_dir / self.output_name(source.name)
        try:
            target.write_text(page, encoding="utf-8")
        except OSError as e:
            logger.error("Failed to write %s: %s", target, e)
            return None

        logger.info("Wrote %s", target)
        return target

    def build(self) -> List[Path]:
        """Build every page in the input directory.

        Each file is processed as its own task; a failure on one file is
        logged and does not affect the others.
        When several sources map to the same page name, the first one by
        filename is built and the rest are logged and skipped.

        Returns:
            Paths of the pages written, in no particular order
        """
        try:
            sources = self.list_sources()
        except OSError as e:
            logger.error("Failed to list %s: %s", self.input_dir, e)
            return []

        logger.debug("Found %d source files in %s", len(sources), self.input_dir)

        targets: Dict[str, Path] = {}
        for source in sources:
            name = self.output_name(source.name)
            if name in targets:
                logger.error("Skipping %s: %s is already built from %s", source, name, targets[name])
                continue
            targets[name] = source

        with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
            futures = [executor.submit(self.build_file, source) for source in targets.values()]

        return [page for page in (future.result() for future in futures) if page is not None]
