import pytest

from mdpress.config import BuildConfig

TEMPLATE = "<html>\n<body>\n{{CONTENT}}\n</body>\n</html>\n"


@pytest.fixture
def site(tmp_path):
    """A site layout with a template and empty md/ and posts/ directories."""
    (tmp_path / "md").mkdir()
    (tmp_path / "posts").mkdir()
    (tmp_path / "template.html").write_text(TEMPLATE, encoding="utf-8")
    return tmp_path


@pytest.fixture
def config(site):
    return BuildConfig(
        template_path=site / "template.html",
        input_dir=site / "md",
        output_dir=site / "posts",
    )
