from click.testing import CliRunner

from mdpress.cli import mdpress


def test_build_command(site, monkeypatch):
    monkeypatch.chdir(site)
    (site / "md" / "hello.md").write_text("# Hello\n", encoding="utf-8")

    result = CliRunner().invoke(mdpress, ["build"])

    assert result.exit_code == 0, result.output
    assert "Built 1 pages" in result.output
    assert "<h1>Hello</h1>" in (site / "posts" / "hello.html").read_text(encoding="utf-8")


def test_build_command_overrides(site, tmp_path_factory, monkeypatch):
    monkeypatch.chdir(tmp_path_factory.mktemp("elsewhere"))
    (site / "md" / "a.md").write_text("a\n", encoding="utf-8")

    result = CliRunner().invoke(mdpress, [
        "build",
        "-t", str(site / "template.html"),
        "-i", str(site / "md"),
        "-o", str(site / "posts"),
    ])

    assert result.exit_code == 0, result.output
    assert (site / "posts" / "a.html").exists()


def test_build_command_with_config_file(site, monkeypatch):
    monkeypatch.chdir(site)
    (site / "content").mkdir()
    (site / "content" / "a.md").write_text("a\n", encoding="utf-8")
    (site / "site.toml").write_text('[paths]\ninput = "content"\n')

    result = CliRunner().invoke(mdpress, ["build", "--config", "site.toml"])

    assert result.exit_code == 0, result.output
    assert (site / "posts" / "a.html").exists()


def test_file_failures_do_not_change_exit_code(site, monkeypatch):
    monkeypatch.chdir(site)
    (site / "md" / "bad.md").write_bytes(b"\xff")

    result = CliRunner().invoke(mdpress, ["build"])

    assert result.exit_code == 0
    assert "Built 0 pages" in result.output


def test_missing_template_aborts(site, monkeypatch):
    monkeypatch.chdir(site)
    (site / "site.toml").write_text('[paths]\ntemplate = "missing.html"\n')

    result = CliRunner().invoke(mdpress, ["build", "-c", "site.toml"])

    assert result.exit_code != 0
    assert "Error: Template not found" in result.output


def test_build_verbose_emits_debug_records(site, monkeypatch, caplog):
    monkeypatch.chdir(site)
    (site / "md" / "hello.md").write_text("# Hello\n", encoding="utf-8")

    result = CliRunner().invoke(mdpress, ["build", "-v"])

    assert result.exit_code == 0, result.output
    assert "Found 1 source files" in caplog.text
