from click.testing import CliRunner

from mdwatch import __version__
from mdwatch.cli import cli
from mdwatch.errors import UnsupportedFileError


class DummySession:
    instances = []

    def __init__(self, config, source=None):
        self.config = config
        self.ran = False
        DummySession.instances.append(self)

    def run(self):
        self.ran = True


def test_cli_passes_options_to_session(monkeypatch, tmp_path):
    DummySession.instances = []
    monkeypatch.setattr("mdwatch.session.WatchSession", DummySession)
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["-i", "docs", "-o", "site", "-t", "layout.html", "--debounce", "0.5"],
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    (session,) = DummySession.instances
    assert session.ran
    assert str(session.config.input_dir) == "docs"
    assert str(session.config.output_dir) == "site"
    assert str(session.config.template_path) == "layout.html"
    assert session.config.debounce == 0.5


def test_cli_reads_yaml_defaults(monkeypatch, tmp_path):
    DummySession.instances = []
    monkeypatch.setattr("mdwatch.session.WatchSession", DummySession)
    monkeypatch.chdir(tmp_path)
    (tmp_path / "mdwatch.yaml").write_text("output: public\non_unsupported: skip\n", encoding="utf-8")
    result = CliRunner().invoke(cli, ["--on-unsupported", "error"], catch_exceptions=False)
    assert result.exit_code == 0
    config = DummySession.instances[0].config
    assert str(config.output_dir) == "public"
    assert config.on_unsupported == "error"
    assert config.template_path is None


def test_cli_invalid_directory_exits_nonzero(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(cli, ["--input", str(tmp_path / "missing")])
    assert result.exit_code == 1
    assert "ERROR:" in result.output
    assert "invalid directory" in result.output


def test_cli_missing_template_exits_nonzero(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(cli, ["--template", str(tmp_path / "none.html")])
    assert result.exit_code == 1
    assert "ERROR: Template not found" in result.output


def test_cli_unsupported_file_exits_nonzero(monkeypatch, tmp_path):
    class FailingSession(DummySession):
        def run(self):
            raise UnsupportedFileError(tmp_path / "readme.txt", "Only markdown files can be converted.")

    monkeypatch.setattr("mdwatch.session.WatchSession", FailingSession)
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(cli, [])
    assert result.exit_code == 1
    assert "ERROR: Only markdown files can be converted." in result.output


def test_cli_interrupt_exits_cleanly(monkeypatch, tmp_path):
    class InterruptedSession(DummySession):
        def run(self):
            raise KeyboardInterrupt

    monkeypatch.setattr("mdwatch.session.WatchSession", InterruptedSession)
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(cli, [])
    assert result.exit_code == 0
    assert "Stopped watching." in result.output


def test_cli_version():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_module_main_entrypoint():
    from mdwatch.__main__ import main

    assert callable(main)


def test_cli_blank_yaml_directory_exits_nonzero(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "mdwatch.yaml").write_text("input:\n", encoding="utf-8")
    result = CliRunner().invoke(cli, [])
    assert result.exit_code == 1
    assert "ERROR: input must name a directory" in result.output
