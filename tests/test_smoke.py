"""
Smoke tests — verify the bootstrap is healthy.

These tests ensure the basic scaffolding works:
- Package imports successfully
- CLI entrypoint responds
- Version is set
"""

from click.testing import CliRunner

from src import __version__
from src.main import cli


class TestBootstrap:
    """Verify the project bootstrap is healthy."""

    def test_version_is_set(self):
        """Version string should be defined and non-empty."""
        assert __version__
        assert isinstance(__version__, str)

    def test_cli_help(self):
        """CLI --help should exit cleanly with usage info."""
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "install-qt-action" in result.output

    def test_cli_version(self):
        """CLI --version should print the version."""
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_subcommands_registered(self):
        """Every sub-command should answer --help."""
        runner = CliRunner()
        for command in ("run", "resolve", "cache-key", "plan", "locate"):
            result = runner.invoke(cli, [command, "--help"])
            assert result.exit_code == 0, command

    def test_core_package_imports(self):
        """Core sub-packages should be importable."""
        import src.adapters
        import src.core
        import src.core.config
        import src.core.models
        import src.core.observability
        import src.core.services.qt_install


class TestActionMetadata:
    """action.yml must declare and forward every input the resolver reads."""

    RESOLVER_INPUTS = (
        "add-tools-to-path", "aqtsource", "aqtversion", "arch", "archives",
        "cache", "cache-key-prefix", "dir", "doc-archives", "doc-modules",
        "documentation", "email", "example-archives", "example-modules",
        "examples", "extra", "host", "install-deps", "modules",
        "no-qt-binaries", "pw", "py7zrversion", "set-env", "source",
        "src-archives", "target", "tools", "tools-only", "use-official",
        "version",
    )

    def _action(self, project_root):
        import yaml

        return yaml.safe_load((project_root / "action.yml").read_text(encoding="utf-8"))

    def test_inputs_declared(self, project_root):
        declared = self._action(project_root)["inputs"]
        missing = [name for name in self.RESOLVER_INPUTS if name not in declared]
        assert missing == []

    def test_inputs_forwarded(self, project_root):
        from src.core.config.loader import input_env_name

        steps = self._action(project_root)["runs"]["steps"]
        install = next(step for step in steps if step.get("id") == "install-qt")
        missing = [
            name for name in self.RESOLVER_INPUTS
            if input_env_name(name) not in install["env"]
        ]
        assert missing == []

    def test_qt_path_output(self, project_root):
        outputs = self._action(project_root)["outputs"]
        assert "qtPath" in outputs

    def test_runs_installed_console_script(self, project_root):
        """The step runs in the caller's checkout, so it must not rely on cwd imports."""
        import tomllib

        steps = self._action(project_root)["runs"]["steps"]
        install = next(step for step in steps if step.get("id") == "install-qt")
        scripts = tomllib.loads((project_root / "pyproject.toml").read_text(encoding="utf-8"))["project"]["scripts"]

        assert install["run"] == "install-qt-action run"
        assert scripts["install-qt-action"] == "src.main:cli"
        assert "-m src" not in install["run"]
