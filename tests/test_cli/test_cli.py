"""Tests for the featurecss CLI commands."""
from __future__ import annotations

from click.testing import CliRunner

from featurecss import __version__
from featurecss.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_cli_group_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "build CSS selectors gated on detected browser features" in result.output

    def test_cli_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert "build" in result.output
        assert "operations" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_yep(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["build", "yep", "translate3d", "opacity", "-c", ".my-selector", "-b", "opacity: 1"],
        )
        assert result.exit_code == 0
        assert result.output == ".translate3d.opacity .my-selector {\n  opacity: 1;\n}\n"

    def test_neither(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["build", "neither", "translate3d", "opacity", "--context", ".my-selector"]
        )
        assert result.exit_code == 0
        assert result.output.startswith(
            ".no-js .my-selector, .no-translate3d.no-opacity .my-selector {"
        )

    def test_custom_classes(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "build",
                "nope",
                "flexbox",
                "-c",
                ".nav",
                "--negation-prefix",
                "not-",
                "--no-script-class",
                "no-script",
            ],
        )
        assert result.exit_code == 0
        assert result.output.startswith(".no-script .nav, .not-flexbox .nav {")

    def test_repeated_context_emits_one_rule_each(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["build", "nope", "flexbox", "-c", ".nav", "-c", ".grid", "-b", "display: -webkit-box; display: block"],
        )
        assert result.exit_code == 0
        assert result.output == (
            ".no-js .nav, .no-flexbox .nav {\n"
            "  display: -webkit-box;\n"
            "  display: block;\n"
            "}\n"
            "\n"
            ".no-js .grid, .no-flexbox .grid {\n"
            "  display: -webkit-box;\n"
            "  display: block;\n"
            "}\n"
        )

    def test_missing_context(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "any", "flexbox"])
        assert result.exit_code == 1
        assert "any must be called within a selector" in result.output

    def test_invalid_feature(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "yep", "two words", "-c", ".a"])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_unknown_operation(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "maybe", "flexbox", "-c", ".a"])
        assert result.exit_code == 2

    def test_verbose_flag(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["-v", "build", "yep", "flexbox", "-c", ".a"])
        assert result.exit_code == 0
        assert ".flexbox .a {" in result.output


# ---------------------------------------------------------------------------
# operations command
# ---------------------------------------------------------------------------


class TestOperationsCommand:
    def test_lists_all(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["operations"])
        assert result.exit_code == 0
        for name in ("yep", "nope", "any", "neither"):
            assert name in result.output

    def test_describes_neither(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["operations"])
        assert "neither  all features unsupported (or no script)" in result.output
