"""Tests for the cssbuilder CLI commands."""

import json

from click.testing import CliRunner

from cssbuilder import __version__
from cssbuilder.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "build and check CSS selectors" in result.output

    def test_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert "build" in result.output
        assert "check" in result.output
        assert "combine" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_build_in_order(self) -> None:
        result = CliRunner().invoke(
            cli,
            ["build", "element=div", "id=main", "class=a", "class=b", "attr=x",
             "pseudo-class=hover", "pseudo-element=before"],
        )
        assert result.exit_code == 0
        assert result.output.strip() == "div#main.a.b[x]:hover::before"

    def test_attribute_long_name(self) -> None:
        result = CliRunner().invoke(cli, ["build", "attribute=href"])
        assert result.exit_code == 0
        assert result.output.strip() == "[href]"

    def test_value_may_contain_equals(self) -> None:
        result = CliRunner().invoke(cli, ["build", "element=a", 'attr=href$=".png"'])
        assert result.exit_code == 0
        assert result.output.strip() == 'a[href$=".png"]'

    def test_order_error_exits_1(self) -> None:
        result = CliRunner().invoke(cli, ["build", "class=a", "element=div"])
        assert result.exit_code == 1
        assert "following order" in result.output

    def test_duplicate_error_exits_1(self) -> None:
        result = CliRunner().invoke(cli, ["build", "id=a", "id=b"])
        assert result.exit_code == 1
        assert "more then one time" in result.output

    def test_unknown_kind_is_usage_error(self) -> None:
        result = CliRunner().invoke(cli, ["build", "colour=red"])
        assert result.exit_code == 2
        assert "unknown part kind" in result.output

    def test_missing_equals_is_usage_error(self) -> None:
        result = CliRunner().invoke(cli, ["build", "div"])
        assert result.exit_code == 2

    def test_json_output(self) -> None:
        result = CliRunner().invoke(cli, ["build", "--json", "element=a", "class=b"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["selector"] == "a.b"
        assert data["fragments"] == [
            {"kind": "element", "value": "a"},
            {"kind": "class", "value": "b"},
        ]

    def test_verbose_flag(self) -> None:
        result = CliRunner().invoke(cli, ["--verbose", "build", "element=a"])
        assert result.exit_code == 0
        assert "a" in result.output


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


class TestCheckCommand:
    def test_valid(self) -> None:
        result = CliRunner().invoke(cli, ["check", "ul.menu > li:hover"])
        assert result.exit_code == 0
        assert "OK: ul.menu > li:hover" in result.output

    def test_invalid_order(self) -> None:
        result = CliRunner().invoke(cli, ["check", ".a#main"])
        assert result.exit_code == 1
        assert "Invalid selector" in result.output

    def test_syntax_error(self) -> None:
        result = CliRunner().invoke(cli, ["check", "div >"])
        assert result.exit_code == 1
        assert "no right-hand selector" in result.output


# ---------------------------------------------------------------------------
# combine command
# ---------------------------------------------------------------------------


class TestCombineCommand:
    def test_combine(self) -> None:
        result = CliRunner().invoke(cli, ["combine", "div#main", "+", "table#data"])
        assert result.exit_code == 0
        assert result.output.strip() == "div#main + table#data"

    def test_combine_invalid_side(self) -> None:
        result = CliRunner().invoke(cli, ["combine", "#a#b", ">", "li"])
        assert result.exit_code == 1
        assert "Invalid selector" in result.output
