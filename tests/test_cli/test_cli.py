"""Tests for the tokencss CLI commands."""

import json
from pathlib import Path

from click.testing import CliRunner

from tokencss import __version__
from tokencss.cli.main import cli

FIXTURES = Path(__file__).parent.parent / "fixtures"
BASE = str(FIXTURES / "base.json")
THEME = str(FIXTURES / "theme.json")
INVALID = str(FIXTURES / "invalid.json")
BUTTON = str(FIXTURES / "button.css")

SCENARIO_CSS = (
    ".c{font-size:16px;color:red;background-color:white}"
    ".c:hover{color:blue}"
    "@media (max-width:992px){.c{font-size:14px}}"
)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "convert, merge, and diff responsive style tokens" in result.output

    def test_lists_commands(self):
        result = CliRunner().invoke(cli, ["--help"])
        for name in ("render", "parse", "diff", "extract", "set"):
            assert name in result.output

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_log_level_accepted(self):
        result = CliRunner().invoke(cli, ["--log-level", "debug", "render", BASE])
        assert result.exit_code == 0


# ---------------------------------------------------------------------------
# render command
# ---------------------------------------------------------------------------


class TestRenderCommand:
    def test_merges_in_order(self):
        result = CliRunner().invoke(cli, ["render", BASE, THEME, "--selector", ".c"])
        assert result.exit_code == 0
        assert result.output == SCENARIO_CSS + "\n"

    def test_union_mode(self):
        result = CliRunner().invoke(cli, ["render", BASE, THEME, "--selector", ".c", "--union"])
        assert result.exit_code == 0
        assert result.output == SCENARIO_CSS + "\n"

    def test_each_token_separately(self):
        result = CliRunner().invoke(cli, ["render", BASE, THEME, "--each"])
        assert result.exit_code == 0
        assert result.output == (
            ".tokenId1{font-size:16px;color:black}.tokenId1:hover{color:blue}"
            ".tokenId2{background-color:white;color:red}"
            "@media (max-width:992px){.tokenId2{font-size:14px}}\n"
        )

    def test_pretty(self):
        result = CliRunner().invoke(cli, ["render", BASE, "--selector", ".b", "--pretty"])
        assert result.exit_code == 0
        assert ".b {\n  font-size: 16px;\n  color: black;\n}" in result.output

    def test_token_list_file(self, tmp_path):
        tokens = [json.loads(Path(BASE).read_text()), json.loads(Path(THEME).read_text())]
        path = tmp_path / "tokens.json"
        path.write_text(json.dumps(tokens))
        result = CliRunner().invoke(cli, ["render", str(path), "--selector", ".c"])
        assert result.exit_code == 0
        assert result.output == SCENARIO_CSS + "\n"

    def test_invalid_token_fails(self):
        result = CliRunner().invoke(cli, ["render", INVALID])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "contents" in result.output

    def test_bad_json_fails(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        result = CliRunner().invoke(cli, ["render", str(path)])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_requires_a_file(self):
        result = CliRunner().invoke(cli, ["render"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# parse command
# ---------------------------------------------------------------------------


class TestParseCommand:
    def test_prints_token_json(self):
        result = CliRunner().invoke(cli, ["parse", BUTTON])
        assert result.exit_code == 0
        token = json.loads(result.output)
        assert token["id"] == "button"
        assert token["name"] == "button"
        assert token["contents"]["default"]["default"] == {"color": "red", "padding": "4px 8px"}
        assert token["contents"]["default"]["hover"] == {"color": "blue"}
        assert token["contents"]["md"]["default"] == {"color": "green"}

    def test_id_and_name_options(self):
        result = CliRunner().invoke(cli, ["parse", BUTTON, "--id", "btn", "--name", "Button"])
        token = json.loads(result.output)
        assert (token["id"], token["name"]) == ("btn", "Button")

    def test_unsupported_css_fails(self, tmp_path):
        path = tmp_path / "nested.css"
        path.write_text(".x{.y{color:red}}")
        result = CliRunner().invoke(cli, ["parse", str(path)])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_default_grid(self):
        result = CliRunner().invoke(cli, ["parse", BUTTON])
        token = json.loads(result.output)
        assert list(token["contents"]) == ["default", "xl", "lg", "md", "sm", "xs"]
        assert list(token["contents"]["md"]) == ["default", "hover", "focus", "active"]

    def test_custom_grid_drops_outside_declarations(self):
        result = CliRunner().invoke(
            cli, ["parse", BUTTON, "--breakpoints", "default", "--pseudo-states", "default,hover"]
        )
        assert result.exit_code == 0
        token = json.loads(result.output)
        assert token["contents"] == {
            "default": {
                "default": {"color": "red", "padding": "4px 8px"},
                "hover": {"color": "blue"},
            }
        }


# ---------------------------------------------------------------------------
# diff command
# ---------------------------------------------------------------------------


class TestDiffCommand:
    def test_prints_diff_json(self):
        result = CliRunner().invoke(cli, ["diff", BASE, THEME])
        assert result.exit_code == 0
        diff = json.loads(result.output)
        assert diff["added"]["default"]["default"] == {"background-color": "white"}
        assert diff["removed"]["default"]["default"] == {"font-size": "16px"}
        assert diff["removed"]["default"]["hover"] == {"color": "blue"}
        assert diff["changed"]["default"]["default"] == {"color": {"from": "black", "to": "red"}}
        assert "md" not in diff["added"]

    def test_include_compare_only(self):
        result = CliRunner().invoke(cli, ["diff", BASE, THEME, "--include-compare-only"])
        diff = json.loads(result.output)
        assert diff["added"]["md"]["default"] == {"font-size": "14px"}

    def test_invalid_token_fails(self):
        result = CliRunner().invoke(cli, ["diff", BASE, INVALID])
        assert result.exit_code == 1


# ---------------------------------------------------------------------------
# extract command
# ---------------------------------------------------------------------------


class TestExtractCommand:
    def test_lists_all(self):
        result = CliRunner().invoke(cli, ["extract", BUTTON])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            ".btn  color: red",
            ".btn  padding: 4px 8px",
            ".btn:hover  color: blue !important",
            ".btn  @media (max-width:992px)  color: green",
        ]

    def test_pseudo_filter(self):
        result = CliRunner().invoke(cli, ["extract", BUTTON, "--pseudo", "hover"])
        assert result.output.splitlines() == [".btn:hover  color: blue !important"]

    def test_media_filter(self):
        result = CliRunner().invoke(cli, ["extract", BUTTON, "--media", "(max-width: 992px)"])
        assert result.output.splitlines() == [".btn  @media (max-width:992px)  color: green"]


# ---------------------------------------------------------------------------
# set command
# ---------------------------------------------------------------------------


class TestSetCommand:
    def test_updates_first_rule(self):
        result = CliRunner().invoke(cli, ["set", BUTTON, "color", "purple", "--selector", ".btn"])
        assert result.exit_code == 0
        assert result.output == (
            ".btn{color:purple;padding:4px 8px}"
            ".btn:hover{color:blue!important}"
            "@media (max-width:992px){.btn{color:green}}\n"
        )

    def test_media_and_important(self):
        result = CliRunner().invoke(
            cli,
            [
                "set", BUTTON, "margin", "0",
                "--selector", ".btn", "--media", "(max-width: 992px)", "--important",
            ],
        )
        assert result.exit_code == 0
        assert "@media (max-width:992px){.btn{color:green;margin:0!important}}" in result.output

    def test_file_untouched(self):
        before = Path(BUTTON).read_text()
        CliRunner().invoke(cli, ["set", BUTTON, "color", "purple", "--selector", ".btn"])
        assert Path(BUTTON).read_text() == before

    def test_invalid_property_fails(self):
        result = CliRunner().invoke(cli, ["set", BUTTON, "font size", "1px"])
        assert result.exit_code == 1
        assert "Error:" in result.output
