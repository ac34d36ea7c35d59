"""Tests for the markup-styles command line."""

from click.testing import CliRunner

from markup import __version__
from markup.cli import cli


def write_html(tmp_path, source):
    path = tmp_path / "page.html"
    path.write_text(source, encoding="utf-8")
    return str(path)


# ---------------------------------------------------------------------------
# inspect
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_lists_pairs_in_order(self, tmp_path):
        page = write_html(
            tmp_path,
            '<div style="color:red;invalid;font-size:16px"><p class="x">t</p>'
            '<span style="margin : 0">s</span></div>',
        )
        result = CliRunner().invoke(cli, ["inspect", page])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "<div>",
            "  color: red",
            "  font-size: 16px",
            "<span>",
            "  margin: 0",
        ]

    def test_empty_style_still_listed(self, tmp_path):
        page = write_html(tmp_path, '<p style=";;">t</p>')
        result = CliRunner().invoke(cli, ["inspect", page])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["<p>"]

    def test_no_styles(self, tmp_path):
        page = write_html(tmp_path, '<p class="color:red" style>t</p>')
        result = CliRunner().invoke(cli, ["inspect", page])
        assert result.exit_code == 0
        assert "No style attributes found." in result.output

    def test_merge_option(self, tmp_path):
        page = write_html(tmp_path, '<p style="color:red" style="color:blue">t</p>')
        result = CliRunner().invoke(cli, ["inspect", "--merge", "style=ignore", page])
        assert result.exit_code == 0
        assert "color: blue" not in result.output
        assert "color: red" in result.output

    def test_unknown_merge_mode(self, tmp_path):
        page = write_html(tmp_path, "<p>t</p>")
        result = CliRunner().invoke(cli, ["inspect", "--merge", "style=overwrite", page])
        assert result.exit_code == 1
        assert "unknown merge mode" in result.output

    def test_malformed_merge_option(self, tmp_path):
        page = write_html(tmp_path, "<p>t</p>")
        result = CliRunner().invoke(cli, ["inspect", "--merge", "style", page])
        assert result.exit_code != 0

    def test_missing_file(self, tmp_path):
        result = CliRunner().invoke(cli, ["inspect", str(tmp_path / "nope.html")])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------


class TestRenderCommand:
    def test_normalizes_style(self, tmp_path):
        page = write_html(tmp_path, '<p style=" color : red ;; bogus ">t</p>')
        result = CliRunner().invoke(cli, ["render", page])
        assert result.exit_code == 0
        assert result.output == '<p style="color:red">t</p>\n'

    def test_separator_and_keep_empty(self, tmp_path):
        page = write_html(tmp_path, '<p style="a:1;b:2">t</p><i style=";">u</i>')
        result = CliRunner().invoke(
            cli, ["render", "--separator", "; ", "--keep-empty-style", page]
        )
        assert result.exit_code == 0
        assert result.output == '<p style="a:1; b:2">t</p><i style="">u</i>\n'


# ---------------------------------------------------------------------------
# pairs / group options
# ---------------------------------------------------------------------------


class TestPairsCommand:
    def test_prints_pairs(self):
        result = CliRunner().invoke(cli, ["pairs", "color : red ; ; font-size:16px"])
        assert result.exit_code == 0
        assert result.output == "color: red\nfont-size: 16px\n"

    def test_no_pairs(self):
        result = CliRunner().invoke(cli, ["pairs", ";;;"])
        assert result.exit_code == 0
        assert result.output == ""


class TestGroupOptions:
    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_verbose_flag_accepted(self, tmp_path):
        page = write_html(tmp_path, '<p style="a:1">t</p>')
        result = CliRunner().invoke(cli, ["-v", "inspect", page])
        assert result.exit_code == 0
        assert "a: 1" in result.output
