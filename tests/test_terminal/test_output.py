"""Unit tests for terminal output rendering (guppy.terminal.output)."""

from __future__ import annotations

from pathlib import Path

import pytest

from guppy.constants import COLORS
from guppy.terminal.output import (
    TerminalOutput,
    render_log,
    render_terminal_output,
)

RED = "\x1b[31m"
GREEN = "\x1b[32m"
BOLD = "\x1b[1m"
RESET = "\x1b[0m"


# ---------------------------------------------------------------------------
# render_log
# ---------------------------------------------------------------------------


class TestRenderLog:
    @pytest.mark.unit
    def test_plain_text_unchanged(self):
        assert render_log("Compiled successfully") == "Compiled successfully"

    @pytest.mark.unit
    def test_empty_string(self):
        assert render_log("") == ""

    @pytest.mark.unit
    def test_color_becomes_inline_style(self):
        html = render_log(f"{RED}Failed to compile{RESET}")
        assert "\x1b" not in html
        assert html.startswith('<span style="color: #')
        assert "Failed to compile</span>" in html

    @pytest.mark.unit
    def test_bold(self):
        assert "font-weight: bold" in render_log(f"{BOLD}Success!{RESET}")

    @pytest.mark.unit
    def test_reset_ends_styling(self):
        html = render_log(f"{GREEN}ok{RESET} plain")
        assert html.endswith(" plain")
        assert html.count("<span") == 1

    @pytest.mark.unit
    @pytest.mark.parametrize("newline", ["\n", "\r\n", "\r"])
    def test_line_breaks(self, newline: str):
        assert render_log(f"one{newline}two") == "one<br />two"

    @pytest.mark.unit
    def test_trailing_newline_kept(self):
        assert render_log("done\n") == "done<br />"

    @pytest.mark.unit
    def test_leading_spaces_preserved(self):
        assert render_log("  npm start") == "&nbsp;&nbsp;npm start"

    @pytest.mark.unit
    def test_only_leading_spaces_converted(self):
        assert render_log("a  b") == "a  b"

    @pytest.mark.unit
    def test_leading_spaces_on_every_line(self):
        html = render_log("Success!\n  cd my-app\n    npm start")
        assert html == "Success!<br />&nbsp;&nbsp;cd my-app<br />&nbsp;&nbsp;&nbsp;&nbsp;npm start"

    @pytest.mark.unit
    def test_leading_spaces_inside_styled_span(self):
        html = render_log(f"{GREEN}  npm start{RESET}")
        assert "&nbsp;&nbsp;npm start</span>" in html

    @pytest.mark.unit
    def test_style_carries_across_lines(self):
        html = render_log(f"{GREEN}one\ntwo{RESET}")
        first, second = html.split("<br />")
        assert first.startswith("<span") and second.startswith("<span")

    @pytest.mark.unit
    def test_markup_is_escaped(self):
        assert render_log("<App /> & friends") == "&lt;App /&gt; &amp; friends"

    @pytest.mark.unit
    def test_malformed_sequence_does_not_raise(self):
        html = render_log("before \x1b[999;;xyz after")
        assert "before" in html

    @pytest.mark.unit
    def test_256_color(self):
        html = render_log("\x1b[38;5;208mwarning\x1b[0m")
        assert "color: #" in html
        assert "warning" in html


# ---------------------------------------------------------------------------
# render_terminal_output
# ---------------------------------------------------------------------------


class TestRenderTerminalOutput:
    @pytest.mark.unit
    def test_one_div_per_log(self):
        html = render_terminal_output(["one", "two", "three"])
        assert html.count('class="log"') == 3

    @pytest.mark.unit
    def test_empty_logs(self):
        html = render_terminal_output([])
        assert 'class="terminal-output"' in html
        assert 'class="log"' not in html

    @pytest.mark.unit
    def test_default_height(self):
        assert "height: 200px" in render_terminal_output(["x"])

    @pytest.mark.unit
    def test_custom_height(self):
        assert "height: 350px" in render_terminal_output(["x"], height=350)

    @pytest.mark.unit
    def test_scrollable_dark_panel(self):
        html = render_terminal_output(["x"])
        assert "overflow: auto" in html
        assert f"background-color: {COLORS['blue'][900]}" in html
        assert "font-family: monospace" in html

    @pytest.mark.unit
    def test_logs_rendered_in_order(self):
        html = render_terminal_output(["first", f"{RED}second{RESET}"])
        assert html.index("first") < html.index("second")
        assert "\x1b" not in html


# ---------------------------------------------------------------------------
# TerminalOutput
# ---------------------------------------------------------------------------


class TestTerminalOutput:
    @pytest.mark.unit
    def test_defaults(self):
        output = TerminalOutput()
        assert output.logs == []
        assert output.height == 200

    @pytest.mark.unit
    def test_append_and_render(self):
        output = TerminalOutput(height=300)
        output.append("Installing packages")
        output.append("Done")

        html = output.render()
        assert html == render_terminal_output(["Installing packages", "Done"], 300)

    @pytest.mark.unit
    def test_instances_do_not_share_logs(self):
        first, second = TerminalOutput(), TerminalOutput()
        first.append("x")
        assert second.logs == []

    @pytest.mark.unit
    def test_save(self, tmp_path: Path):
        output = TerminalOutput(logs=[f"{GREEN}ok{RESET}"])
        target = output.save(tmp_path / "logs" / "out.html")

        page = target.read_text(encoding="utf-8")
        assert page.startswith("<!DOCTYPE html>")
        assert output.render() in page
