"""
Tests for termdeck.export

Covers:
  - transcript rendering and cursor restoration
  - ansifilter invocation, HTML clean-up and failure reporting
"""

from __future__ import annotations

import subprocess
from unittest import mock

import pytest

from termdeck import export
from termdeck.deck import Deck
from termdeck.export import ExportError, export_html, render_transcript
from termdeck.parser import parse_script
from termdeck.ui.constants import PAGE_BREAK


def _deck() -> Deck:
    return Deck(parse_script(["one", "--", "more", "---", "two"]))


def _render(build) -> str:
    return "|".join(line.content for line in build.content)


class TestTranscript:

    def test_pages_show_first_build(self):
        deck = _deck()
        deck.jump_to(1)
        transcript = render_transcript(deck, _render)
        assert transcript == f"one</pre>\n{PAGE_BREAK}\n<pre>two"
        assert deck.slide_cursor == 1


class TestExportHtml:

    def test_runs_ansifilter_and_cleans_html(self, tmp_path):
        transcript = tmp_path / "presentation.txt"
        html = tmp_path / "presentation.html"

        def _fake_run(cmd, check, capture_output):
            assert cmd[0] == "ansifilter"
            assert f"--input={transcript}" in cmd
            assert transcript.read_text(encoding="utf-8").startswith("one")
            html.write_text("<pre>&lt;b&gt; &quot;x&quot; &amp;</pre>", encoding="utf-8")
            return subprocess.CompletedProcess(cmd, 0)

        with mock.patch.object(export.subprocess, "run", side_effect=_fake_run):
            path = export_html(_deck(), _render, str(transcript), str(html))
        assert path == str(html)
        assert html.read_text(encoding="utf-8") == '<pre><b> "x" &</pre>'
        assert not transcript.exists()

    def test_missing_ansifilter(self, tmp_path):
        transcript = tmp_path / "presentation.txt"
        with mock.patch.object(export.subprocess, "run", side_effect=FileNotFoundError("ansifilter")):
            with pytest.raises(ExportError):
                export_html(_deck(), _render, str(transcript), str(tmp_path / "out.html"))
        assert not transcript.exists()

    def test_ansifilter_failure(self, tmp_path):
        error = subprocess.CalledProcessError(1, ["ansifilter"])
        with mock.patch.object(export.subprocess, "run", side_effect=error):
            with pytest.raises(ExportError):
                export_html(_deck(), _render, str(tmp_path / "t.txt"), str(tmp_path / "out.html"))
