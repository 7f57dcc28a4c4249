"""Tests for the demonstration driver."""

from __future__ import annotations

import io

import pytest

from almanac import __main__ as cli
from almanac.core.codec import make


@pytest.fixture
def output(fixed_clock) -> str:
    out = io.StringIO()
    cli.run(out, fixed_clock)
    return out.getvalue()


class TestRun:
    """Tests for run()."""

    def test_now_section(self, output: str) -> None:
        """The current time is shown in several layouts."""
        assert "Thu, 2015-06-11 21:53:12.543294+02:00" in output
        assert " - 2015-06-11T21:53:12.543294+02:00" in output
        assert " - 2015-W24-4" in output
        assert " - Easter that year: 5.04.2015 CE" in output

    def test_span_from_easter(self, output: str) -> None:
        """A week, a day, an hour, a minute and a second after Easter."""
        assert " - 2015-04-13 22:54:13.543294 +02:00" in output

    def test_caesar_section(self, output: str) -> None:
        """The Ides of March in Roman and Easter that year."""
        assert " - March 15, XLIV BCE (Friday)" in output
        assert " - Easter that year: 7.04.44 BCE" in output
        assert "(difference of 3 weeks and 2 days)" in output

    def test_pearl_harbor_section(self, output: str) -> None:
        """The attack shown in three timezones."""
        assert " - 1941-12-07T07:48:00.000000-10:30" in output
        assert "at 7:48 a.m., on December 7, 1941 (Hawaii, UTC-10:30)" in output
        assert "at 3:18 a.m., on December 8, 1941 (Japan, UTC+09:00)" in output
        assert "at 1:18 p.m., on December 7, 1941 (Washington D.C., UTC-05:00)" in output
        assert "Attack on Pearl Harbor happened " in output


class TestMain:
    """Tests for the command line entry point."""

    @pytest.fixture(autouse=True)
    def frozen(self, monkeypatch: pytest.MonkeyPatch) -> None:
        fixed = make(2015, 6, 11, 21, 53, 12, 543294, 120)
        monkeypatch.setattr(cli, "now", lambda clock=None: fixed)

    def test_named_template(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--format accepts a template name."""
        assert cli.main(["--format", "date"]) == 0
        assert capsys.readouterr().out == "2015-06-11\n"

    def test_literal_template(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--format accepts a literal template."""
        assert cli.main(["--format", "%A %d, %Y"]) == 0
        assert capsys.readouterr().out == "June 11, 2015\n"

    def test_full_demo(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Without options the whole demonstration is printed."""
        assert cli.main([]) == 0
        out = capsys.readouterr().out
        assert "Assassination of Julius Caesar" in out
        assert "Attack on Pearl Harbor" in out
