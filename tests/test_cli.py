"""Tests for the command-line interface."""

import json

import pytest

from buchicheck.cli import EXIT_ACCEPTED, EXIT_INVALID, EXIT_REJECTED, main
from buchicheck.samples import SAMPLES, get_sample


class TestVerdicts:
    def test_accepted(self, capsys):
        assert main(["--sample", "pure-b", "b^w"]) == EXIT_ACCEPTED
        out = capsys.readouterr().out
        assert 'ACCEPTED: "b^w" is accepted.' in out
        assert "cycle:  q0" in out

    def test_rejected(self, capsys):
        assert main(["--sample", "pure-b", "b^w", "ab^w"]) == EXIT_REJECTED
        out = capsys.readouterr().out
        assert "REJECTED" in out
        assert "entry:  q_bad" in out

    def test_invalid_word(self, capsys):
        assert main(["--sample", "pure-b", "ab"]) == EXIT_INVALID
        assert "WARNING" in capsys.readouterr().out

    def test_words_are_stripped(self, capsys):
        assert main(["--sample", "pure-b", "--json", " b^w ", " ab "]) == EXIT_INVALID
        data = json.loads(capsys.readouterr().out)
        assert [item["word"] for item in data] == ["b^w", "ab"]

    def test_no_cycle_line(self, tmp_path, capsys):
        path = tmp_path / "dba.txt"
        path.write_text(
            "states: q0\nalphabet: a, b\nstart: q0\naccept: q0\ntransitions:\nq0, b -> q0\n",
            encoding="utf-8",
        )
        assert main(["-a", str(path), "a^w"]) == EXIT_REJECTED
        assert "cycle:  -" in capsys.readouterr().out

    def test_json(self, capsys):
        assert main(["--sample", "ab-cycle", "--json", "(ab)^w", "b^w"]) == EXIT_REJECTED
        data = json.loads(capsys.readouterr().out)
        assert [item["status"] for item in data] == ["accepted", "rejected"]
        assert data[0]["evaluation"]["cycle"] == ["q0", "q1"]


class TestAutomatonSources:
    def test_file(self, tmp_path, capsys):
        path = tmp_path / "dba.txt"
        path.write_text(get_sample("pure-b").source, encoding="utf-8")
        assert main(["-a", str(path), "b^w"]) == EXIT_ACCEPTED

    def test_missing_file(self, tmp_path, capsys):
        assert main(["-a", str(tmp_path / "nope.txt"), "b^w"]) == EXIT_INVALID
        assert "Cannot read" in capsys.readouterr().err

    def test_invalid_definition(self, tmp_path, capsys):
        path = tmp_path / "dba.txt"
        path.write_text("states: q0\n", encoding="utf-8")
        assert main(["-a", str(path), "a^w"]) == EXIT_INVALID
        assert "No alphabet declared" in capsys.readouterr().err

    def test_unknown_sample(self, capsys):
        assert main(["--sample", "nope", "a^w"]) == EXIT_INVALID
        assert "Unknown sample: nope" in capsys.readouterr().err

    def test_no_automaton(self, capsys):
        assert main(["a^w"]) == EXIT_INVALID

    def test_no_words(self, capsys):
        assert main(["--sample", "pure-b"]) == EXIT_INVALID
        assert "no words to check" in capsys.readouterr().err


class TestOtherCommands:
    def test_list_samples(self, capsys):
        assert main(["--list-samples"]) == EXIT_ACCEPTED
        out = capsys.readouterr().out
        for sample in SAMPLES:
            assert sample.id in out

    @pytest.mark.parametrize(
        "kind,marker",
        [("tikz", r"\begin{tikzpicture}"), ("formal", r"\begin{align*}")],
    )
    def test_export(self, capsys, kind, marker):
        assert main(["--sample", "ab-cycle", "--export", kind]) == EXIT_ACCEPTED
        assert marker in capsys.readouterr().out

    def test_closure_limit(self, capsys):
        code = main(["--sample", "baseline", "--max-closure-size", "2", "(a|b)*a^w"])
        assert code == EXIT_REJECTED
        assert "Gave up" in capsys.readouterr().out

    def test_bad_closure_limit(self, capsys):
        assert main(["--sample", "baseline", "--max-closure-size", "0", "a^w"]) == EXIT_INVALID
