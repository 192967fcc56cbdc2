"""Tests for the demo command line entry."""

from __future__ import annotations

from sievestore.cli import main


class TestCli:
    def test_default_scenario(self, capsys):
        assert main(["--ttl", "0.2", "--wait", "0.3"]) == 0
        out = capsys.readouterr().out
        assert "❌ key1 not found" in out
        assert "✅ Found key2: longerString" in out
        assert "⌛ key2 expired" in out
        assert "key1 expired" not in out

    def test_custom_pairs_still_live(self, capsys):
        assert main(["alpha=abcdef", "--ttl", "30", "--wait", "0"]) == 0
        out = capsys.readouterr().out
        assert "✅ Found alpha: abcdef" in out
        assert "✅ alpha still live" in out

    def test_nothing_admitted_skips_wait(self, capsys):
        assert main(["a=x", "--ttl", "30"]) == 0
        out = capsys.readouterr().out
        assert "❌ a not found" in out
        assert "Waiting" not in out

    def test_longer_than_option(self, capsys):
        assert main(["a=xy", "--longer-than", "1", "--ttl", "30", "--wait", "0"]) == 0
        assert "✅ Found a: xy" in capsys.readouterr().out

    def test_malformed_pair(self, capsys):
        assert main(["novalue"]) == 2
        assert "Expected KEY=VALUE" in capsys.readouterr().out

    def test_invalid_ttl(self, capsys):
        assert main(["--ttl", "0"]) == 2
        assert "TTL must be" in capsys.readouterr().out

    def test_negative_wait(self, capsys):
        assert main(["--ttl", "30", "--wait", "-1"]) == 2
        assert "--wait must be >= 0" in capsys.readouterr().out
