"""Tests for BracketScanner state and traversal policies."""

import logging

import pytest

from pairbrackets import BracketScanner, BracketTypeMode, ScanPolicy, ScanStackEntry


class TestScannerState:
    """Scanner construction and result caching."""

    def test_default_policy_is_lenient(self) -> None:
        assert BracketScanner("()").policy is ScanPolicy.LENIENT

    def test_scan_is_cached(self) -> None:
        scanner = BracketScanner("(a)")
        assert scanner.scan() is scanner.scan()

    def test_text_is_not_mutated(self) -> None:
        text = "([)]"
        BracketScanner(text, policy=ScanPolicy.STRICT).scan()
        assert text == "([)]"

    def test_instances_do_not_share_state(self) -> None:
        first = BracketScanner("((").scan()
        second = BracketScanner("))").scan()
        assert len(first.unclosed) == 2
        assert second.unclosed == ()
        assert second.unmatched == (0, 1)

    def test_union_of_modes(self) -> None:
        scanner = BracketScanner("{(<[]>)}", (BracketTypeMode.ROUND, BracketTypeMode.SQUARE))
        assert scanner.scan().pairs == ((3, 4), (1, 6))

    def test_no_modes_recognizes_nothing(self) -> None:
        result = BracketScanner("([{<>}])", ()).scan()
        assert result.pairs == ()
        assert result.balanced is True


class TestLenientPolicy:
    """Unmatched closers are skipped without touching the stack."""

    def test_mismatched_closer_keeps_opener(self) -> None:
        result = BracketScanner("(])").scan()
        assert result.pairs == ((0, 2),)
        assert result.unmatched == (1,)

    def test_closer_on_empty_stack(self) -> None:
        result = BracketScanner("]()").scan()
        assert result.pairs == ((1, 2),)
        assert result.unmatched == (0,)

    def test_unclosed_entries_bottom_to_top(self) -> None:
        result = BracketScanner("(a[b{").scan()
        assert result.unclosed == (
            ScanStackEntry("(", 0),
            ScanStackEntry("[", 2),
            ScanStackEntry("{", 4),
        )


class TestStrictPolicy:
    """The first unmatched closer ends the scan."""

    def test_stops_at_mismatch(self) -> None:
        result = BracketScanner("()(]()", policy=ScanPolicy.STRICT).scan()
        assert result.mismatch == 3
        # Nothing after the mismatch is scanned
        assert result.pairs == ((0, 1),)
        assert result.unclosed == (ScanStackEntry("(", 2),)
        assert result.balanced is False

    def test_balanced(self) -> None:
        result = BracketScanner("<[{()}]>", policy=ScanPolicy.STRICT).scan()
        assert result.mismatch is None
        assert result.balanced is True
        assert len(result.pairs) == 4

    def test_unclosed_without_mismatch(self) -> None:
        result = BracketScanner("((", policy=ScanPolicy.STRICT).scan()
        assert result.mismatch is None
        assert result.balanced is False


class TestLogging:
    """The scanner logs skipped and stopping closers at DEBUG."""

    def test_logger_namespace(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="pairbrackets"):
            BracketScanner(")(").scan()
        assert all(r.name == "pairbrackets.scanner" for r in caplog.records)
        messages = [r.getMessage() for r in caplog.records]
        assert "Skipping unmatched ')' at offset 0" in messages
        assert "1 opener(s) left unclosed" in messages

    def test_strict_logs_stop(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="pairbrackets"):
            BracketScanner("(]", policy=ScanPolicy.STRICT).scan()
        assert "Unmatched ']' at offset 1, stopping scan" in caplog.text

    def test_silent_when_balanced(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="pairbrackets"):
            BracketScanner("(a)").scan()
        assert caplog.records == []


class TestGetLogger:
    """get_logger() keeps every logger under the package namespace."""

    def test_package_module_name_kept(self) -> None:
        from pairbrackets.utils import get_logger

        assert get_logger("pairbrackets.scanner").name == "pairbrackets.scanner"
        assert get_logger("pairbrackets").name == "pairbrackets"

    def test_foreign_name_nested(self) -> None:
        from pairbrackets.utils import get_logger

        assert get_logger("reports").name == "pairbrackets.reports"
        assert get_logger("pairbracketsx").name == "pairbrackets.pairbracketsx"
