"""Test runner: tracks results, prints per-test outcomes and the final summary."""

from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

from probity.formatting import escape_text

STR_SUCCESS = "PASS"
STR_FAIL = "FAIL"
STR_IGNORE = "IGNORE"
STR_OK = "OK"
STR_INFO = "INFO"
STR_SPACER = ". "
STR_BREAKER = "-----------------------"
STR_RESULTS_TESTS = " Tests "
STR_RESULTS_FAILURES = " Failures "
STR_RESULTS_IGNORED = " Ignored "


class TestAbort(Exception):
    """Stops the current test.

    ``detail`` is pre-rendered text describing the problem, ``msg`` an optional
    user message and ``line`` the line the problem is attributed to.
    """

    __test__ = False

    def __init__(self, detail: str = "", msg: Optional[str] = None, line: Optional[int] = None):
        super().__init__(detail if msg is None else f"{detail}{STR_SPACER}{msg}")
        self.detail = detail
        self.msg = msg
        self.line = line
        self.reported = False


class TestFailed(TestAbort):
    """An assertion failed."""

    __test__ = False


class TestIgnored(TestAbort):
    """The test asked to be ignored."""

    __test__ = False


class TestRunner:
    """Runs test functions and writes their results to a text stream."""

    __test__ = False

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        detail1_name: str = "Function",
        detail2_name: str = "Argument",
    ):
        self.stream = stream if stream is not None else sys.stdout
        self.detail1_name = detail1_name
        self.detail2_name = detail2_name
        self.begin(None)

    # ----------------------------------------------------------------- output

    def _write(self, text: str) -> None:
        self.stream.write(text)

    def _flush(self) -> None:
        flush = getattr(self.stream, "flush", None)
        if flush is not None:
            flush()

    def _results_begin(self, line: int) -> str:
        return (
            f"{escape_text(self.test_file)}:{int(line)}:"
            f"{escape_text(self.current_test_name)}:"
        )

    def _details_text(self) -> str:
        if not self.current_detail1:
            return ""
        text = f"{self.detail1_name} {escape_text(self.current_detail1)}"
        if self.current_detail2:
            text += f" {self.detail2_name} {escape_text(self.current_detail2)}"
        return text + STR_SPACER

    def _msg_text(self, msg: Optional[str]) -> str:
        if msg is None:
            return ""
        return STR_SPACER + self._details_text() + escape_text(msg)

    def _line_or_current(self, line: Optional[int]) -> int:
        return self.current_test_line if line is None else line

    @property
    def _stopped(self) -> bool:
        return self.current_test_failed or self.current_test_ignored

    # ---------------------------------------------------------------- control

    def begin(self, filename: Optional[str]) -> None:
        """Start a new run for ``filename``, clearing all counters."""
        self.test_file = filename
        self.current_test_name: Optional[str] = None
        self.current_test_line = 0
        self.number_of_tests = 0
        self.test_failures = 0
        self.test_ignores = 0
        self.current_test_failed = False
        self.current_test_ignored = False
        self.clear_details()

    def end(self) -> int:
        """Print the summary and return the number of failed tests."""
        self._write("\n" + STR_BREAKER + "\n")
        self._write(
            f"{self.number_of_tests}{STR_RESULTS_TESTS}"
            f"{self.test_failures}{STR_RESULTS_FAILURES}"
            f"{self.test_ignores}{STR_RESULTS_IGNORED}\n"
        )
        self._write((STR_OK if self.test_failures == 0 else STR_FAIL) + "\n")
        self._flush()
        return self.test_failures

    def set_test_file(self, filename: Optional[str]) -> None:
        """Change the file name reported for subsequent results."""
        self.test_file = filename

    def set_details(self, detail1: Optional[str] = None, detail2: Optional[str] = None) -> None:
        """Set the context details printed before a failure message."""
        self.current_detail1 = detail1
        self.current_detail2 = detail2

    def clear_details(self) -> None:
        """Forget any context details."""
        self.current_detail1: Optional[str] = None
        self.current_detail2: Optional[str] = None

    def _protect(self, *funcs: Optional[Callable[[], object]]) -> None:
        try:
            for func in funcs:
                if func is not None:
                    func()
        except TestAbort as abort:
            self.report_failure(abort)
        except Exception as exc:  # an error in test code counts as a failure
            self.report_failure(
                TestFailed(f" Unexpected {type(exc).__name__}: {escape_text(str(exc))}")
            )

    def run(
        self,
        func: Callable[[], object],
        name: str,
        line: int,
        set_up: Optional[Callable[[], object]] = None,
        tear_down: Optional[Callable[[], object]] = None,
    ) -> None:
        """Run one test with optional set-up and tear-down, then conclude it."""
        self.current_test_name = name
        self.current_test_line = int(line)
        self.number_of_tests += 1
        self.clear_details()
        self._protect(set_up, func)
        self._protect(tear_down)
        self.conclude_test()

    def fail(self, msg: Optional[str] = None, line: Optional[int] = None) -> None:
        """Fail the current test immediately."""
        if self._stopped:
            raise TestAbort()
        text = self._results_begin(self._line_or_current(line)) + STR_FAIL
        if msg is not None:
            text += ":" + self._details_text()
            if not msg.startswith(" "):
                text += " "
            text += escape_text(msg)
        self._write(text)
        self.current_test_failed = True
        self._flush()
        failure = TestFailed("", msg, line)
        failure.reported = True
        raise failure

    def ignore(self, msg: Optional[str] = None, line: Optional[int] = None) -> None:
        """Mark the current test as ignored and stop it."""
        if self._stopped:
            raise TestAbort()
        text = self._results_begin(self._line_or_current(line)) + STR_IGNORE
        if msg is not None:
            text += ": " + escape_text(msg)
        self._write(text)
        self.current_test_ignored = True
        self._flush()
        ignored = TestIgnored("", msg, line)
        ignored.reported = True
        raise ignored

    def message(self, msg: Optional[str] = None, line: Optional[int] = None) -> None:
        """Print an informational line without affecting the test result."""
        text = self._results_begin(self._line_or_current(line)) + STR_INFO
        if msg is not None:
            text += ": " + escape_text(msg)
        self._write(text + "\n")

    def conclude_test(self) -> None:
        """Count the finished test's outcome and end its output line."""
        if self.current_test_ignored:
            self.test_ignores += 1
        elif not self.current_test_failed:
            self._write(self._results_begin(self.current_test_line) + STR_SUCCESS)
        else:
            self.test_failures += 1
        self.current_test_failed = False
        self.current_test_ignored = False
        self._write("\n")
        self._flush()

    def report_failure(self, failure: TestAbort) -> None:
        """Record a raised failure or ignore, printing it unless already printed."""
        if failure.reported or self._stopped:
            return
        if isinstance(failure, TestIgnored):
            self.current_test_ignored = True
            failure.reported = True
            return
        if isinstance(failure, TestFailed):
            line = self._line_or_current(failure.line)
            self._write(
                self._results_begin(line)
                + STR_FAIL
                + ":"
                + failure.detail
                + self._msg_text(failure.msg)
            )
            self.current_test_failed = True
            failure.reported = True
            self._flush()