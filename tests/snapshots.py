"""
Failure diagnostics for layout tests.

Mix ``FailureSnapshotMixin`` into a TestCase that keeps its layouter in
``self.layouter``; when a test fails, the rectangles placed so far are saved
as ``FailedTests/FailedTest_<test name>.png`` next to this file.
"""

import os
import re

from tagcloud.visualizer import TagCloudVisualizer

FAILED_TESTS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "FailedTests")

# Characters Windows and POSIX reject in file names, plus control characters
INVALID_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


def safe_test_name(name: str) -> str:
    return INVALID_FILENAME_CHARS.sub("_", name)


class FailureSnapshotMixin:
    snapshot_dir = FAILED_TESTS_DIR

    def setUp(self):
        super().setUp()
        self.addCleanup(self._save_failure_snapshot)

    def _test_failed(self) -> bool:
        # unittest keeps the running outcome on the case until cleanups finish
        outcome = getattr(self, "_outcome", None)
        return outcome is not None and not outcome.success

    def _save_failure_snapshot(self) -> None:
        layouter = getattr(self, "layouter", None)
        if not self._test_failed() or layouter is None or not layouter.rectangles:
            return
        file_name = f"FailedTest_{safe_test_name(self._testMethodName)}.png"
        path = TagCloudVisualizer().save(layouter.rectangles, layouter.center,
                                         os.path.join(self.snapshot_dir, file_name))
        print(f"Tag cloud visualization saved to file: {path}")
