import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout

from PIL import Image

from snapshots import FailureSnapshotMixin, safe_test_name
from tagcloud.geometry import Point, Size
from tagcloud.layouter import CircularCloudLayouter


def layout_case(snapshot_dir):
    """Build a throwaway layout TestCase class writing snapshots to snapshot_dir."""

    class LayoutCase(FailureSnapshotMixin, unittest.TestCase):
        def setUp(self):
            super().setUp()
            self.layouter = CircularCloudLayouter(Point(0, 0))

        def test_fails_after_placing(self):
            self.layouter.layout([Size(20, 10), Size(10, 10), Size(15, 5)])
            self.fail("forced failure")

        def test_errors_after_placing(self):
            self.layouter.put_next_rectangle(Size(20, 10))
            raise RuntimeError("boom")

        def test_passes(self):
            self.layouter.layout([Size(20, 10), Size(10, 10)])

        def test_fails_before_placing(self):
            self.fail("nothing placed")

    LayoutCase.snapshot_dir = snapshot_dir
    return LayoutCase


class TestFailureSnapshots(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.snapshot_dir = os.path.join(self.tmp.name, "FailedTests")
        self.case_class = layout_case(self.snapshot_dir)

    def run_case(self, name):
        result = unittest.TestResult()
        out = io.StringIO()
        with redirect_stdout(out):
            self.case_class(name).run(result)
        return result, out.getvalue()

    def test_failed_test_saves_png(self):
        result, output = self.run_case("test_fails_after_placing")
        self.assertEqual(len(result.failures), 1)

        path = os.path.join(self.snapshot_dir, "FailedTest_test_fails_after_placing.png")
        self.assertTrue(os.path.exists(path))
        self.assertIn(path, output)
        with Image.open(path) as image:
            self.assertEqual(image.format, "PNG")
            self.assertEqual(image.width, image.height)

    def test_errored_test_saves_png(self):
        result, _ = self.run_case("test_errors_after_placing")
        self.assertEqual(len(result.errors), 1)
        self.assertTrue(os.path.exists(
            os.path.join(self.snapshot_dir, "FailedTest_test_errors_after_placing.png")))

    def test_passing_test_saves_nothing(self):
        result, output = self.run_case("test_passes")
        self.assertTrue(result.wasSuccessful())
        self.assertFalse(os.path.exists(self.snapshot_dir))
        self.assertEqual(output, "")

    def test_empty_layout_saves_nothing(self):
        result, _ = self.run_case("test_fails_before_placing")
        self.assertEqual(len(result.failures), 1)
        self.assertFalse(os.path.exists(self.snapshot_dir))

    def test_safe_test_name(self):
        self.assertEqual(safe_test_name("test_case[a/b:c]"), "test_case[a_b_c]")
        self.assertEqual(safe_test_name('x<y>"z"|?*'), "x_y__z____")
        self.assertEqual(safe_test_name("test_plain"), "test_plain")


if __name__ == '__main__':
    unittest.main()
