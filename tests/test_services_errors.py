import io
import unittest
from contextlib import redirect_stderr
from unittest.mock import patch

from media_saver.services import copier
from media_saver.services.errors import CopyError, ProbeError, UnsupportedMediaError


class TestServicesErrors(unittest.TestCase):
    @patch("shutil.copyfile", side_effect=OSError(28, "No space left on device"))
    def test_low_level_copy_raises_typed_error(self, _):
        with self.assertRaises(CopyError) as ctx:
            copier._copy_bytes("in.mp3", "out/in.mp3")
        self.assertIsInstance(ctx.exception.cause, OSError)
        self.assertEqual(ctx.exception.source, "in.mp3")
        self.assertIn("No space left", str(ctx.exception))

    @patch("shutil.copyfile", side_effect=OSError(18, "Invalid cross-device link"))
    def test_copy_file_reports_instead_of_raising(self, _):
        with redirect_stderr(io.StringIO()):
            with self.assertLogs("media_saver.services.copier", level="ERROR"):
                self.assertFalse(copier.copy_file("in.mp3", "out.mp3"))

    def test_unsupported_media_is_a_probe_error(self):
        self.assertTrue(issubclass(UnsupportedMediaError, ProbeError))


if __name__ == "__main__":
    unittest.main()
