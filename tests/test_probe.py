import os
import tempfile
import unittest
from unittest.mock import patch, MagicMock

from PIL import Image

from media_saver.services import probe as probe_svc
from media_saver.services.errors import ProbeError, UnsupportedMediaError


class TestProbe(unittest.TestCase):

    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.dir = tmp.name

    def _touch(self, name, content=b"junk"):
        path = os.path.join(self.dir, name)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'wb') as f:
            f.write(content)
        return path

    @patch('media_saver.services.probe.AudioSegment')
    def test_probe_audio_reads_duration_and_format(self, audio_segment):
        segment = MagicMock()
        segment.__len__.return_value = 125_900  # milliseconds
        segment.frame_rate = 44100
        segment.channels = 2
        audio_segment.from_file.return_value = segment

        info = probe_svc.probe_file(self._touch('talk.MP3'))

        self.assertEqual(info.category, 'audio')
        self.assertEqual(info.duration_seconds, 125)
        self.assertEqual(info.sample_rate, 44100)
        self.assertEqual(info.channels, 2)
        self.assertEqual(info.error, "")

    @patch('media_saver.services.probe.VideoFileClip')
    def test_probe_video_closes_clip(self, video_file_clip):
        clip = MagicMock()
        clip.size = (1920, 1080)
        clip.duration = 61.9
        video_file_clip.return_value = clip

        info = probe_svc.probe_file(self._touch('clip.mp4'))

        self.assertEqual(info.category, 'video')
        self.assertEqual(info.duration_seconds, 61)
        self.assertEqual((info.width, info.height), (1920, 1080))
        clip.close.assert_called_once()

    def test_probe_image_reads_size(self):
        path = os.path.join(self.dir, 'pic.png')
        Image.new('RGB', (4, 3)).save(path)

        info = probe_svc.probe_file(path)

        self.assertEqual(info.category, 'image')
        self.assertEqual((info.width, info.height), (4, 3))
        self.assertIsNone(info.duration_seconds)

    def test_probe_unsupported_extension(self):
        with self.assertRaises(UnsupportedMediaError):
            probe_svc.probe_file(self._touch('notes.txt'))

    @patch('media_saver.services.probe.AudioSegment')
    def test_probe_failure_raises_typed_error(self, audio_segment):
        audio_segment.from_file.side_effect = RuntimeError("ffmpeg missing")

        with self.assertRaises(ProbeError):
            probe_svc.probe_file(self._touch('broken.wav'))

    @patch('media_saver.services.probe.AudioSegment')
    def test_inspect_directory_records_errors_and_skips_unsupported(self, audio_segment):
        audio_segment.from_file.side_effect = RuntimeError("bad header")
        self._touch('notes.txt')
        self._touch('sub/broken.ogg')
        Image.new('RGB', (2, 2)).save(os.path.join(self.dir, 'sub', 'cover.jpg'))

        infos = probe_svc.inspect_directory(self.dir)

        by_name = {os.path.basename(i.path): i for i in infos}
        self.assertEqual(sorted(by_name), ['broken.ogg', 'cover.jpg'])
        self.assertIn("bad header", by_name['broken.ogg'].error)
        self.assertEqual(by_name['cover.jpg'].error, "")

    def test_total_duration_ignores_unknown(self):
        infos = [
            probe_svc.MediaInfo(path='a.mp3', category='audio', duration_seconds=90),
            probe_svc.MediaInfo(path='b.png', category='image', width=1, height=1),
            probe_svc.MediaInfo(path='c.mp4', category='video', duration_seconds=30),
        ]

        self.assertEqual(probe_svc.total_duration(infos), 120)
        self.assertEqual(probe_svc.total_duration([]), 0)


if __name__ == "__main__":
    unittest.main()
