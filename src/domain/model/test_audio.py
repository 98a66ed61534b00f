"""Tests for audio URL normalization."""

import unittest

from domain.model.audio import first_playable_audio, normalize_audio_url
from domain.model.entry import Phonetic, WordEntry


class TestNormalizeAudioUrl(unittest.TestCase):

    def test_protocol_relative_gets_https(self):
        self.assertEqual(
            normalize_audio_url("//ssl.gstatic.com/hello.mp3"),
            "https://ssl.gstatic.com/hello.mp3",
        )

    def test_https_passes_through(self):
        url = "https://api.dictionaryapi.dev/media/pronunciations/en/hello-uk.mp3"
        self.assertEqual(normalize_audio_url(url), url)

    def test_http_passes_through(self):
        self.assertEqual(normalize_audio_url("http://x/a.mp3"), "http://x/a.mp3")

    def test_surrounding_whitespace_trimmed(self):
        self.assertEqual(normalize_audio_url("  https://x/a.mp3 \n"), "https://x/a.mp3")
        self.assertEqual(normalize_audio_url(" //x/a.mp3"), "https://x/a.mp3")

    def test_unplayable_inputs(self):
        """Test absent, blank, relative and other-scheme inputs are rejected."""
        for raw in (None, "", "   ", "a.mp3", "/media/a.mp3", "ftp://x/a.mp3", "file:///a.mp3"):
            with self.subTest(raw=raw):
                self.assertIsNone(normalize_audio_url(raw))


class TestFirstPlayableAudio(unittest.TestCase):

    def test_first_playable_in_order(self):
        """Test phonetics without usable audio are skipped."""
        entry = WordEntry(word="hello", phonetics=[
            Phonetic(text="a"),
            Phonetic(audio="ftp://x/a.mp3"),
            Phonetic(audio="//x/b.mp3"),
            Phonetic(audio="https://x/c.mp3"),
        ])

        self.assertEqual(first_playable_audio(entry), "https://x/b.mp3")

    def test_no_playable_audio(self):
        self.assertIsNone(first_playable_audio(WordEntry(word="hello")))


if __name__ == '__main__':
    unittest.main()
