"""Unit tests for favorites routes."""

import asyncio
import json
import unittest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from fastapi.testclient import TestClient
from api.main import app
from api.dependencies import get_session
from adapter.fake.audio_player import FakeAudioPlayer
from adapter.fake.connectivity import FakeConnectivity
from adapter.fake.dictionary import FakeDictionaryAdapter
from adapter.fake.key_value_store import FakeKeyValueStore
from domain.model.entry import WordEntry
from services.dictionary_session import DictionarySession
from services.favorites_store import FAVORITES_KEY, FavoritesStore


HELLO_PAYLOAD = {
    "word": "hello",
    "phonetics": [{"text": "həˈləʊ", "audio": "https://x/hello.mp3"}],
    "meanings": [{"partOfSpeech": "noun", "definitions": [{"definition": "a greeting."}]}],
}


class TestFavoritesRoutes(unittest.TestCase):
    """Test cases for /favorites endpoints."""

    def setUp(self):
        """Set up test client and a session over an in-memory store."""
        self.client = TestClient(app)
        self.backend = FakeKeyValueStore({
            FAVORITES_KEY: [WordEntry(word="zebra").to_json(), WordEntry(word="Apple").to_json()],
        })
        self.session = DictionarySession(
            dictionary=FakeDictionaryAdapter(),
            favorites_store=FavoritesStore(self.backend),
            player=FakeAudioPlayer(),
            connectivity=FakeConnectivity(),
        )
        asyncio.run(self.session.start())
        app.dependency_overrides[get_session] = lambda: self.session

    def tearDown(self):
        """Clean up dependency overrides."""
        app.dependency_overrides.clear()

    def test_list_sorted_by_word(self):
        """Test favorites are listed case-insensitively by word."""
        response = self.client.get("/favorites")

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["total"], 2)
        self.assertEqual([f["word"] for f in data["favorites"]], ["Apple", "zebra"])
        self.assertTrue(all(f["is_favorite"] for f in data["favorites"]))

    def test_toggle_adds_and_persists(self):
        response = self.client.post("/favorites/toggle", json=HELLO_PAYLOAD)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"word": "hello", "is_favorite": True})
        stored = [json.loads(s)["word"] for s in self.backend.data[FAVORITES_KEY]]
        self.assertEqual(stored, ["zebra", "Apple", "hello"])

        listed = self.client.get("/favorites").json()["favorites"]
        hello = next(f for f in listed if f["word"] == "hello")
        self.assertEqual(hello["meanings"][0]["partOfSpeech"], "noun")
        self.assertEqual(hello["audio_url"], "https://x/hello.mp3")

    def test_toggle_existing_removes(self):
        """Test toggling an entry with different casing unsaves it."""
        response = self.client.post("/favorites/toggle", json={"word": "apple"})

        self.assertEqual(response.json()["is_favorite"], False)
        self.assertFalse(self.session.is_favorite("Apple"))

    def test_toggle_tolerates_odd_fields(self):
        """Test wrong-typed fields in the body are decoded leniently."""
        response = self.client.post(
            "/favorites/toggle",
            json={"word": "mango", "meanings": "junk", "phonetics": [1, {"audio": "//x/m.mp3"}]},
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.session.get_favorite("mango").phonetics[0].audio, "//x/m.mp3")

    def test_toggle_without_word(self):
        response = self.client.post("/favorites/toggle", json={"meanings": []})

        self.assertEqual(response.status_code, 422)
        self.assertEqual(self.backend.writes, [])

    def test_status(self):
        self.assertTrue(self.client.get("/favorites/ZEBRA").json()["is_favorite"])
        self.assertFalse(self.client.get("/favorites/mango").json()["is_favorite"])

    def test_delete(self):
        response = self.client.delete("/favorites/zebra")

        self.assertEqual(response.status_code, 200)
        self.assertEqual([e.word for e in self.session.favorites()], ["Apple"])

    def test_delete_missing(self):
        response = self.client.delete("/favorites/mango")

        self.assertEqual(response.status_code, 404)

    def test_reload(self):
        """Test reload picks up changes made to storage directly."""
        self.backend.data[FAVORITES_KEY] = [WordEntry(word="kiwi").to_json()]

        response = self.client.post("/favorites/reload")

        self.assertEqual([f["word"] for f in response.json()["favorites"]], ["kiwi"])

    def test_save_failure_keeps_toggle(self):
        """Test a storage write failure does not fail the request."""
        self.backend.fail_writes = True

        response = self.client.post("/favorites/toggle", json={"word": "mango"})

        self.assertEqual(response.status_code, 200)
        self.assertTrue(self.session.is_favorite("mango"))


if __name__ == '__main__':
    unittest.main()
