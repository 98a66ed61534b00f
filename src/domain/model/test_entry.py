"""Tests for dictionary entry decoding and encoding."""

import json
import unittest

from domain.model.entry import Definition, Meaning, Phonetic, WordEntry


HELLO_PAYLOAD = {
    "word": "hello",
    "phonetic": "həˈləʊ",
    "phonetics": [
        {"text": "həˈləʊ", "audio": "//ssl.gstatic.com/dictionary/static/sounds/20200429/hello--_gb_1.mp3"},
        {"text": "hɛˈləʊ"},
    ],
    "origin": "early 19th century: variant of earlier hollo.",
    "meanings": [
        {
            "partOfSpeech": "exclamation",
            "definitions": [
                {
                    "definition": "used as a greeting or to begin a phone conversation.",
                    "example": "hello there, Katie!",
                    "synonyms": [],
                    "antonyms": [],
                }
            ],
        },
        {
            "partOfSpeech": "noun",
            "definitions": [
                {
                    "definition": "an utterance of ‘hello’; a greeting.",
                    "example": "she was getting polite nods and hellos from people",
                    "synonyms": ["greeting"],
                    "antonyms": [],
                }
            ],
            "synonyms": ["greeting", "salutation"],
        },
    ],
}


class TestWordEntryFromDict(unittest.TestCase):
    """Test tolerant decoding of dictionaryapi.dev entries."""

    def test_full_entry(self):
        """Test a complete payload decodes every field in order."""
        entry = WordEntry.from_dict(HELLO_PAYLOAD)

        self.assertEqual(entry.word, "hello")
        self.assertEqual(entry.phonetic, "həˈləʊ")
        self.assertEqual(len(entry.phonetics), 2)
        self.assertIsNone(entry.phonetics[1].audio)
        self.assertEqual(entry.origin, "early 19th century: variant of earlier hollo.")
        self.assertEqual([m.part_of_speech for m in entry.meanings], ["exclamation", "noun"])
        self.assertEqual(entry.meanings[0].definitions[0].example, "hello there, Katie!")
        self.assertEqual(entry.meanings[1].synonyms, ["greeting", "salutation"])

    def test_missing_fields_use_defaults(self):
        """Test an empty object decodes to an empty entry."""
        entry = WordEntry.from_dict({})

        self.assertEqual(entry.word, "")
        self.assertIsNone(entry.phonetic)
        self.assertEqual(entry.phonetics, [])
        self.assertIsNone(entry.origin)
        self.assertEqual(entry.meanings, [])

    def test_wrong_types_fall_back(self):
        """Test wrong-typed fields decode as absent."""
        entry = WordEntry.from_dict({
            "word": 42,
            "phonetic": ["x"],
            "phonetics": "not a list",
            "origin": {"a": 1},
            "meanings": None,
        })

        self.assertEqual(entry.word, "")
        self.assertIsNone(entry.phonetic)
        self.assertEqual(entry.phonetics, [])
        self.assertIsNone(entry.origin)
        self.assertEqual(entry.meanings, [])

    def test_malformed_list_elements_are_dropped(self):
        """Test non-object elements in nested lists are skipped individually."""
        entry = WordEntry.from_dict({
            "word": "run",
            "phonetics": ["bad", {"audio": "https://x/run.mp3"}, 3],
            "meanings": [
                None,
                {"partOfSpeech": "verb", "definitions": ["bad", {"definition": "move fast"}]},
            ],
        })

        self.assertEqual(len(entry.phonetics), 1)
        self.assertEqual(entry.phonetics[0].audio, "https://x/run.mp3")
        self.assertEqual(len(entry.meanings), 1)
        self.assertEqual(len(entry.meanings[0].definitions), 1)
        self.assertEqual(entry.meanings[0].definitions[0].definition, "move fast")

    def test_blank_optional_strings_become_none(self):
        """Test blank phonetic text and audio decode as None."""
        phonetic = Phonetic.from_dict({"text": "  ", "audio": ""})

        self.assertIsNone(phonetic.text)
        self.assertIsNone(phonetic.audio)

    def test_synonyms_drop_non_strings_and_duplicates(self):
        """Test synonym lists keep first occurrence order."""
        definition = Definition.from_dict({
            "definition": "d",
            "synonyms": ["a", 1, "b", "a", None, " "],
            "antonyms": "nope",
        })

        self.assertEqual(definition.synonyms, ["a", "b"])
        self.assertEqual(definition.antonyms, [])

    def test_key_is_lowercase_word(self):
        """Test key lowercases the word for favorites lookups."""
        self.assertEqual(WordEntry(word="Hello").key, "hello")


class TestWordEntryJson(unittest.TestCase):
    """Test JSON encoding used by the favorites store."""

    def test_to_dict_uses_api_field_names(self):
        """Test partOfSpeech is written in API casing and None stays null."""
        entry = WordEntry(word="hi", meanings=[Meaning(part_of_speech="noun")])

        data = entry.to_dict()

        self.assertEqual(data["meanings"][0]["partOfSpeech"], "noun")
        self.assertIsNone(data["phonetic"])
        self.assertIsNone(data["origin"])

    def test_json_roundtrip_preserves_entry(self):
        """Test an encoded entry decodes back to an equal entry."""
        entry = WordEntry.from_dict(HELLO_PAYLOAD)

        self.assertEqual(WordEntry.from_json(entry.to_json()), entry)

    def test_to_json_keeps_non_ascii(self):
        """Test IPA characters are written unescaped."""
        entry = WordEntry(word="hello", phonetic="həˈləʊ")

        self.assertIn("həˈləʊ", entry.to_json())

    def test_from_json_invalid(self):
        """Test invalid JSON returns None."""
        self.assertIsNone(WordEntry.from_json("{not json"))

    def test_from_json_non_object(self):
        """Test JSON that is not an object returns None."""
        self.assertIsNone(WordEntry.from_json(json.dumps(["hello"])))
        self.assertIsNone(WordEntry.from_json("null"))


if __name__ == '__main__':
    unittest.main()
