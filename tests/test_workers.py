import json
import os
import shutil
import tempfile
import unittest
from unittest.mock import patch

from ai.client import LLMClient, TranslationError
from core.workers import STATUS_FAILED, STATUS_UP_TO_DATE, STATUS_UPDATED, TranslationWorker
from fakes import FakeStreamResponse, streamed_json


class _FakeClient:
    def __init__(self, results):
        self.results = results
        self.calls = []

    def translate(self, diff, target_lang, reasoning=False):
        self.calls.append((dict(diff), target_lang, reasoning))
        result = self.results[target_lang]
        if isinstance(result, Exception):
            raise result
        return result


class TestTranslationWorker(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def _path(self, lang):
        return os.path.join(self.test_dir, f"{lang}.json")

    def _write(self, lang, content):
        with open(self._path(lang), "w", encoding="utf-8") as f:
            f.write(content)

    def _read(self, lang):
        with open(self._path(lang), encoding="utf-8") as f:
            return json.load(f)

    def test_streamed_translation_written_to_new_file(self):
        client = LLMClient(api_url="http://localhost:11434/v1/chat/completions")
        response = FakeStreamResponse(streamed_json({"a": "Y"}))
        with patch("ai.client.requests.post", return_value=response):
            results = TranslationWorker({"a": "X"}, client, ["L"], self.test_dir).run()

        self.assertEqual(self._read("L"), {"a": "Y"})
        self.assertEqual(results[0].status, STATUS_UPDATED)
        self.assertEqual(results[0].translated_keys, 1)

    def test_only_missing_keys_are_sent_and_merged(self):
        self._write("nl", json.dumps({"a": "existing"}))
        client = _FakeClient({"nl": {"b": "translated Z"}})

        TranslationWorker({"a": "X", "b": "Z"}, client, ["nl"], self.test_dir).run()

        self.assertEqual(client.calls, [({"b": "Z"}, "nl", False)])
        self.assertEqual(self._read("nl"), {"a": "existing", "b": "translated Z"})

    def test_up_to_date_makes_no_call_and_keeps_file(self):
        original = '{"a":"bestaand"}'
        self._write("nl", original)
        client = LLMClient()
        with patch("ai.client.requests.post") as post:
            results = TranslationWorker({"a": "X"}, client, ["nl"], self.test_dir).run()

        post.assert_not_called()
        self.assertEqual(results[0].status, STATUS_UP_TO_DATE)
        with open(self._path("nl"), encoding="utf-8") as f:
            self.assertEqual(f.read(), original)

    def test_corrupt_existing_output_is_retranslated(self):
        self._write("fr", "{corrupt")
        client = _FakeClient({"fr": {"a": "Xfr"}})
        TranslationWorker({"a": "X"}, client, ["fr"], self.test_dir).run()
        self.assertEqual(client.calls[0][0], {"a": "X"})
        self.assertEqual(self._read("fr"), {"a": "Xfr"})

    def test_failure_does_not_stop_other_languages(self):
        client = _FakeClient({"nl": TranslationError("boom"), "fr": {"a": "Xfr"}})
        with self.assertLogs("core.workers", level="ERROR") as logs:
            results = TranslationWorker({"a": "X"}, client, ["nl", "fr"], self.test_dir).run()

        self.assertEqual([r.status for r in results], [STATUS_FAILED, STATUS_UPDATED])
        self.assertEqual(results[0].error, "boom")
        self.assertIn('"nl"', logs.output[0])
        self.assertFalse(os.path.exists(self._path("nl")))
        self.assertEqual(self._read("fr"), {"a": "Xfr"})

    def test_reasoning_flag_is_forwarded(self):
        client = _FakeClient({"de": {"a": "Xde"}})
        TranslationWorker({"a": "X"}, client, ["de"], self.test_dir, reasoning=True).run()
        self.assertTrue(client.calls[0][2])

    def test_missing_out_dir_is_created(self):
        out_dir = os.path.join(self.test_dir, "locales")
        client = _FakeClient({"es": {"a": "Xes"}})
        TranslationWorker({"a": "X"}, client, ["es"], out_dir).run()
        self.assertTrue(os.path.exists(os.path.join(out_dir, "es.json")))


if __name__ == "__main__":
    unittest.main()
