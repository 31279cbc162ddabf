#!/usr/bin/env python3
"""
Tests for the ytscribe command-line interface.
"""

import sys
import json
import tempfile
from pathlib import Path
from unittest import mock

# Add project root to path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import unittest

from typer.testing import CliRunner

from ytscribe import cli
from ytscribe.core.constants import ErrorKind

URL = "https://youtu.be/dQw4w9WgXcQ"

OK_RESPONSE = {
    "success": True,
    "transcript": "hello\nworld",
    "metadata": {"videoId": "dQw4w9WgXcQ", "subtitleType": "auto", "language": "en",
                 "wasAutoDetected": True},
}
FAIL_RESPONSE = {"success": False, "error": "Rate limited by YouTube",
                 "code": ErrorKind.RATE_LIMITED}


class CliTestCase(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.root = Path(self.tmpdir.name)
        self.runner = CliRunner()
        patches = [
            mock.patch("ytscribe.cli.setup_logging"),
            mock.patch("ytscribe.core.config.CONFIG_PATH", self.root / "config.json"),
            mock.patch("ytscribe.cli.TranscriptService.from_config"),
        ]
        mocks = [p.start() for p in patches]
        for p in patches:
            self.addCleanup(p.stop)
        self.service = mocks[2].return_value

    def tearDown(self):
        self.tmpdir.cleanup()


class TestTranscriptCommand(CliTestCase):

    def test_prints_transcript(self):
        self.service.get_transcript.return_value = OK_RESPONSE
        result = self.runner.invoke(cli.app, ["transcript", URL])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("hello\nworld", result.output)
        self.service.get_transcript.assert_called_once_with(
            URL, "auto", include_metadata=True, include_page_info=False)

    def test_json_output(self):
        self.service.get_transcript.return_value = OK_RESPONSE
        result = self.runner.invoke(cli.app, ["transcript", URL, "--json", "--lang", "en"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(json.loads(result.output), OK_RESPONSE)

    def test_writes_out_file(self):
        self.service.get_transcript.return_value = OK_RESPONSE
        out = self.root / "t" / "out.txt"
        result = self.runner.invoke(cli.app, ["transcript", URL, "--out", str(out)])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(out.read_text(encoding="utf-8"), "hello\nworld")

    def test_json_with_out_file_writes_both(self):
        self.service.get_transcript.return_value = OK_RESPONSE
        out = self.root / "json-out.txt"
        result = self.runner.invoke(cli.app, ["transcript", URL, "--json", "--out", str(out)])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(out.read_text(encoding="utf-8"), "hello\nworld")
        self.assertIn('"success": true', result.output)

    def test_failure_exit_code(self):
        self.service.get_transcript.return_value = FAIL_RESPONSE
        result = self.runner.invoke(cli.app, ["transcript", URL])
        self.assertEqual(result.exit_code, 1)


class TestBatchCommand(CliTestCase):

    def test_batch_writes_and_skips(self):
        self.service.get_transcript.return_value = OK_RESPONSE
        urls = self.root / "urls.txt"
        urls.write_text(f"{URL}\nnot a url\n", encoding="utf-8")
        out_dir = self.root / "out"

        result = self.runner.invoke(cli.app, ["batch", str(urls), "--out-dir", str(out_dir)])
        self.assertEqual(result.exit_code, 0)
        self.assertTrue((out_dir / "dQw4w9WgXcQ.txt").exists())

        result = self.runner.invoke(cli.app, ["batch", str(urls), "--out-dir", str(out_dir)])
        self.assertIn("already done", result.output)
        self.assertEqual(self.service.get_transcript.call_count, 1)


class TestConfigCommand(CliTestCase):

    def test_set_and_show(self):
        result = self.runner.invoke(cli.app, ["config", "default_language", "de"])
        self.assertEqual(result.exit_code, 0)
        result = self.runner.invoke(cli.app, ["config", "default_language"])
        self.assertEqual(result.output.strip(), "de")

    def test_unknown_key(self):
        result = self.runner.invoke(cli.app, ["config", "bogus", "1"])
        self.assertEqual(result.exit_code, 1)


if __name__ == "__main__":
    unittest.main()
