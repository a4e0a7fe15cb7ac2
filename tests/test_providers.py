"""Unit tests for the Gemini and animCJK providers and server settings."""

import json
import os
import tempfile
import unittest
from unittest.mock import MagicMock, patch

import requests

from server.gemini_provider import GeminiProvider
from server.stroke_provider import AnimCJKStrokeProvider
from server.settings import load_config, get_api_key, get_model_name
from core.config import GEMINI_MODEL, STROKE_BASE_URL


VALID_RESPONSE = json.dumps({
    'mnemonic': 'An antenna on an A-frame house',
    'examples': [
        {'word': 'ame', 'meaning': 'rain'},
        {'word': 'asa', 'meaning': 'morning'},
        {'word': 'aka', 'meaning': 'red'}
    ]
})


class TestGeminiProvider(unittest.TestCase):
    """Tests for GeminiProvider response parsing and error handling."""

    def test_init_configures_client(self):
        with patch('server.gemini_provider.genai') as genai:
            provider = GeminiProvider('test-key', model_name='gemini-test')
        genai.configure.assert_called_once_with(api_key='test-key')
        genai.GenerativeModel.assert_called_once_with('gemini-test')
        self.assertEqual(provider.model_name, 'gemini-test')

    def test_execute_requests_json(self):
        with patch('server.gemini_provider.genai') as genai:
            provider = GeminiProvider('test-key')
        provider.model.generate_content.return_value = MagicMock(text=VALID_RESPONSE)

        text, ms = provider._execute('prompt')

        self.assertEqual(text, VALID_RESPONSE)
        self.assertGreaterEqual(ms, 0)
        kwargs = provider.model.generate_content.call_args.kwargs
        self.assertEqual(kwargs['generation_config'], {'response_mime_type': 'application/json'})
        self.assertEqual(kwargs['request_options'], {'timeout': provider.timeout})

    def test_get_mnemonic_valid_response(self):
        provider = GeminiProvider.__new__(GeminiProvider)
        with patch.object(provider, '_execute', return_value=(VALID_RESPONSE, 120)) as execute:
            data, ms = provider.get_mnemonic('あ', 'a')

        self.assertEqual(ms, 120)
        self.assertEqual(data['mnemonic'], 'An antenna on an A-frame house')
        self.assertEqual(len(data['examples']), 3)
        prompt = execute.call_args.args[0]
        self.assertIn('あ (a)', prompt)

    def test_get_mnemonic_with_code_fence(self):
        provider = GeminiProvider.__new__(GeminiProvider)
        fenced = f"Here you go:\n```json\n{VALID_RESPONSE}\n```"
        with patch.object(provider, '_execute', return_value=(fenced, 50)):
            data, ms = provider.get_mnemonic('あ', 'a')
        self.assertEqual(data['examples'][0], {'word': 'ame', 'meaning': 'rain'})

    def test_get_mnemonic_malformed_response(self):
        provider = GeminiProvider.__new__(GeminiProvider)
        with patch.object(provider, '_execute', return_value=("This is not JSON", 50)):
            with self.assertRaises(ValueError):
                provider.get_mnemonic('あ', 'a')

    def test_get_mnemonic_missing_keys(self):
        provider = GeminiProvider.__new__(GeminiProvider)
        with patch.object(provider, '_execute', return_value=('{"mnemonic": "only this"}', 50)):
            with self.assertRaises(ValueError):
                provider.get_mnemonic('あ', 'a')

    def test_get_mnemonic_transport_error_propagates(self):
        provider = GeminiProvider.__new__(GeminiProvider)
        with patch.object(provider, '_execute', side_effect=ConnectionError("offline")):
            with self.assertRaises(ConnectionError):
                provider.get_mnemonic('あ', 'a')

    def test_sanitize_response(self):
        provider = GeminiProvider.__new__(GeminiProvider)
        self.assertEqual(provider._sanitize_response('noise {"a": 1} trailing'), '{"a": 1}')


def make_response(status_code: int, text: str = '') -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


class TestAnimCJKStrokeProvider(unittest.TestCase):
    """Tests for AnimCJKStrokeProvider."""

    def setUp(self):
        self.provider = AnimCJKStrokeProvider()
        self.provider.session = MagicMock()

    def test_candidate_urls_for_kana(self):
        urls = self.provider.candidate_urls('あ')
        self.assertEqual(urls, [
            f'{STROKE_BASE_URL}/svgsJaKana/12354.svg',
            f'{STROKE_BASE_URL}/svgsJa/12354.svg'
        ])

    def test_candidate_urls_for_kanji(self):
        urls = self.provider.candidate_urls('日')
        self.assertEqual(urls[0], f'{STROKE_BASE_URL}/svgsJa/26085.svg')

    def test_candidate_urls_empty(self):
        self.assertEqual(self.provider.candidate_urls(''), [])

    def test_first_hit_wins(self):
        self.provider.session.get.return_value = make_response(200, '<svg>kana</svg>')
        self.assertEqual(self.provider.get_diagram('あ'), '<svg>kana</svg>')
        self.assertEqual(self.provider.session.get.call_count, 1)

    def test_falls_back_to_second_candidate(self):
        self.provider.session.get.side_effect = [
            make_response(404),
            make_response(200, '<svg>kanji folder</svg>')
        ]
        self.assertEqual(self.provider.get_diagram('あ'), '<svg>kanji folder</svg>')

    def test_not_found(self):
        self.provider.session.get.return_value = make_response(404)
        self.assertIsNone(self.provider.get_diagram('あ'))

    def test_network_error_is_not_found(self):
        self.provider.session.get.side_effect = requests.ConnectionError("offline")
        self.assertIsNone(self.provider.get_diagram('あ'))

    def test_non_svg_body_is_skipped(self):
        self.provider.session.get.side_effect = [
            make_response(200, '<html>error page</html>'),
            make_response(404)
        ]
        self.assertIsNone(self.provider.get_diagram('あ'))


class TestSettings(unittest.TestCase):
    """Tests for API key and model lookup."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self.config_file = os.path.join(self.tmpdir.name, 'config.json')
        self.missing_file = os.path.join(self.tmpdir.name, 'missing.json')

    def write_config(self, config: dict):
        with open(self.config_file, 'w') as f:
            json.dump(config, f)

    def test_load_config_missing_raises(self):
        with self.assertRaises(FileNotFoundError):
            load_config(self.missing_file)

    def test_api_key_from_env(self):
        self.write_config({'gemini_api_key': 'file-key'})
        with patch.dict(os.environ, {'GEMINI_API_KEY': 'env-key'}):
            self.assertEqual(get_api_key(self.config_file), 'env-key')

    def test_api_key_from_file(self):
        self.write_config({'gemini_api_key': 'file-key'})
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(get_api_key(self.config_file), 'file-key')

    def test_api_key_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertIsNone(get_api_key(self.missing_file))

    def test_model_name_default(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(get_model_name(self.missing_file), GEMINI_MODEL)

    def test_model_name_from_file(self):
        self.write_config({'gemini_model': 'gemini-2.5-pro'})
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(get_model_name(self.config_file), 'gemini-2.5-pro')


if __name__ == '__main__':
    unittest.main()
