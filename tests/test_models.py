"""Unit tests for the models package and config resolution."""

import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from models import OracleConfig, ParityResult
from oracle.config import resolve_config
from oracle.errors import ConfigurationError


class TestResolveConfig(unittest.TestCase):
    """Tests resolve_config."""

    def test_env_key(self):
        with patch.dict(os.environ, {"OPENAI_API_KEY": "sk-env"}, clear=True):
            config = resolve_config()
        self.assertEqual(config.api_key, "sk-env")

    def test_no_key(self):
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ConfigurationError) as ctx:
                resolve_config(model="gpt-custom")
        self.assertIn("OPENAI_API_KEY", str(ctx.exception))

    def test_none_options_keep_defaults(self):
        config = resolve_config("sk-test", model=None, temperature=None)
        self.assertEqual(config.model, "gpt-3.5-turbo")
        self.assertEqual(config.temperature, 0.7)

    def test_zero_temperature_kept(self):
        self.assertEqual(resolve_config("sk-test", temperature=0.0).temperature, 0.0)

    def test_timeout_none_disables(self):
        self.assertIsNone(resolve_config("sk-test", timeout=None).timeout)
        self.assertEqual(resolve_config("sk-test").timeout, 600.0)

    def test_invalid_options(self):
        for options in ({"max_retries": -1}, {"max_tokens": 0}, {"unknown": 1}):
            with self.subTest(options=options):
                with self.assertRaises(ConfigurationError):
                    resolve_config("sk-test", **options)


class TestOracleConfig(unittest.TestCase):
    """Tests OracleConfig."""

    def test_frozen(self):
        config = OracleConfig(api_key="sk-test")
        with self.assertRaises(ValidationError):
            config.model = "other"

    def test_base_url_stripped(self):
        config = OracleConfig(api_key="sk-test", base_url="http://localhost:8000/v1/")
        self.assertEqual(config.base_url, "http://localhost:8000/v1")

    def test_key_hidden_from_repr(self):
        self.assertNotIn("sk-secret", repr(OracleConfig(api_key="sk-secret")))


class TestParityResult(unittest.TestCase):
    """Tests ParityResult."""

    def test_to_dict(self):
        result = ParityResult(number=4, is_even=True, confidence=0.9, reasoning="r", vibe="v")
        self.assertEqual(
            result.to_dict(),
            {"number": 4, "isEven": True, "confidence": 0.9, "reasoning": "r", "vibe": "v"},
        )

    def test_to_dict_without_vibe(self):
        result = ParityResult(number=3, is_even=False, confidence=1.0, reasoning="r")
        self.assertNotIn("vibe", result.to_dict())

    def test_confidence_bounds(self):
        with self.assertRaises(ValidationError):
            ParityResult(number=3, is_even=False, confidence=1.5, reasoning="r")
