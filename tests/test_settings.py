"""Tests for provisioning settings."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from resource_provisioner.settings import Settings


class TestSettings:
    def test_defaults(self):
        with patch.dict(os.environ, clear=True):
            config = Settings(_env_file=None)
        assert config.provision_attempts == 5
        assert config.provision_base_delay == 0.0
        assert config.provision_max_delay == 1.0

    def test_loaded_from_environment(self):
        with patch.dict(os.environ, {"PROVISION_ATTEMPTS": "7", "PROVISION_BASE_DELAY": "0.25"}):
            config = Settings(_env_file=None)
        assert config.provision_attempts == 7
        assert config.provision_base_delay == 0.25

    def test_loaded_from_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("PROVISION_ATTEMPTS=3\n")
        with patch.dict(os.environ, clear=True):
            config = Settings(_env_file=env_file)
        assert config.provision_attempts == 3

    def test_rejects_zero_attempts(self):
        with pytest.raises(ValidationError):
            Settings(provision_attempts=0)

    def test_frozen(self):
        config = Settings()
        with pytest.raises(ValidationError):
            config.provision_attempts = 9  # type: ignore[misc]
