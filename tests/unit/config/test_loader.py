"""Tests for the configuration loader."""

import logging

import pytest
from pathlib import Path

from midi_mixer.config.default_source import DefaultConfigSource
from midi_mixer.config.loader import ConfigLoader
from midi_mixer.config.models import ProfileConfig
from midi_mixer.constants import DEFAULT_CONTROLLER_NAME
from midi_mixer.exceptions import ConfigValidationError, YAMLConfigError


class TestConfigLoader:
    """Tests for strict loading."""

    def test_load_from_yaml(self, write_profile, valid_profile_yaml: str) -> None:
        config = ConfigLoader.from_path(write_profile(valid_profile_yaml)).load()

        assert isinstance(config, ProfileConfig)
        assert config.midi_controller_name == "nanoKONTROL2"
        assert config.groups["music"].volume_control == ["fader_1"]

    def test_from_path_none_uses_defaults(self) -> None:
        loader = ConfigLoader.from_path(None)

        assert loader.source_description == DefaultConfigSource().source_description
        assert loader.load() == ProfileConfig()

    def test_from_path_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(YAMLConfigError):
            ConfigLoader.from_path(tmp_path / "missing.yaml")

    def test_validation_error_is_wrapped(self, write_profile) -> None:
        """Test that pydantic errors surface as ConfigValidationError."""
        path = write_profile("controls:\n  faders:\n    f:\n      channel: 20\n      control: 1\n")

        with pytest.raises(ConfigValidationError) as exc_info:
            ConfigLoader.from_path(path).load()

        assert exc_info.value.errors is not None
        assert str(path) in str(exc_info.value)

    def test_uses_source_protocol(self, mocker) -> None:
        source = mocker.Mock()
        source.load.return_value = ({"mapping": {"a": "b"}}, 1)
        source.source_description = "test source"

        config = ConfigLoader(source).load()

        assert config.mapping == {"a": "b"}
        source.load.assert_called_once_with()


class TestLoadOrDefault:
    """Tests for the fallback to built-in defaults."""

    def test_valid_file(self, write_profile, valid_profile_yaml: str) -> None:
        config = ConfigLoader.load_or_default(write_profile(valid_profile_yaml))

        assert config.mapping == {"music": "spotify"}

    def test_no_path(self) -> None:
        assert ConfigLoader.load_or_default(None) == ProfileConfig()

    @pytest.mark.parametrize("content", [
        "",
        "controls: [1, 2]\n",
        "controls:\n  faders: {f: {channel: 99, control: 0}}\n",
        "key: [unclosed\n",
    ])
    def test_malformed_file_falls_back(self, write_profile, caplog, content: str) -> None:
        """Test that a malformed profile is replaced by the defaults with a warning."""
        with caplog.at_level(logging.WARNING, logger="midi_mixer.config.loader"):
            config = ConfigLoader.load_or_default(write_profile(content))

        assert config.midi_controller_name == DEFAULT_CONTROLLER_NAME
        assert config.groups == {}
        assert "falling back to built-in defaults" in caplog.text

    def test_missing_file_falls_back(self, tmp_path: Path) -> None:
        config = ConfigLoader.load_or_default(tmp_path / "missing.yaml")

        assert config == ProfileConfig()

    def test_undecodable_file_falls_back(self, tmp_path: Path, caplog) -> None:
        path = tmp_path / "midi_mixer.yaml"
        path.write_bytes(b"midi_controller_name: \xff\xfe nano\n")

        with caplog.at_level(logging.WARNING, logger="midi_mixer.config.loader"):
            config = ConfigLoader.load_or_default(path)

        assert config == ProfileConfig()
        assert "not valid UTF-8" in caplog.text

    def test_unreadable_file_falls_back(self, write_profile, valid_profile_yaml: str, mocker) -> None:
        path = write_profile(valid_profile_yaml)
        mocker.patch.object(Path, "open", side_effect=PermissionError(13, "Permission denied"))

        assert ConfigLoader.load_or_default(path) == ProfileConfig()
