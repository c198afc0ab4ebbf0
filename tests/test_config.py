"""Tests for restrand.config module."""

import pytest
from restrand.config import ReorientConfig
from restrand.errors import InvalidOrientationError
from restrand.orientation import Orientation


class TestReorientConfig:
    """Test ReorientConfig class."""

    def test_defaults(self):
        """Test default settings."""
        config = ReorientConfig()

        assert config.target_orientation is Orientation.FORWARD
        assert config.flipped_suffix == ""
        assert config.drop_missing is False
        assert config.line_width == 60
        assert config.id_column == "ReadName"
        assert config.orientation_column == "orientation"
        assert config.on_duplicate == "error"

    def test_target_orientation_synonyms(self):
        """Test the target orientation accepts any synonym."""
        assert ReorientConfig(target_orientation="-").target_orientation is Orientation.REVERSE
        assert ReorientConfig(target_orientation="plus").target_orientation is Orientation.FORWARD

    def test_invalid_target_orientation(self):
        """Test an invalid target orientation is rejected."""
        with pytest.raises(InvalidOrientationError):
            ReorientConfig(target_orientation="sideways")

    def test_invalid_line_width(self):
        """Test a non-positive line width is rejected."""
        with pytest.raises(ValueError, match="line_width"):
            ReorientConfig(line_width=0)

    def test_invalid_duplicate_policy(self):
        """Test an unknown duplicate policy is rejected."""
        with pytest.raises(ValueError, match="on_duplicate"):
            ReorientConfig(on_duplicate="merge")

    def test_with_overrides_skips_none(self):
        """Test that None overrides leave settings unchanged."""
        base = ReorientConfig(flipped_suffix="/rc", drop_missing=True)
        config = base.with_overrides(flipped_suffix=None, drop_missing=None, target_orientation="-")

        assert config.flipped_suffix == "/rc"
        assert config.drop_missing is True
        assert config.target_orientation is Orientation.REVERSE
        # Original untouched
        assert base.target_orientation is Orientation.FORWARD

    def test_with_overrides_allows_false_and_empty(self):
        """Test that False and '' are real overrides."""
        base = ReorientConfig(flipped_suffix="/rc", drop_missing=True)
        config = base.with_overrides(flipped_suffix="", drop_missing=False)

        assert config.flipped_suffix == ""
        assert config.drop_missing is False

    def test_from_dict_unknown_key(self):
        """Test unknown keys are rejected."""
        with pytest.raises(ValueError, match="wrap"):
            ReorientConfig.from_dict({"wrap": 80})


class TestFromYaml:
    """Test YAML configuration loading."""

    def test_from_yaml(self, tmp_path):
        """Test loading settings from YAML."""
        path = tmp_path / "restrand.yaml"
        path.write_text(
            "target_orientation: '-'\n"
            "flipped_suffix: /rc\n"
            "drop_missing: true\n"
            "id_column: read_id\n"
            "on_duplicate: last\n"
        )

        config = ReorientConfig.from_yaml(path)
        assert config.target_orientation is Orientation.REVERSE
        assert config.flipped_suffix == "/rc"
        assert config.drop_missing is True
        assert config.id_column == "read_id"
        assert config.on_duplicate == "last"

    def test_unquoted_numeric_orientation(self, tmp_path):
        """Test YAML integers 1/0 are accepted as orientations."""
        path = tmp_path / "restrand.yaml"
        path.write_text("target_orientation: 0\n")

        assert ReorientConfig.from_yaml(path).target_orientation is Orientation.REVERSE

    def test_empty_yaml(self, tmp_path):
        """Test an empty YAML file gives the defaults."""
        path = tmp_path / "restrand.yaml"
        path.write_text("")

        assert ReorientConfig.from_yaml(path) == ReorientConfig()

    def test_non_mapping_yaml(self, tmp_path):
        """Test a YAML list is rejected."""
        path = tmp_path / "restrand.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ValueError, match="mapping"):
            ReorientConfig.from_yaml(path)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
