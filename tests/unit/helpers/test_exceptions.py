"""Unit tests for dreamstats.helpers.exceptions module.

Tests custom exception classes.
"""

import pytest

from dreamstats.helpers.exceptions import ConfigError, DataSourceError


class TestConfigError:
    """Tests for ConfigError exception."""

    @pytest.mark.unit
    def test_config_error_is_value_error(self) -> None:
        """ConfigError should be catchable as ValueError."""
        assert issubclass(ConfigError, ValueError)

    @pytest.mark.unit
    def test_config_error_stores_message(self) -> None:
        assert str(ConfigError("bad timezone")) == "bad timezone"


class TestDataSourceError:
    """Tests for DataSourceError exception."""

    @pytest.mark.unit
    def test_data_source_error_can_be_raised(self) -> None:
        with pytest.raises(DataSourceError, match="cannot read"):
            raise DataSourceError("cannot read export")
