"""Unit tests for package resource models."""

from pathlib import Path

import pytest
from aptresolve.models.action import ActionType
from aptresolve.models.resource import PackageResource
from pydantic import ValidationError


class TestPackageResource:
    """Tests for PackageResource model."""

    def test_scalar_request(self) -> None:
        resource = PackageResource(package_name="vim", version="1.0")

        assert resource.is_multi is False
        assert resource.names == ["vim"]
        assert resource.versions == ["1.0"]
        assert resource.timeout == 900

    def test_list_request(self) -> None:
        resource = PackageResource(package_name=["foo", "bar"], version=["1.0", "2.0"])

        assert resource.is_multi is True
        assert resource.names == ["foo", "bar"]
        assert resource.versions == ["1.0", "2.0"]

    def test_list_without_versions(self) -> None:
        resource = PackageResource(package_name=["foo", "bar"])
        assert resource.versions == [None, None]

    def test_version_length_mismatch(self) -> None:
        with pytest.raises(ValidationError, match="2 versions for 3 packages"):
            PackageResource(package_name=["a", "b", "c"], version=["1", "2"])

    def test_version_list_requires_name_list(self) -> None:
        with pytest.raises(ValidationError, match="requires a list of package names"):
            PackageResource(package_name="a", version=["1"])

    @pytest.mark.parametrize("names", ["", " ", [], ["vim", ""]])
    def test_empty_names_rejected(self, names: str | list[str]) -> None:
        with pytest.raises(ValidationError):
            PackageResource(package_name=names)

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            PackageResource(package_name="vim", timeout=0)

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PackageResource(package_name="vim", arch="amd64")  # type: ignore[call-arg]

    def test_response_file_is_path(self) -> None:
        resource = PackageResource(package_name="postfix", response_file="/tmp/postfix.seed")
        assert resource.response_file == Path("/tmp/postfix.seed")


class TestActionType:
    """Tests for ActionType enum."""

    @pytest.mark.parametrize("action", [ActionType.INSTALL, ActionType.UPGRADE])
    def test_pins_versions(self, action: ActionType) -> None:
        assert action.pins_versions is True

    @pytest.mark.parametrize("action", [ActionType.REMOVE, ActionType.PURGE])
    def test_removals_do_not_pin(self, action: ActionType) -> None:
        assert action.pins_versions is False

    def test_reconfig(self) -> None:
        assert ActionType.RECONFIG.pins_versions is False
