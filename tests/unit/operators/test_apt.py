"""Unit tests for AptOperator.

Tests for the APT package operator implementation.
"""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest
from aptresolve.core.errors import (
    CommandFailedError,
    CommandTimedOutError,
    PackageManagerUnavailableError,
)
from aptresolve.models.action import ActionType
from aptresolve.operators.apt import AptOperator, build_package_tokens
from aptresolve.utils.shell import CommandResult, build_argv

OK = CommandResult(stdout="", stderr="", returncode=0)


def _argv(mock_run) -> list[str]:
    """Flatten the fragments passed to run_noninteractive."""
    return build_argv(*mock_run.call_args[0])


def _package_args(argv: list[str], subcommand: str) -> str:
    """Return the space-joined arguments after the apt-get subcommand."""
    return " ".join(argv[argv.index(subcommand) + 1 :])


class TestBuildPackageTokens:
    """Tests for build_package_tokens function."""

    def test_pins_concrete_packages(self) -> None:
        assert build_package_tokens(["foo", "bar"], ["1.0", "2.0"], {}) == ["foo=1.0", "bar=2.0"]

    def test_virtual_package_unpinned(self) -> None:
        """Virtual names are passed bare."""
        tokens = build_package_tokens(["foo", "bar"], ["1.0", "2.0"], {"foo": False, "bar": True})
        assert " ".join(tokens) == "foo=1.0 bar"

    def test_missing_version_unpinned(self) -> None:
        assert build_package_tokens(["foo"], [None], {"foo": False}) == ["foo"]

    def test_length_mismatch(self) -> None:
        with pytest.raises(ValueError, match="2 versions for 1 packages"):
            build_package_tokens(["foo"], ["1.0", "2.0"], {})


class TestAptOperator:
    """Tests for AptOperator class."""

    @pytest.fixture
    def operator(self) -> AptOperator:
        """Create AptOperator instance."""
        return AptOperator(timeout=120.0)

    @pytest.fixture
    def dry_run_operator(self) -> AptOperator:
        """Create AptOperator in dry-run mode."""
        return AptOperator(dry_run=True)

    def test_is_available_when_apt_exists(self, operator: AptOperator) -> None:
        with patch("aptresolve.operators.apt.command_exists", return_value=True):
            assert operator.is_available() is True

    def test_is_available_when_apt_missing(self, operator: AptOperator) -> None:
        with patch("aptresolve.operators.apt.command_exists", return_value=False):
            assert operator.is_available() is False

    def test_install_single_batched_call(self, operator: AptOperator) -> None:
        """Installing two packages with one virtual is one apt-get call."""
        with patch("aptresolve.operators.apt.run_noninteractive", return_value=OK) as mock_run:
            operator.install(["foo", "bar"], ["1.0", "2.0"], {"foo": False, "bar": True})

        mock_run.assert_called_once()
        argv = _argv(mock_run)
        assert argv[:3] == ["apt-get", "-q", "-y"]
        assert _package_args(argv, "install") == "foo=1.0 bar"
        assert mock_run.call_args.kwargs["timeout"] == 120.0

    def test_install_with_release_and_options(self) -> None:
        operator = AptOperator(
            default_release="bookworm-backports",
            options="--no-install-recommends -o Dpkg::Options::=--force-confold",
        )
        with patch("aptresolve.operators.apt.run_noninteractive", return_value=OK) as mock_run:
            operator.install(["vim"], ["2:9.0.1378-2"], {"vim": False})

        assert _argv(mock_run) == [
            "apt-get",
            "-q",
            "-y",
            "-o",
            "APT::Default-Release=bookworm-backports",
            "--no-install-recommends",
            "-o",
            "Dpkg::Options::=--force-confold",
            "install",
            "vim=2:9.0.1378-2",
        ]

    def test_upgrade_is_install(self, operator: AptOperator) -> None:
        with patch("aptresolve.operators.apt.run_noninteractive", return_value=OK) as mock_run:
            operator.upgrade(["curl"], ["7.88.1-10+deb12u5"], {"curl": False})

        argv = _argv(mock_run)
        assert "install" in argv
        assert argv[-1] == "curl=7.88.1-10+deb12u5"

    def test_install_dry_run(self, dry_run_operator: AptOperator) -> None:
        with patch("aptresolve.operators.apt.run_noninteractive", return_value=OK) as mock_run:
            dry_run_operator.install(["vim"], ["1.0"], {})

        assert "--dry-run" in _argv(mock_run)

    def test_install_with_sudo_keeps_noninteractive_frontend(self) -> None:
        """sudo resets the environment, so the frontend is set on the command line."""
        operator = AptOperator(use_sudo=True)
        completed = subprocess.CompletedProcess(args=[], returncode=0, stdout="", stderr="")
        with patch("aptresolve.utils.shell.subprocess.run", return_value=completed) as mock_run:
            operator.install(["vim"], ["1.0"], {})

        argv = mock_run.call_args[0][0]
        assert argv[:4] == ["sudo", "env", "DEBIAN_FRONTEND=noninteractive", "apt-get"]
        assert argv[-1] == "vim=1.0"

    def test_reconfigure_with_sudo_keeps_noninteractive_frontend(self) -> None:
        operator = AptOperator(use_sudo=True)
        with patch("aptresolve.operators.apt.run_noninteractive", return_value=OK) as mock_run:
            operator.reconfigure("postfix")

        assert _argv(mock_run) == [
            "sudo",
            "env",
            "DEBIAN_FRONTEND=noninteractive",
            "dpkg-reconfigure",
            "postfix",
        ]

    def test_remove_ignores_versions(self, operator: AptOperator) -> None:
        with patch("aptresolve.operators.apt.run_noninteractive", return_value=OK) as mock_run:
            operator.remove(["foo", "bar"])

        argv = _argv(mock_run)
        assert _package_args(argv, "remove") == "foo bar"
        assert "purge" not in argv

    def test_remove_does_not_pin_release(self) -> None:
        operator = AptOperator(default_release="stable", options="--auto-remove")
        with patch("aptresolve.operators.apt.run_noninteractive", return_value=OK) as mock_run:
            operator.remove(["foo"])

        argv = _argv(mock_run)
        assert "APT::Default-Release=stable" not in argv
        assert "--auto-remove" in argv

    def test_purge(self, operator: AptOperator) -> None:
        with patch("aptresolve.operators.apt.run_noninteractive", return_value=OK) as mock_run:
            operator.purge(["foo"])

        argv = _argv(mock_run)
        assert _package_args(argv, "purge") == "foo"
        assert "remove" not in argv

    def test_preseed(self, operator: AptOperator) -> None:
        with patch("aptresolve.operators.apt.run_noninteractive", return_value=OK) as mock_run:
            operator.preseed(Path("/tmp/postfix.seed"))

        assert _argv(mock_run) == ["debconf-set-selections", "/tmp/postfix.seed"]

    def test_reconfigure(self, operator: AptOperator) -> None:
        with patch("aptresolve.operators.apt.run_noninteractive", return_value=OK) as mock_run:
            operator.reconfigure("postfix")

        assert _argv(mock_run) == ["dpkg-reconfigure", "postfix"]

    def test_dry_run_skips_preseed_and_reconfigure(self, dry_run_operator: AptOperator) -> None:
        with patch("aptresolve.operators.apt.run_noninteractive") as mock_run:
            assert dry_run_operator.preseed(Path("/tmp/postfix.seed")) is None
            assert dry_run_operator.reconfigure("postfix") is None

        mock_run.assert_not_called()

    def test_failure_propagates(self, operator: AptOperator) -> None:
        with patch("aptresolve.operators.apt.run_noninteractive") as mock_run:
            mock_run.side_effect = CommandFailedError(
                "apt-get -q -y install foo=1.0", 100, "E: Unable to locate package foo"
            )

            with pytest.raises(CommandFailedError, match="Unable to locate package"):
                operator.install(["foo"], ["1.0"], {})

    def test_timeout_propagates(self, operator: AptOperator) -> None:
        with patch("aptresolve.operators.apt.run_noninteractive") as mock_run:
            mock_run.side_effect = CommandTimedOutError("apt-get -q -y remove foo", 120.0)

            with pytest.raises(CommandTimedOutError):
                operator.remove(["foo"])


class TestOperatorApply:
    """Tests for the Operator.apply dispatcher."""

    @pytest.fixture
    def operator(self) -> AptOperator:
        return AptOperator()

    def test_apply_install(self, operator: AptOperator) -> None:
        with patch("aptresolve.operators.apt.run_noninteractive", return_value=OK) as mock_run:
            results = operator.apply(ActionType.INSTALL, ["foo"], ["1.0"], {"foo": False})

        assert results == [OK]
        assert _argv(mock_run)[-1] == "foo=1.0"

    def test_apply_install_requires_versions(self, operator: AptOperator) -> None:
        with pytest.raises(ValueError, match="requires versions"):
            operator.apply(ActionType.UPGRADE, ["foo"])

    def test_apply_purge(self, operator: AptOperator) -> None:
        with patch("aptresolve.operators.apt.run_noninteractive", return_value=OK) as mock_run:
            operator.apply(ActionType.PURGE, ["foo", "bar"])

        mock_run.assert_called_once()
        assert "purge" in _argv(mock_run)

    def test_apply_reconfig_runs_per_package(self, operator: AptOperator) -> None:
        with patch("aptresolve.operators.apt.run_noninteractive", return_value=OK) as mock_run:
            results = operator.apply(ActionType.RECONFIG, ["postfix", "tzdata"])

        assert len(results) == 2
        assert mock_run.call_count == 2

    def test_apply_requires_apt_get(self, operator: AptOperator) -> None:
        with (
            patch("aptresolve.operators.apt.command_exists", return_value=False),
            patch("aptresolve.operators.apt.run_noninteractive") as mock_run,
        ):
            with pytest.raises(PackageManagerUnavailableError, match="apt-get is not available"):
                operator.apply(ActionType.REMOVE, ["foo"])

        mock_run.assert_not_called()
