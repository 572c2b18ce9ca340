"""Pytest configuration and shared fixtures.

This module contains sample apt-cache outputs used across all test modules.
"""

from collections.abc import Iterator
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def apt_tools_installed() -> Iterator[None]:
    """Report apt-cache and apt-get as installed, whatever the host has."""
    with (
        patch("aptresolve.scanners.apt.command_exists", return_value=True),
        patch("aptresolve.operators.apt.command_exists", return_value=True),
    ):
        yield


@pytest.fixture
def policy_installed_output() -> str:
    """Sample apt-cache policy output for an installed package."""
    return """vim:
  Installed: 2:9.0.1378-2
  Candidate: 2:9.0.1378-2
  Version table:
 *** 2:9.0.1378-2 500
        500 http://deb.debian.org/debian bookworm/main amd64 Packages
        100 /var/lib/dpkg/status
"""


@pytest.fixture
def policy_upgradable_output() -> str:
    """Sample apt-cache policy output for an installed package with a newer candidate."""
    return """curl:
  Installed: 7.88.1-10+deb12u4
  Candidate: 7.88.1-10+deb12u5
  Version table:
     7.88.1-10+deb12u5 500
        500 http://security.debian.org/debian-security bookworm-security/main amd64 Packages
 *** 7.88.1-10+deb12u4 100
        100 /var/lib/dpkg/status
"""


@pytest.fixture
def policy_virtual_output() -> str:
    """Sample apt-cache policy output for a purely virtual package."""
    return """mail-transport-agent:
  Installed: (none)
  Candidate: (none)
  Version table:
"""


@pytest.fixture
def policy_postfix_output() -> str:
    """Sample apt-cache policy output for postfix, not installed."""
    return """postfix:
  Installed: (none)
  Candidate: 3.7.10-0+deb12u1
  Version table:
     3.7.10-0+deb12u1 500
        500 http://deb.debian.org/debian bookworm/main amd64 Packages
"""


@pytest.fixture
def showpkg_single_provider_output() -> str:
    """Sample apt-cache showpkg output for a virtual package with one provider."""
    return """Package: mail-transport-agent
Versions:

Reverse Depends:
  mutt,mail-transport-agent
  bsd-mailx,mail-transport-agent
Dependencies:
Provides:
Reverse Provides:
postfix 3.7.10-0+deb12u1 (= )
"""


@pytest.fixture
def showpkg_multiple_providers_output() -> str:
    """Sample apt-cache showpkg output for a virtual package with two providers."""
    return """Package: mail-transport-agent
Versions:

Reverse Depends:
  mutt,mail-transport-agent
Dependencies:
Provides:
Reverse Provides:
postfix 3.7.10-0+deb12u1 (= )
exim4-daemon-light 4.96-15+deb12u4 (= )
exim4-daemon-heavy 4.96-15+deb12u4 (= )
"""


@pytest.fixture
def showpkg_concrete_output() -> str:
    """Sample apt-cache showpkg output for a real package nothing provides."""
    return """Package: vim
Versions:
2:9.0.1378-2 (/var/lib/apt/lists/deb.debian.org_debian_dists_bookworm_main_binary-amd64_Packages)

Reverse Depends:
  vim-gtk3,vim 2:9.0.1378-2
Dependencies:
2:9.0.1378-2 - vim-common (5 2:9.0.1378-2) vim-runtime (5 2:9.0.1378-2) libc6 (2 2.34)
Provides:
2:9.0.1378-2 - editor (= )
Reverse Provides:
"""
