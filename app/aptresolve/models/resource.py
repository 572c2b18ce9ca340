"""Package resource models.

This module defines the Pydantic model describing a requested package
resource and the plain record describing its current state.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from aptresolve.core.config import DEFAULT_TIMEOUT_SECONDS


class PackageResource(BaseModel):
    """A requested package resource.

    Either a single package or an ordered list of packages, optionally
    paired positionally with versions.

    Attributes:
        package_name: One package name or an ordered list of names.
        version: Requested version(s), positionally matching package_name.
        default_release: Release to pin apt to (APT::Default-Release).
        options: Extra apt-get options for actions.
        source: Local package file. Not supported by the apt provider.
        response_file: debconf selections file used for preseeding.
        timeout: Timeout for each subprocess call in seconds.
    """

    model_config = ConfigDict(extra="forbid")

    package_name: Annotated[
        str | list[str],
        Field(description="Package name or ordered list of names"),
    ]
    version: Annotated[
        str | list[str] | None,
        Field(description="Requested version(s)"),
    ] = None
    default_release: Annotated[str | None, Field(description="Default release pin")] = None
    options: Annotated[str | None, Field(description="Extra apt-get options")] = None
    source: Annotated[str | None, Field(description="Local package file")] = None
    response_file: Annotated[Path | None, Field(description="debconf selections file")] = None
    timeout: Annotated[
        float,
        Field(gt=0, description="Subprocess timeout in seconds"),
    ] = DEFAULT_TIMEOUT_SECONDS

    @field_validator("package_name")
    @classmethod
    def validate_package_name(cls, v: str | list[str]) -> str | list[str]:
        """Reject empty names and empty lists."""
        names = v if isinstance(v, list) else [v]
        if not names:
            msg = "At least one package name is required"
            raise ValueError(msg)
        if any(not name.strip() for name in names):
            msg = "Package name cannot be empty"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def validate_versions_match_names(self) -> "PackageResource":
        """Ensure versions correspond positionally to package names."""
        if isinstance(self.version, list):
            if not isinstance(self.package_name, list):
                msg = "A list of versions requires a list of package names"
                raise ValueError(msg)
            if len(self.version) != len(self.package_name):
                msg = (
                    f"Got {len(self.version)} versions for "
                    f"{len(self.package_name)} packages"
                )
                raise ValueError(msg)
        return self

    @property
    def is_multi(self) -> bool:
        """Check if the request is a sequence of packages."""
        return isinstance(self.package_name, list)

    @property
    def names(self) -> list[str]:
        """Requested package names as a list."""
        if isinstance(self.package_name, list):
            return list(self.package_name)
        return [self.package_name]

    @property
    def versions(self) -> list[str | None]:
        """Requested versions as a list aligned with :attr:`names`.

        A scalar version on a list request applies to no package in particular
        and is ignored; missing versions are None.
        """
        if isinstance(self.version, list):
            return list(self.version)
        if self.version is not None and not self.is_multi:
            return [self.version]
        return [None] * len(self.names)


@dataclass(slots=True)
class CurrentResource:
    """Current state of a requested resource.

    Attributes:
        package_name: Requested name(s), scalar or list as requested.
        version: Installed version(s), scalar or positional list.
    """

    package_name: str | list[str]
    version: str | None | list[str | None] = None
