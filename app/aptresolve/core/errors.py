"""Exception hierarchy for aptresolve.

Not-found packages are not an error: a missing installed or candidate
version is reported as ``None`` and callers branch on it.
"""


class AptResolveError(Exception):
    """Base exception for package resolution and action errors."""


class UnsupportedAttributeError(AptResolveError):
    """Raised when a resource requests an attribute the apt provider cannot handle."""


class AmbiguousVirtualPackageError(AptResolveError):
    """Raised when a virtual package is provided by more than one real package.

    Attributes:
        name: The requested virtual package name.
        providers: Sorted names of the competing provider packages.
    """

    def __init__(self, name: str, providers: list[str]) -> None:
        self.name = name
        self.providers = sorted(providers)
        super().__init__(
            f"{name} is a virtual package provided by multiple packages "
            f"({', '.join(self.providers)}), you must explicitly select one"
        )


class NoCandidateVersionError(AptResolveError):
    """Raised when an install or upgrade has no version to pin for a package."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No candidate version available for {name}")


class CommandError(AptResolveError):
    """Base exception for command runner failures.

    Attributes:
        command: The command line that was executed.
    """

    def __init__(self, command: str, message: str) -> None:
        self.command = command
        super().__init__(message)


class CommandFailedError(CommandError):
    """Raised when a command exits non-zero or cannot be started."""

    def __init__(self, command: str, returncode: int | None, stderr: str = "") -> None:
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or "no error output"
        if returncode is None:
            message = f"Could not execute '{command}': {detail}"
        else:
            message = f"Command '{command}' failed with exit status {returncode}: {detail}"
        super().__init__(command, message)


class CommandTimedOutError(CommandError):
    """Raised when a command exceeds its timeout."""

    def __init__(self, command: str, timeout: float | None) -> None:
        self.timeout = timeout
        super().__init__(command, f"Command '{command}' timed out after {timeout} seconds")


class PackageManagerUnavailableError(AptResolveError):
    """Raised when a required package manager command is not installed."""

    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(f"{tool} is not available on this system")
