"""Shell execution utilities.

Provides subprocess execution with proper error handling, plus the
non-interactive runner used for every apt, debconf and dpkg invocation.
"""

import logging
import os
import shlex
import shutil
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

from aptresolve.core.errors import CommandFailedError, CommandTimedOutError

logger = logging.getLogger(__name__)

# Environment injected into package manager invocations to suppress prompts.
# Locale is intentionally left at the system default.
NONINTERACTIVE_ENV: dict[str, str] = {"DEBIAN_FRONTEND": "noninteractive"}

CommandArg = str | Sequence[str | None] | None


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0


def run_command(
    args: list[str],
    *,
    check: bool = False,
    timeout: float | None = 60.0,
    env: dict[str, str] | None = None,
) -> CommandResult:
    """Execute a shell command and return the result.

    Args:
        args: Command and arguments to execute.
        check: If True, raise CalledProcessError on non-zero exit.
        timeout: Maximum time in seconds to wait for command.
        env: Additional environment variables (merged with current env).

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.CalledProcessError: If check=True and command fails.
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
    """
    full_env = {**os.environ, **env} if env else None
    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=check,
        timeout=timeout,
        env=full_env,
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        name: Command name to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None


def build_argv(*args: CommandArg) -> list[str]:
    """Flatten command fragments into an argument vector.

    String fragments are split with shell quoting rules, so
    ``"apt-get -q -y"`` contributes three arguments. Sequence fragments
    contribute their items verbatim. ``None`` fragments and ``None``
    items are dropped rather than stringified.

    Args:
        *args: Command fragments.

    Returns:
        Flat list of arguments.
    """
    argv: list[str] = []
    for arg in args:
        if arg is None:
            continue
        if isinstance(arg, str):
            argv.extend(shlex.split(arg))
        else:
            argv.extend(item for item in arg if item is not None)
    return argv


def run_noninteractive(*args: CommandArg, timeout: float | None = 900.0) -> CommandResult:
    """Run a package manager command with interactive prompts disabled.

    The command runs with ``DEBIAN_FRONTEND=noninteractive`` merged into the
    current environment. Output is captured and a non-zero exit status is an
    error.

    Args:
        *args: Command fragments, see :func:`build_argv`.
        timeout: Maximum time in seconds to wait for the command.

    Returns:
        CommandResult of the successful command.

    Raises:
        CommandFailedError: If the command exits non-zero or cannot be started.
        CommandTimedOutError: If the command exceeds the timeout.
    """
    argv = build_argv(*args)
    command = shlex.join(argv)
    logger.debug("Running: %s (timeout=%s)", command, timeout)

    try:
        result = run_command(argv, timeout=timeout, env=NONINTERACTIVE_ENV)
    except subprocess.TimeoutExpired as e:
        raise CommandTimedOutError(command, timeout) from e
    except OSError as e:
        raise CommandFailedError(command, None, str(e)) from e

    if not result.success:
        raise CommandFailedError(command, result.returncode, result.stderr)

    return result
