"""shell_command tool: runs one command line through the platform shell."""

import contextlib
import os
import signal
import subprocess
import threading
import time
from typing import IO

from pydantic import BaseModel

from tool_agent.config.domain.tools import ShellConfig
from tool_agent.tools.domain.schema import integer, object_schema, string
from tool_agent.tools.domain.spec import ToolArguments, ToolSpec
from tool_agent.tools.infrastructure.errors import ShellCommandTimeoutError

SHELL_COMMAND = "shell_command"

_TRUNCATION_MARKER = "\n...[truncated]"
_READ_CHUNK_CHARS = 8192
_USE_PROCESS_GROUP = os.name == "posix"

_DESCRIPTION = (
    "Execute a command line in a shell and return its exit code, stdout and "
    "stderr. Each call starts a fresh shell in the agent's working directory: "
    "the working directory does not persist between calls, so prefix the "
    "command with `cd <dir> &&` when it must run elsewhere."
)


class ShellCommandOutput(BaseModel, frozen=True):
    exit_code: int
    stdout: str
    stderr: str


def truncate(text: str, limit: int) -> str:
    """Cap text at limit characters, marking the cut."""
    if len(text) <= limit:
        return text
    return text[:limit] + _TRUNCATION_MARKER


class ShellCommandHandler:
    """Runs a command with shell=True and waits for it to exit.

    stdout and stderr are read separately as they are produced and decoded as
    UTF-8, with undecodable bytes replaced. At most max_output_chars of each
    stream is kept; the rest is read and discarded so the command never blocks
    on a full pipe. On POSIX the command gets its own process group, and a
    timeout kills the whole group rather than only the shell.
    """

    def __init__(self, config: ShellConfig) -> None:
        self._config = config

    def __call__(self, arguments: ToolArguments) -> ShellCommandOutput:
        command = str(arguments["command"])
        timeout = self._config.timeout_seconds
        limit = self._config.max_output_chars

        process = subprocess.Popen(
            command,
            shell=True,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            executable=self._config.executable,
            start_new_session=_USE_PROCESS_GROUP,
        )
        stdout: list[str] = []
        stderr: list[str] = []
        readers = [
            _start_reader(process.stdout, limit, stdout),
            _start_reader(process.stderr, limit, stderr),
        ]

        deadline = time.monotonic() + timeout
        try:
            exit_code = process.wait(timeout=timeout)
        except subprocess.TimeoutExpired as exc:
            _kill_process_group(process)
            raise ShellCommandTimeoutError(
                command=command, timeout_seconds=timeout
            ) from exc

        for reader in readers:
            reader.join(timeout=max(0.0, deadline - time.monotonic()))
        if any(reader.is_alive() for reader in readers):
            # The shell exited but a background child still holds its output.
            _kill_process_group(process)
            raise ShellCommandTimeoutError(command=command, timeout_seconds=timeout)

        return ShellCommandOutput(
            exit_code=exit_code,
            stdout=truncate("".join(stdout), limit),
            stderr=truncate("".join(stderr), limit),
        )


def _start_reader(
    stream: IO[str] | None, limit: int, sink: list[str]
) -> threading.Thread:
    reader = threading.Thread(target=_drain, args=(stream, limit, sink), daemon=True)
    reader.start()
    return reader


def _drain(stream: IO[str] | None, limit: int, sink: list[str]) -> None:
    """Read stream to EOF, keeping only the first limit + 1 characters."""
    if stream is None:
        return
    kept = 0
    with stream:
        while chunk := stream.read(_READ_CHUNK_CHARS):
            if kept > limit:
                continue
            piece = chunk[: limit + 1 - kept]
            sink.append(piece)
            kept += len(piece)


def _kill_process_group(process: subprocess.Popen[str]) -> None:
    if _USE_PROCESS_GROUP:
        # start_new_session makes the shell's pid the group id.
        with contextlib.suppress(ProcessLookupError):
            os.killpg(process.pid, signal.SIGKILL)
    process.kill()
    process.wait()


def render_shell_prompt(arguments: ToolArguments) -> str:
    return f"Execute shell command `{arguments['command']}`."


def shell_command_spec(config: ShellConfig) -> ToolSpec:
    return ToolSpec(
        name=SHELL_COMMAND,
        description=_DESCRIPTION,
        input_schema=object_schema(
            {"command": string("The full command line to run.")},
            required=["command"],
        ),
        output_schema=object_schema(
            {
                "exit_code": integer("Process exit status."),
                "stdout": string("Captured standard output."),
                "stderr": string("Captured standard error."),
            },
            required=["exit_code", "stdout", "stderr"],
        ),
        handler=ShellCommandHandler(config),
        render_prompt=render_shell_prompt,
    )
