"""Execution of terraform command lines in a child shell."""

import codecs
import logging
import os
import selectors
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from pyterraform.exceptions import TerraformCommandError

logger = logging.getLogger(__name__)

Callback = Callable[[Optional[TerraformCommandError], Optional[str]], None]

READ_SIZE = 65536


@dataclass
class CommandResult:
    """Aggregated outcome of one terraform run.

    Attributes
    ----------
    command : str
        Command line that was executed.
    output : str
        Concatenated stdout and stderr text, in arrival order.
    error : TerraformCommandError or None
        Set when anything was written to stderr.
    returncode : int or None
        Process exit code, None if the shell never started.
    """

    command: str
    output: str
    error: TerraformCommandError | None = None
    returncode: int | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> str:
        """Raise the stored error, or return the output on success."""
        if self.error is not None:
            raise self.error
        return self.output


def run_command(
    command: str,
    cwd: str | Path | None = None,
    callback: Callback | None = None,
    debug: bool = False,
) -> CommandResult:
    """Run a command line through the shell and report its outcome once.

    The child runs detached in its own session. Stdout and stderr are read
    as they arrive into one buffer; the run is a failure if any stderr data
    was seen, regardless of the exit code.

    Parameters
    ----------
    command : str
        Full command line, passed to the shell verbatim.
    cwd : str or Path, optional
        Working directory for the child.
    callback : callable, optional
        Called exactly once after the process exits, as
        ``callback(error, output)``. ``error`` is None on success, in which
        case ``output`` holds the buffer; on failure ``output`` is None.
    debug : bool, optional
        Log every chunk read and the exit status, by default False.

    Returns
    -------
    CommandResult
        The same outcome passed to the callback.
    """
    if debug:
        logger.debug(f"running terraform command [{command}] in [{cwd}]")

    try:
        process = subprocess.Popen(
            command,
            shell=True,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            start_new_session=True,
        )
    except OSError as e:
        logger.error(f"Failed to start terraform command [{command}]: {e}")
        result = CommandResult(
            command=command,
            output=str(e),
            error=TerraformCommandError(str(e), command=command),
        )
        _notify(callback, result)
        return result

    output, has_error = _collect_output(process, debug)
    returncode = process.wait()

    if debug:
        logger.debug(f"terraform process exited with code={returncode}")

    error = None
    if has_error:
        error = TerraformCommandError(output, command=command, returncode=returncode)

    result = CommandResult(command=command, output=output, error=error, returncode=returncode)
    _notify(callback, result)
    return result


def _collect_output(process: subprocess.Popen, debug: bool) -> tuple[str, bool]:
    """Read both pipes of a process until EOF.

    Returns
    -------
    tuple[str, bool]
        Combined decoded text and whether stderr produced any data.
    """
    chunks = []
    has_error = False
    decoders = {
        process.stdout: codecs.getincrementaldecoder("utf-8")(errors="replace"),
        process.stderr: codecs.getincrementaldecoder("utf-8")(errors="replace"),
    }

    with selectors.DefaultSelector() as selector:
        selector.register(process.stdout, selectors.EVENT_READ, "stdout")
        selector.register(process.stderr, selectors.EVENT_READ, "stderr")

        while selector.get_map():
            for key, _ in selector.select():
                stream = key.fileobj
                data = os.read(stream.fileno(), READ_SIZE)
                if not data:
                    selector.unregister(stream)
                    stream.close()
                    chunks.append(decoders[stream].decode(b"", final=True))
                    continue

                text = decoders[stream].decode(data)
                if debug:
                    logger.debug(f"terraform {key.data} = {text}")
                if key.data == "stderr":
                    has_error = True
                chunks.append(text)

    return "".join(chunks), has_error


def _notify(callback: Callback | None, result: CommandResult) -> None:
    if callback is None:
        return
    if result.error is not None:
        callback(result.error, None)
    else:
        callback(None, result.output)
