import logging
import subprocess
import threading
from subprocess import Popen
from typing import IO, Callable

from backend.libs.logger import Logger

log = Logger.get_logger(__name__)
output_log = Logger.get_bot_output_logger()


def _forward_output(bot_id: str, stream: IO[bytes], level: int) -> None:
    """Forward each line of a child stream to the bot output logger"""
    with stream:
        for raw_line in iter(stream.readline, b""):
            line = raw_line.decode("utf-8", errors="replace").rstrip()
            if line:
                output_log.log(level, f"[{bot_id}] {line}")


def _watch_exit(
    bot_id: str, process: Popen, on_exit: Callable[[str, Popen], None]
) -> None:
    code = process.wait()
    log.info(f"[{bot_id}] exited with code {code}")
    on_exit(bot_id, process)


def start_bot(bot_id: str, command: list[str]) -> Popen:
    """Spawn a bot script as a child process

    Its stdout is forwarded at INFO and its stderr at ERROR to the bot output
    logger, from daemon threads.

    Args:
        bot_id (str): Id used to prefix forwarded output
        command (list[str]): The argv to execute

    Returns:
        Popen: The running process handle

    Raises:
        OSError: If the launcher cannot be executed
    """
    process = subprocess.Popen(
        command,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )
    log.info(f"[{bot_id}] started with pid {process.pid}: {' '.join(command)}")

    for stream, level, suffix in (
        (process.stdout, logging.INFO, "stdout"),
        (process.stderr, logging.ERROR, "stderr"),
    ):
        threading.Thread(
            target=_forward_output,
            args=(bot_id, stream, level),
            name=f"{bot_id}-{suffix}",
            daemon=True,
        ).start()

    return process


def observe_exit(
    bot_id: str, process: Popen, on_exit: Callable[[str, Popen], None]
) -> threading.Thread:
    """Call `on_exit(bot_id, process)` from a daemon thread once the process ends

    The process is reaped by the observer, whatever ended it.
    """
    thread = threading.Thread(
        target=_watch_exit,
        args=(bot_id, process, on_exit),
        name=f"{bot_id}-exit",
        daemon=True,
    )
    thread.start()
    return thread


def stop_bot(process: Popen) -> None:
    """Send a single termination signal, without waiting for the exit"""
    if process.poll() is None:
        process.terminate()
