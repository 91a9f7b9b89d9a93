import logging
import subprocess

from .errors import LaunchError

logger = logging.getLogger(__name__)


def split_command(command_line):
    # %f, %U etc. are desktop entry field codes, not arguments
    return [arg for arg in command_line.split(" ") if arg and not arg.startswith("%")]


def launch_application(app, cwd=None):
    args = split_command(app.command_line)
    if not args:
        raise LaunchError(f"{app.name or app.id} has no command to run")

    try:
        process = subprocess.Popen(
            args,
            cwd=cwd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True
        )
    except OSError as e:
        raise LaunchError(f"Failed to launch {app.name or app.id}: {e}") from e

    logger.info("Launched %s (pid %s)", args[0], process.pid)
    return process
