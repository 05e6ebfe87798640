"""Per-session file locations shared by the CLI and the daemon."""

import os
import tempfile
from pathlib import Path
from typing import NamedTuple

FILE_PREFIX = 'agent-browser'
PID_MAX = 2**31 - 1


class SessionPaths(NamedTuple):
	socket: Path
	pid: Path


def get_socket_path(session: str) -> Path:
	"""Get socket path for session."""
	return Path(tempfile.gettempdir()) / f'{FILE_PREFIX}-{session}.sock'


def get_pid_path(session: str) -> Path:
	"""Get PID file path for session."""
	return Path(tempfile.gettempdir()) / f'{FILE_PREFIX}-{session}.pid'


def get_session_paths(session: str) -> SessionPaths:
	return SessionPaths(socket=get_socket_path(session), pid=get_pid_path(session))


def read_pid(session: str) -> int | None:
	"""Read the daemon PID recorded for session, or None if missing or unparsable."""
	try:
		pid = int(get_pid_path(session).read_text().strip())
	except (OSError, ValueError):
		return None
	# Out of range for a pid_t; os.kill would raise OverflowError
	return pid if 0 < pid <= PID_MAX else None


def cleanup_session_files(session: str) -> None:
	"""Remove session socket and PID files."""
	for path in get_session_paths(session):
		try:
			os.unlink(path)
		except OSError:
			pass
