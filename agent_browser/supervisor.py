"""Daemon lifecycle: liveness check, discovery, detached launch, readiness wait.

Readiness is judged from the file system instead of a handshake. The daemon
writes its PID file and binds its socket before it can serve, so "PID alive
and socket file present" is used as the ready signal. The daemon may create
the socket file an instant before its listener accepts connections; in that
window the first connection attempt after a successful wait can still fail
with ConnectionFailedError. That failure is reported, not retried.
"""

import logging
import os
import subprocess
import sys
import time
from collections.abc import Callable, Sequence
from pathlib import Path

from agent_browser.config import DAEMON_ENV, HEADED_ENV, SESSION_ENV
from agent_browser.errors import DaemonNotFoundError, DaemonSpawnError, DaemonStartTimeout
from agent_browser.utils import cleanup_session_files, get_socket_path, read_pid

logger = logging.getLogger(__name__)

DAEMON_SCRIPT = 'daemon.js'
NODE_BINARY = 'node'
POLL_INTERVAL = 0.1
POLL_ATTEMPTS = 50


class ReadinessProbe:
	"""Answers "is the daemon for this session up?" from its PID file and socket file.

	Tests substitute a fake with the same two methods.
	"""

	def __init__(self, session: str) -> None:
		self.session = session

	def is_running(self) -> bool:
		"""True if the PID file names a process that exists."""
		pid = read_pid(self.session)
		if pid is None:
			return False
		try:
			# Signal 0 only checks that the process exists
			os.kill(pid, 0)
			return True
		except OSError:
			return False

	def socket_ready(self) -> bool:
		return get_socket_path(self.session).exists()

	def clear_stale(self) -> None:
		"""Drop files left by a dead daemon so a leftover socket is not mistaken for readiness."""
		cleanup_session_files(self.session)


def daemon_candidates(exe_dir: Path | None = None) -> list[Path]:
	"""Daemon script locations, in the order they are tried."""
	if exe_dir is None:
		exe_dir = Path(sys.argv[0]).resolve().parent
	return [
		exe_dir / DAEMON_SCRIPT,
		exe_dir / '..' / 'dist' / DAEMON_SCRIPT,
		Path('dist') / DAEMON_SCRIPT,
	]


def find_daemon(candidates: Sequence[Path] | None = None) -> Path:
	"""Return the first existing daemon script or raise DaemonNotFoundError."""
	for path in candidates if candidates is not None else daemon_candidates():
		if path.is_file():
			return path
	raise DaemonNotFoundError()


def spawn_daemon(daemon_path: Path, session: str, headed: bool) -> subprocess.Popen:
	"""Start the daemon as a detached background process with its streams discarded."""
	env = os.environ.copy()
	env[DAEMON_ENV] = '1'
	env[SESSION_ENV] = session
	if headed:
		env[HEADED_ENV] = '1'

	logger.debug(f'Spawning {NODE_BINARY} {daemon_path} for session {session} (headed={headed})')
	try:
		return subprocess.Popen(
			[NODE_BINARY, str(daemon_path)],
			env=env,
			start_new_session=True,
			stdin=subprocess.DEVNULL,
			stdout=subprocess.DEVNULL,
			stderr=subprocess.DEVNULL,
		)
	except OSError as e:
		raise DaemonSpawnError(f'Failed to start daemon: {e}') from e


def wait_for_socket(
	probe: ReadinessProbe,
	attempts: int = POLL_ATTEMPTS,
	interval: float = POLL_INTERVAL,
	sleep: Callable[[float], None] = time.sleep,
) -> None:
	"""Poll until the socket file exists; raise DaemonStartTimeout after `attempts` checks."""
	for attempt in range(attempts):
		if probe.socket_ready():
			logger.debug(f'Daemon socket ready after {attempt} polls')
			return
		sleep(interval)
	raise DaemonStartTimeout('Daemon failed to start')


def ensure_daemon(
	session: str,
	headed: bool = False,
	probe: ReadinessProbe | None = None,
	candidates: Sequence[Path] | None = None,
	sleep: Callable[[float], None] = time.sleep,
) -> bool:
	"""Make sure a daemon is listening for session. Returns True if one was started.

	A PID file naming a dead process is stale: its files are removed and a new
	daemon is spawned.
	"""
	probe = probe or ReadinessProbe(session)

	running = probe.is_running()
	if running and probe.socket_ready():
		logger.debug(f'Daemon for session {session} already running')
		return False

	daemon_path = find_daemon(candidates)
	if not running:
		probe.clear_stale()
	spawn_daemon(daemon_path, session, headed)
	wait_for_socket(probe, sleep=sleep)
	return True
