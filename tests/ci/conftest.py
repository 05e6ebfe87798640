"""Shared fixtures: unique session names and an in-thread fake daemon."""

import json
import socket
import threading
import uuid
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from agent_browser.utils import cleanup_session_files, get_socket_path

Reply = Callable[[dict[str, Any]], bytes | None]


class FakeDaemon:
	"""Unix socket server that answers one line per connection, like the real daemon.

	``reply`` maps the decoded request to raw bytes to send back. Returning
	``b''`` closes the connection without a reply; returning None keeps it
	open without replying until the daemon is stopped.
	"""

	def __init__(self, path: Path, reply: Reply | None = None) -> None:
		self.path = path
		self.reply: Reply = reply or (lambda request: b'{"success": true, "data": {}}\n')
		self.requests: list[dict[str, Any]] = []
		self._stop = threading.Event()
		self._sock: socket.socket | None = None
		self._thread: threading.Thread | None = None

	def respond(self, **response: Any) -> None:
		"""Answer every request with the given response fields."""
		line = (json.dumps(response) + '\n').encode()
		self.reply = lambda request: line

	def start(self) -> None:
		self._sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
		self._sock.bind(str(self.path))
		self._sock.listen()
		self._sock.settimeout(0.05)
		self._thread = threading.Thread(target=self._serve, daemon=True)
		self._thread.start()

	def stop(self) -> None:
		self._stop.set()
		if self._thread:
			self._thread.join(timeout=2)
		if self._sock:
			self._sock.close()

	def _serve(self) -> None:
		assert self._sock is not None
		while not self._stop.is_set():
			try:
				conn, _ = self._sock.accept()
			except TimeoutError:
				continue
			except OSError:
				return
			with conn:
				conn.settimeout(2)
				data = b''
				while b'\n' not in data:
					chunk = conn.recv(4096)
					if not chunk:
						break
					data += chunk
				request = json.loads(data.decode())
				self.requests.append(request)
				reply = self.reply(request)
				if reply is None:
					self._stop.wait(2)
				elif reply:
					conn.sendall(reply)


@pytest.fixture
def session_name() -> Iterator[str]:
	name = f'test-{uuid.uuid4().hex[:8]}'
	yield name
	cleanup_session_files(name)


@pytest.fixture
def fake_daemon(session_name: str) -> Iterator[FakeDaemon]:
	daemon = FakeDaemon(get_socket_path(session_name))
	daemon.start()
	yield daemon
	daemon.stop()
