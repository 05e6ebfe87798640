"""One request/response exchange with a running daemon."""

import logging
import socket

from agent_browser.errors import ConnectionFailedError, TransportError
from agent_browser.protocol import Request, Response, decode_response, encode_request
from agent_browser.utils import get_socket_path

logger = logging.getLogger(__name__)

READ_TIMEOUT = 30.0
WRITE_TIMEOUT = 5.0


def connect_to_daemon(session: str, timeout: float = WRITE_TIMEOUT) -> socket.socket:
	"""Connect to session daemon."""
	sock_path = get_socket_path(session)
	sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
	sock.settimeout(timeout)
	try:
		sock.connect(str(sock_path))
	except OSError as e:
		sock.close()
		raise ConnectionFailedError(f'Failed to connect: {e}') from e
	return sock


def _read_line(sock: socket.socket) -> bytes:
	data = b''
	while b'\n' not in data:
		chunk = sock.recv(4096)
		if not chunk:
			break
		data += chunk
	line, _, _ = data.partition(b'\n')
	return line


def send_command(request: Request, session: str) -> Response:
	"""Send one request to the session daemon and return its response.

	Sending is bounded by WRITE_TIMEOUT and waiting for the reply by
	READ_TIMEOUT; either deadline expiring raises TransportError. The
	connection is closed afterwards and never reused.
	"""
	logger.debug(f'Sending {request.action} (id={request.id}) to session {session}')
	sock = connect_to_daemon(session)
	try:
		try:
			sock.settimeout(WRITE_TIMEOUT)
			sock.sendall(encode_request(request))
		except OSError as e:
			raise TransportError(f'Failed to send: {e}') from e

		try:
			sock.settimeout(READ_TIMEOUT)
			line = _read_line(sock)
		except OSError as e:
			raise TransportError(f'Failed to read: {e}') from e
	finally:
		sock.close()

	response = decode_response(line)
	logger.debug(f'Response for {request.id}: success={response.success}')
	return response
