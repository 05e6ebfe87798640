"""Errors raised by the CLI layer.

Each subclass is one failure category. All of them end the invocation with
exit status 1; none are retried. Errors reported by the daemon itself arrive
as a ``Response`` with ``success=False`` and are never raised.
"""


class AgentBrowserError(Exception):
	"""Base class for failures detected by the CLI before or during the exchange."""

	pass


class DaemonNotFoundError(AgentBrowserError):
	"""No daemon script found in any of the candidate locations."""

	def __init__(self) -> None:
		super().__init__('Daemon not found. Run from project directory or ensure daemon.js is alongside binary.')


class DaemonSpawnError(AgentBrowserError):
	"""The daemon process could not be launched."""

	pass


class DaemonStartTimeout(AgentBrowserError):
	"""The daemon socket never appeared within the poll window."""

	pass


class ConnectionFailedError(AgentBrowserError):
	"""The socket exists but connecting to it failed."""

	pass


class TransportError(AgentBrowserError):
	"""Writing the request or reading the response failed or timed out."""

	pass


class InvalidResponseError(AgentBrowserError):
	"""A line was read but it is not a valid response record."""

	pass


class UnknownCommandError(AgentBrowserError):
	"""No request mapping exists for the given tokens."""

	def __init__(self, verb: str) -> None:
		self.verb = verb
		super().__init__(f'Unknown command: {verb}')
