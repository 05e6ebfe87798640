import logging
import sys

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def setup_logging(debug: bool = False) -> None:
	"""Send log records to stderr; stdout is reserved for command output."""
	logging.basicConfig(
		level=logging.DEBUG if debug else logging.WARNING,
		format=LOG_FORMAT,
		handlers=[logging.StreamHandler(sys.stderr)],
		force=True,
	)
