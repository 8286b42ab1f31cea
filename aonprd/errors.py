class StatBlockError(Exception):
	pass


class InvalidInput(StatBlockError, ValueError):
	"""The URL could not be parsed; raised before any I/O."""


class RetrievalFailure(StatBlockError, IOError):
	"""Both the direct route and the mirror failed."""


class ParseFailure(StatBlockError):
	"""The page yielded no name, no level and no hit points."""
