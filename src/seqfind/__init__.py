"""seqfind — typed lookup and error-propagation idioms for integer arrays.

Linear search with an explicit not-found result, and a JSON array loader
offering classified, opaque and local-recovery error handling.
"""

from seqfind.version import __version__

__all__: list[str] = ["__version__"]
