"""cmdsim: a configurable command-line tool simulator.

Parses one command line into a name, flags and positional arguments and
dispatches it to a handler registered in a static handler table.
"""

from cmdsim.version import __version__

__all__: list[str] = ["__version__"]
