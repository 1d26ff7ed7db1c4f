"""Early-stage SQL database engine: page layouts, a locked-file pager, a socket-binding server and a command-line entry point."""

__version__ = "0.1.0"