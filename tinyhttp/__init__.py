"""A minimal HTTP/1.1 request parser, response writer, server and network tools."""

__version__ = "0.1.0"