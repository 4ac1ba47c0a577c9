"""Watch Ethereum addresses, record their transactions and serve them as a WSGI application."""

__version__ = "0.1.0"