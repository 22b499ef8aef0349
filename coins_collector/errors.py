"""Exception types for coins-collector."""


class CoinsError(Exception):
    """Base class for errors raised by coins-collector."""


class ParseError(CoinsError):
    """The document parser rejected the markup."""


class MalformedContextObject(CoinsError, ValueError):
    """A ContextObject pair token has no ``=`` separator."""

    def __init__(self, token: str, raw: str):
        self.token = token
        self.raw = raw
        super().__init__(f"Malformed ContextObject pair {token!r} in {raw!r}")
