

class QbError(Exception):
    """ Base class for all qbscript errors"""
    pass


class QbInvalidSymbol(QbError):
    """ Raised when something other than a Symbol is used as a binding name"""
    pass


class QbUnboundSymbol(QbError):
    """ Raised when an unbound symbol is looked up directly in an Environment"""
    pass


class QbSyntaxError(QbError):
    """ Raised when the leading text does not match the grammar"""

    def __init__(self, message: str, position: int = 0, expected: str = "", source: str = ""):
        self.position = position
        self.expected = expected
        self.source = source
        excerpt = source[position:position + 20]
        if excerpt:
            message = f"{message} at {position}: {excerpt!r}"
        else:
            message = f"{message} at {position}"
        super().__init__(message)


class QbArityError(QbError):
    """ Raised when a form or procedure is given fewer operands than it reads"""
