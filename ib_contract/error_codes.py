class InvalidArgument(ValueError):
    """Raised when a field assignment violates that field's rule"""

class Unimplemented(NotImplementedError):
    """Raised by serializations the client does not support yet"""
