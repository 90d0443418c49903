class BaseError(Exception):
    """
    Base package exception.
    """


class InvalidArgumentError(BaseError, ValueError):
    """
    Indicates that an item can't be stored in a heap (`None` for example).
    """
