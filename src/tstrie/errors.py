class TrieError(Exception):
    """Exception raised by the ternary search trie."""

    def __init__(self, message, origin=None):
        """
        Parameters
        ----------
        message : str
            The exception message
        origin : str
            Name of the operation that raised the exception
        """
        super().__init__(message, origin)
        self.message = message
        self.origin = origin

    def __str__(self):
        if self.origin:
            return f"{self.origin}: {self.message}"
        return self.message


class InvalidKeyError(TrieError, TypeError):
    """Key is not a string."""


class EmptyKeyError(TrieError, ValueError):
    """Key is the empty string."""


def validate_type(key, origin=None):
    """Raise InvalidKeyError unless key is a string.
    """
    if not isinstance(key, str):
        msg = ("only strings can be used as keys, "
               f"received {type(key).__name__}")
        raise InvalidKeyError(msg, origin)


def validate_key(key, origin=None):
    """Check that key can be stored in a trie.

    Parameters
    ----------
    key : object
        Candidate key.
    origin : str
        Name of the calling operation, used in the error message.

    Raises
    ------
    InvalidKeyError
        If key is not a string.
    EmptyKeyError
        If key has no characters.
    """
    validate_type(key, origin)

    if not key:
        raise EmptyKeyError("keys must contain at least one character",
                            origin)
