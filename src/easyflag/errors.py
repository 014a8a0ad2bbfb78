## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class FlagError(Exception):
    def __init__(self, message: str = "", *, flag=None, token=None):
        """Base class for all errors raised by easyflag."""
        super().__init__(message)
        self.flag: str = flag
        self.token: str = token


class FlagTypeError(TypeError):
    """Declaration-time problem: the bound variable is not a supported slot.

    A programmer error rather than bad input, so it is kept outside FlagError and is not
    caught by the usual `except FlagError` around `FlagSet.parse`.
    """
    def __init__(self, message, *, flag=None, var_type=None):
        super().__init__(message)
        self.flag: str = flag
        self.var_type = var_type

class FlagValueError(FlagError, ValueError):
    """Text could not be converted into the bound kind."""
    def __init__(self, message, *, kind=None, token=None):
        super().__init__(message, token=token)
        self.kind = kind


class FlagNameError(FlagError, NameError):
    """Token on the command-line matched no declared alias."""
    pass

class FlagArgumentError(FlagError, ValueError):
    """Non-boolean flag was the final token, with no value following."""
    pass

class FlagParseError(FlagError, ValueError):
    """Value following a flag was rejected; the original FlagValueError is chained as __cause__."""
    pass
