from dataclasses import dataclass


@dataclass
class ErrorVal:
    """Describes a bscript failure.

    `name` is the error kind (e.g. 'SyntaxError', 'UndefinedVariableError')
    and `message` is the human readable diagnostic.
    """
    name: str
    message: str

    def __repr__(self) -> str:
        return f"Error(name={self.name!r}, message={self.message!r})"


class BScriptError(Exception):
    """Exception type used to abort a bscript run."""
    def __init__(self, err: ErrorVal):
        super().__init__(f"BScriptError: {err.name}: {err.message}")
        self.err = err

    @property
    def name(self) -> str:
        return self.err.name
