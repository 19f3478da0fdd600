"""Errors and warnings raised while reading logic definitions."""

from typing import Optional


class SmtLogicError(Exception):
    """Base class for all smtlogic errors."""
    pass


class MalformedRecord(SmtLogicError, ValueError):
    """
    Raised when text is not a well-formed ``(logic NAME ...)`` form.

    Properties:
        reason: The structural defect (e.g. "missing required field: name")
        line, column: 1-based source position, when known
        path: File the text came from, when known
    """

    def __init__(self, reason: str, line: Optional[int] = None,
                 column: Optional[int] = None, path: Optional[str] = None):
        self.reason = reason
        self.line = line
        self.column = column
        self.path = path
        super().__init__(self._format())

    def _format(self) -> str:
        msg = self.reason
        if self.line is not None:
            msg = f"{msg} (line {self.line}, column {self.column})"
        if self.path is not None:
            msg = f"{self.path}: {msg}"
        return msg

    def with_path(self, path: str) -> "MalformedRecord":
        """Return a copy of this error tagged with the offending file."""
        return MalformedRecord(self.reason, line=self.line, column=self.column, path=path)


class DuplicateLogic(SmtLogicError):
    """Raised when a catalog receives two records with the same name."""
    pass


class UnknownKeyWarning(UserWarning):
    """
    Issued when a logic form carries a ``:key`` this package does not model.

    The value is kept verbatim in ``LogicRecord.extra``; new metadata keys
    appear across SMT-LIB releases.
    """

    def __init__(self, key: str, logic: Optional[str] = None):
        self.key = key
        self.logic = logic
        where = f" in logic {logic}" if logic else ""
        super().__init__(f"Unknown key :{key}{where} kept verbatim")
