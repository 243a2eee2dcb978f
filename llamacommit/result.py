"""Child process termination results.

Contains:
- ChildProcessResult: How a child process ended (exit status or signal)
"""

import signal as signal_module
from typing import Optional

from pydantic import BaseModel, model_validator


class ChildProcessResult(BaseModel):
    """Termination descriptor for a child process.

    Exactly one of ``returncode`` (normal exit) or ``signal`` (killed by a
    signal) is set. A child that could not be launched has no result; that
    case is raised as a spawn error instead.
    """

    returncode: Optional[int] = None
    signal: Optional[int] = None

    @model_validator(mode="after")
    def validate_exactly_one(self) -> "ChildProcessResult":
        """Ensure the result is either an exit or a signal, not both."""
        if (self.returncode is None) == (self.signal is None):
            raise ValueError("exactly one of returncode or signal must be set")
        return self

    @classmethod
    def from_returncode(cls, returncode: int) -> "ChildProcessResult":
        """Build a result from a subprocess return code.

        Negative return codes mean the child was killed by that signal.
        """
        if returncode < 0:
            return cls(signal=-returncode)
        return cls(returncode=returncode)

    @property
    def exited(self) -> bool:
        """True if the child exited normally."""
        return self.returncode is not None

    def describe(self) -> str:
        """Human-readable termination summary."""
        if self.exited:
            return f"exited with status {self.returncode}"
        try:
            name = signal_module.Signals(self.signal).name
        except ValueError:
            name = f"signal {self.signal}"
        return f"terminated by {name}"
