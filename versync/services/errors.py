"""Exceptions raised by versync services."""


class VersyncError(Exception):
    """Base error for versync."""


class MissingRefError(VersyncError):
    """The triggering branch ref was not provided to the run."""

    def __init__(self, variable: str = "GITHUB_REF"):
        self.variable = variable
        super().__init__(f"Missing {variable}.")
