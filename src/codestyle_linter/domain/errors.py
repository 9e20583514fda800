"""Domain exceptions."""


class CodestyleError(Exception):
    """Base class for errors raised by the convention engine."""


class AnalysisCancelled(CodestyleError):
    """The host cancelled an in-flight evaluation; nothing was reported for it."""
