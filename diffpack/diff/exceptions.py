"""Diff subsystem exceptions."""


class ReconciliationInvariantError(AssertionError):
    """A reconciled object key was found in neither input object.

    Only reachable through an internal bug; never reported as a user error.
    """
