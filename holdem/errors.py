"""Errors the engine hands back to callers.

Every rejection happens before any state is touched, so callers can catch the
error, re-prompt and try again against the same hand.
"""


class ActionRejected(ValueError):
    code = "ACTION_REJECTED"

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg


class RaiseOutOfBounds(ActionRejected):
    code = "RAISE_OUT_OF_BOUNDS"


class ActionNotAllowed(ActionRejected):
    code = "ACTION_NOT_ALLOWED"


class InsufficientStack(ActionRejected):
    code = "INSUFFICIENT_STACK"


class InvalidPlayerCount(ValueError):
    code = "INVALID_PLAYER_COUNT"
