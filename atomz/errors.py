"""
Exceptions raised by atomz.

The engine reports ordinary failures as values: an out-of-bounds lookup
returns None, a refused mutation returns False and a refused action comes
back in ``DispatchResult.rejected``. The classes below cover what a host
cannot fix by sending another action: bad settings, game setups that
break a state invariant and rule sets whose reaction chains run away.

Each error carries a stable ``code`` and a ``context`` dict that
``to_dict()`` exposes for structured logs:

    try:
        game = new_classic_game(players, width, height)
    except InvalidStateError as e:
        logger.error("cannot start game: %s", e.to_dict())
"""

from typing import Any

__all__ = [
    "AtomzError",
    "ConfigurationError",
    "InvalidActionError",
    "InvalidStateError",
    "ReactionLimitExceededError",
    "RulesViolationError",
]


class AtomzError(Exception):
    """Root of the atomz exceptions.

    ``context`` is a private copy of the mapping given by the caller;
    subclasses add their own keys to it.
    """
    code: str = "ATOMZ_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or type(self).code
        self.context = dict(context) if context else {}

    def __str__(self) -> str:
        if not self.context:
            return f"[{self.code}] {self.message}"
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"[{self.code}] {self.message} ({details})"

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "context": dict(self.context)}


class ConfigurationError(AtomzError):
    """Invalid engine configuration (e.g. a malformed environment value)."""
    code: str = "CONFIGURATION_ERROR"

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.setting = setting
        if setting:
            self.context["setting"] = setting


class InvalidStateError(AtomzError):
    """A game state that cannot be built or should not exist.

    Raised when a game is set up from inconsistent input, for example
    with no players or with a board whose corners do not form a volume.
    """
    code: str = "INVALID_STATE"


# =============================================================================
# Game Rules Errors
# =============================================================================


class RulesViolationError(AtomzError):
    """The rule cycle broke one of its own guarantees.

    Attributes:
        action_type: ``type`` of the action being processed, when known
    """
    code: str = "RULES_VIOLATION"

    def __init__(
        self,
        message: str,
        action_type: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.action_type = action_type
        if action_type:
            self.context["action_type"] = action_type


class ReactionLimitExceededError(RulesViolationError):
    """A reaction chain ran past the dispatcher's ceiling.

    Termination of reaction chains is a property of the concrete rule set;
    hitting the ceiling means the rule set does not terminate for the
    current state.
    """
    code: str = "REACTION_LIMIT_EXCEEDED"

    def __init__(
        self,
        message: str,
        limit: int,
        action_type: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, action_type=action_type, context=context)
        self.limit = limit
        self.context["limit"] = limit


class InvalidActionError(RulesViolationError):
    """Action rejected by the rule cycle.

    Only raised by callers that opt into exceptions
    (``ActionDispatcher.dispatch_or_raise``); the default path reports
    rejections as values.
    """
    code: str = "INVALID_ACTION"
