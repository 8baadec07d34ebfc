"""Trade exceptions for SkillSwap."""


class TradeError(Exception):
    """Base exception for trade errors."""

    pass


class InvalidStatusError(TradeError):
    """Raised when a status name is not a known trade status."""

    def __init__(self, status: str):
        self.status = status
        super().__init__(f"Invalid trade status: {status}")


class InvalidTransitionError(TradeError):
    """Raised when a trade cannot move from its current status to the requested one."""

    def __init__(self, current: str, requested: str):
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot move trade from '{current}' to '{requested}'")


class NotParticipantError(TradeError):
    """Raised when a user acts on a trade they are not part of."""

    def __init__(self, user_id: str, trade_id: str):
        self.user_id = user_id
        self.trade_id = trade_id
        super().__init__(f"User {user_id} is not a participant in trade {trade_id}")


class UnauthorizedActionError(TradeError):
    """Raised when a participant performs an action reserved for the other party."""

    def __init__(self, user_id: str, action: str):
        self.user_id = user_id
        self.action = action
        super().__init__(f"User {user_id} is not allowed to {action} this trade")


class SelfTradeError(TradeError):
    """Raised when a user proposes a trade to themselves."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User {user_id} cannot trade with themselves")
