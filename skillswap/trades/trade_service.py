"""Trade status transitions."""
import logging
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Optional

from skillswap.trades.exceptions import (
    InvalidStatusError,
    InvalidTransitionError,
    NotParticipantError,
    SelfTradeError,
    UnauthorizedActionError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatusChange:
    """One entry in a trade's status history."""

    from_status: Optional[str]
    to_status: str
    changed_by: str
    changed_at: datetime
    notes: Optional[str] = None


@dataclass(frozen=True)
class Trade:
    """A proposed exchange of one skill for another."""

    id: str
    proposer_id: str
    receiver_id: str
    offered_skill_id: str
    requested_skill_id: Optional[str] = None
    status: str = "proposed"
    message: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    history: tuple[StatusChange, ...] = ()

    def is_participant(self, user_id: str) -> bool:
        return user_id in (self.proposer_id, self.receiver_id)


class TradeService:
    """Apply status transitions to trades.

    Persistence is the caller's concern: every operation returns a new Trade.
    """

    # proposed -> accepted -> completed
    # proposed -> declined, proposed|accepted -> cancelled
    STATUSES = ["proposed", "accepted", "declined", "cancelled", "completed"]
    TERMINAL_STATUSES = ["declined", "cancelled", "completed"]

    # new status -> statuses it may be reached from
    TRANSITIONS = {
        "accepted": ["proposed"],
        "declined": ["proposed"],
        "cancelled": ["proposed", "accepted"],
        "completed": ["accepted"],
    }

    # Only the receiver answers a proposal; only the proposer withdraws it
    RECEIVER_ONLY = {"accepted": "accept", "declined": "decline"}
    PROPOSER_ONLY = {"cancelled": "cancel"}

    def propose(
        self,
        proposer_id: str,
        receiver_id: str,
        offered_skill_id: str,
        requested_skill_id: Optional[str] = None,
        message: Optional[str] = None,
    ) -> Trade:
        """
        Create a new trade proposal.

        Args:
            proposer_id: User making the proposal
            receiver_id: User the proposal is sent to
            offered_skill_id: Skill the proposer offers
            requested_skill_id: Skill the proposer wants in return
            message: Optional note to the receiver

        Returns:
            Trade in 'proposed' status
        """
        if proposer_id == receiver_id:
            raise SelfTradeError(proposer_id)

        now = datetime.now(timezone.utc)
        trade = Trade(
            id=str(uuid.uuid4()),
            proposer_id=proposer_id,
            receiver_id=receiver_id,
            offered_skill_id=offered_skill_id,
            requested_skill_id=requested_skill_id,
            message=message,
            created_at=now,
            updated_at=now,
            history=(StatusChange(None, "proposed", proposer_id, now),),
        )
        logger.info("Trade %s proposed by %s to %s", trade.id, proposer_id, receiver_id)
        return trade

    def update_status(
        self,
        trade: Trade,
        new_status: str,
        actor_id: str,
        notes: Optional[str] = None,
    ) -> Trade:
        """
        Move a trade to a new status with history tracking.

        Args:
            trade: Current trade
            new_status: Requested status
            actor_id: User performing the change
            notes: Notes about the status change

        Returns:
            Updated trade
        """
        if new_status not in self.STATUSES:
            raise InvalidStatusError(new_status)

        if not trade.is_participant(actor_id):
            raise NotParticipantError(actor_id, trade.id)

        if trade.status not in self.TRANSITIONS.get(new_status, []):
            raise InvalidTransitionError(trade.status, new_status)

        action = self.RECEIVER_ONLY.get(new_status)
        if action and actor_id != trade.receiver_id:
            raise UnauthorizedActionError(actor_id, action)

        action = self.PROPOSER_ONLY.get(new_status)
        if action and actor_id != trade.proposer_id:
            raise UnauthorizedActionError(actor_id, action)

        now = datetime.now(timezone.utc)
        change = StatusChange(trade.status, new_status, actor_id, now, notes)

        logger.info("Trade %s: %s -> %s by %s", trade.id, trade.status, new_status, actor_id)
        return replace(
            trade,
            status=new_status,
            updated_at=now,
            history=trade.history + (change,),
        )

    def accept(self, trade: Trade, actor_id: str) -> Trade:
        return self.update_status(trade, "accepted", actor_id)

    def decline(self, trade: Trade, actor_id: str, notes: Optional[str] = None) -> Trade:
        return self.update_status(trade, "declined", actor_id, notes)

    def cancel(self, trade: Trade, actor_id: str, notes: Optional[str] = None) -> Trade:
        return self.update_status(trade, "cancelled", actor_id, notes)

    def complete(self, trade: Trade, actor_id: str) -> Trade:
        return self.update_status(trade, "completed", actor_id)

    def is_terminal(self, trade: Trade) -> bool:
        return trade.status in self.TERMINAL_STATUSES

    def allowed_transitions(self, trade: Trade, actor_id: str) -> list[str]:
        """Statuses the given user may move the trade to right now."""
        if not trade.is_participant(actor_id):
            return []
        allowed = []
        for status, sources in self.TRANSITIONS.items():
            if trade.status not in sources:
                continue
            if status in self.RECEIVER_ONLY and actor_id != trade.receiver_id:
                continue
            if status in self.PROPOSER_ONLY and actor_id != trade.proposer_id:
                continue
            allowed.append(status)
        return allowed
