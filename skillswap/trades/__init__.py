"""Trade negotiation between two users."""
from .trade_service import StatusChange, Trade, TradeService

__all__ = ["StatusChange", "Trade", "TradeService"]
