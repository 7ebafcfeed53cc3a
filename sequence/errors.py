"""
Error codes and EngineError exceptions for rule violations.
"""
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    ERR_GENERIC = "ERR_GENERIC"
    ERR_NO_CARD = "ERR_NO_CARD"
    ERR_CARD_NOT_IN_HAND = "ERR_CARD_NOT_IN_HAND"
    ERR_TARGET_OCCUPIED = "ERR_TARGET_OCCUPIED"
    ERR_FREE_SPACE = "ERR_FREE_SPACE"
    ERR_NOT_MATCHING_CARD = "ERR_NOT_MATCHING_CARD"
    ERR_NO_CHIP_TO_REMOVE = "ERR_NO_CHIP_TO_REMOVE"
    ERR_CANNOT_REMOVE_OWN_CHIP = "ERR_CANNOT_REMOVE_OWN_CHIP"
    ERR_GAME_OVER = "ERR_GAME_OVER"
    ERR_INVALID_COORDINATE = "ERR_INVALID_COORDINATE"


class EngineError(Exception):
    """Base exception for rules engine errors.

    Attributes:
        code: ErrorCode enum
        message: optional human message (for logs and notifications)
        details: optional structured data (e.g. {'r': 3, 'c': 2, 'card': 'AS'})
    """

    default_code = ErrorCode.ERR_GENERIC

    def __init__(
        self,
        code: Optional[ErrorCode] = None,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.code = code or self.default_code
        self.details = details or {}
        super().__init__(message or self.code.value)

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code.value, "message": str(self), "details": self.details}


class InvalidMove(EngineError):
    """The selected card cannot legally act on the selected cell."""

    default_code = ErrorCode.ERR_GENERIC


class GameAlreadyOver(EngineError):
    default_code = ErrorCode.ERR_GAME_OVER


class InvalidCoordinate(EngineError):
    """Row/col outside the board; raised instead of silently misbehaving."""

    default_code = ErrorCode.ERR_INVALID_COORDINATE
