"""
Reservation status rules.

A reservation starts as "pending" when a guest submits the form. Staff then
confirm or cancel it; a confirmed booking can still be cancelled, but a
cancelled one is final.
"""
from typing import Dict, FrozenSet


PENDING = "pending"
CONFIRMED = "confirmed"
CANCELLED = "cancelled"

STATUSES = (PENDING, CONFIRMED, CANCELLED)

ALLOWED_TRANSITIONS: Dict[str, FrozenSet[str]] = {
    PENDING: frozenset({CONFIRMED, CANCELLED}),
    CONFIRMED: frozenset({CANCELLED}),
    CANCELLED: frozenset(),
}


class InvalidStatusTransitionError(Exception):
    """Raised when a reservation can't move from its current status to the requested one."""

    def __init__(self, current: str, requested: str):
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot change reservation status from {current} to {requested}")


def can_transition(current: str, requested: str) -> bool:
    """
    Check whether a status change is allowed.

    Re-applying the current status is always allowed (no-op).
    """
    if requested not in ALLOWED_TRANSITIONS:
        return False
    if current == requested:
        return True
    return requested in ALLOWED_TRANSITIONS.get(current, frozenset())


def check_transition(current: str, requested: str) -> None:
    """Raise InvalidStatusTransitionError if the change is not allowed."""
    if not can_transition(current, requested):
        raise InvalidStatusTransitionError(current, requested)
