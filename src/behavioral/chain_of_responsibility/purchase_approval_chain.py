"""
Chain of Responsibility (Behavioral) — purchase approvals.

Intent:
    A purchase request travels along approvers ordered by authority. The first
    approver whose limit covers the amount approves it; everyone else passes
    the request on unchanged.

Participants:
    - ApproverRole: the approval limits and display names (one table).
    - Approver: a chain link holding a role and an optional successor.
    - Manager / Director / VicePresident: approvers bound to a fixed role.
    - Client: builds the chain with `set_next` and talks only to its head.

Notes:
    - Amounts are plain integers; there is no validation, so negative
      amounts are simply approved by the first link.
    - A request above every limit falls off the end of the chain: nothing is
      printed and nothing is raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class ApproverRole(Enum):
    """Approval roles with their inclusive purchase limits."""
    MANAGER = ("Manager", 1000)
    DIRECTOR = ("Director", 5000)
    VICE_PRESIDENT = ("Vice President", 10000)

    def __init__(self, title: str, threshold: int) -> None:
        self.title = title
        self.threshold = threshold

    def can_approve(self, amount: int) -> bool:
        """
        :param amount: Requested purchase amount.
        :return: True if the amount is within this role's limit.
        """
        return amount <= self.threshold


@dataclass(frozen=True, slots=True)
class ApprovalResult:
    """Outcome of a handled purchase request.

    :ivar approver: Display name of the approver that handled the request.
    :ivar amount: The approved amount, exactly as requested.
    """
    approver: str
    amount: int

    @property
    def message(self) -> str:
        return f"{self.approver} approves the purchase request of {self.amount}"


class Approver:
    """A single link in the approval chain.

    Subclasses only pick a role; the approve-or-forward logic lives here.

    :param role: Role whose limit and title this approver uses.
    :param next_approver: Optional successor to forward requests to.
    """

    role: Optional[ApproverRole] = None

    def __init__(self, role: Optional[ApproverRole] = None,
                 next_approver: Optional[Approver] = None) -> None:
        role = role or self.role
        if role is None:
            raise TypeError(f"{type(self).__name__} needs an ApproverRole")
        self.role = role
        self._next: Optional[Approver] = next_approver

    @property
    def threshold(self) -> int:
        return self.role.threshold

    @property
    def title(self) -> str:
        return self.role.title

    @property
    def next(self) -> Optional[Approver]:
        """
        :return: The successor, or None when this approver ends the chain.
        """
        return self._next

    def set_next(self, approver: Approver) -> Approver:
        """Link a successor and return it for fluent chain building.

        :param approver: The approver to forward unhandled requests to.
        :return: The same approver, so calls can be chained.
        """
        self._next = approver
        return approver

    def handle(self, amount: int) -> Optional[ApprovalResult]:
        """Approve the amount here or forward it down the chain.

        :param amount: Requested purchase amount.
        :return: Result naming the approving link, or None if no link approved it.
        """
        if self.role.can_approve(amount):
            logger.info("%s approved %s", self.title, amount)
            return ApprovalResult(self.title, amount)
        return self._delegate(amount)

    def process(self, amount: int) -> None:
        """Dispatch the amount and print the approval message, if any.

        :param amount: Requested purchase amount.
        """
        result = self.handle(amount)
        if result is not None:
            print(result.message)

    def _delegate(self, amount: int) -> Optional[ApprovalResult]:
        if self._next is None:
            logger.debug("%s is the end of the chain; %s left unhandled", self.title, amount)
            return None
        logger.debug("%s forwards %s to %s", self.title, amount, self._next.title)
        return self._next.handle(amount)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(threshold={self.threshold})"


class Manager(Approver):
    """Approves purchases up to 1000."""
    role = ApproverRole.MANAGER


class Director(Approver):
    """Approves purchases up to 5000."""
    role = ApproverRole.DIRECTOR


class VicePresident(Approver):
    """Approves purchases up to 10000."""
    role = ApproverRole.VICE_PRESIDENT


def build_default_chain() -> Approver:
    """Build the canonical chain (Manager → Director → Vice President).

    :return: The head of the approval chain.
    """
    head = Manager()
    head.set_next(Director()).set_next(VicePresident())
    return head


__all__ = [
    "ApproverRole",
    "ApprovalResult",
    "Approver",
    "Manager",
    "Director",
    "VicePresident",
    "build_default_chain",
]
