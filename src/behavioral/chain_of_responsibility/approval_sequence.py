"""
approval_sequence.py — the approval chain as a fixed, ordered sequence.

Instead of approvers holding mutable links to each other, a builder collects
roles up front and freezes them into an ApprovalChain. Dispatch walks that
tuple by index, so a chain can never contain a cycle or a dangling link.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from behavioral.chain_of_responsibility.purchase_approval_chain import (
    ApprovalResult,
    Approver,
    ApproverRole,
)

logger = logging.getLogger(__name__)


class EmptyChainError(ValueError):
    """
    Raised when building an approval chain without any roles.
    """


@dataclass(frozen=True, slots=True)
class ApprovalChain:
    """
    Immutable ordered sequence of approval roles.

    :param roles: Roles in dispatch order; the first one that can approve wins.
                  Any iterable is accepted and copied into a tuple.
    :raises EmptyChainError: If no roles are given.
    """
    roles: Tuple[ApproverRole, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "roles", tuple(self.roles))
        if not self.roles:
            raise EmptyChainError("An approval chain needs at least one role.")

    @classmethod
    def default(cls) -> ApprovalChain:
        """
        :return: Manager → Director → Vice President.
        """
        return ApprovalChainBuilder().add_all(ApproverRole).build()

    def handle(self, amount: int) -> Optional[ApprovalResult]:
        """
        Finds the first role whose limit covers the amount.

        :param amount: Requested purchase amount.
        :return: Result naming the approver, or None when every limit is exceeded.
        """
        for index, role in enumerate(self.roles):
            if role.can_approve(amount):
                logger.info("%s approved %s at position %d", role.title, amount, index)
                return ApprovalResult(role.title, amount)
        logger.debug("No approver in %d-role chain covers %s", len(self.roles), amount)
        return None

    def process(self, amount: int) -> None:
        """
        Dispatches the amount and prints the approval message, if any.

        :param amount: Requested purchase amount.
        """
        result = self.handle(amount)
        if result is not None:
            print(result.message)

    def to_linked(self) -> Approver:
        """
        Materialises the sequence as linked approvers.

        :return: Head of a fresh linked chain with the same order.
        """
        head = Approver(self.roles[0])
        tail = head
        for role in self.roles[1:]:
            tail = tail.set_next(Approver(role))
        return head

    def __len__(self) -> int:
        return len(self.roles)

    def __iter__(self) -> Iterator[ApproverRole]:
        return iter(self.roles)


class ApprovalChainBuilder:
    """Collects roles fluently, then freezes them into an ApprovalChain."""

    def __init__(self) -> None:
        self._roles: List[ApproverRole] = []

    def add(self, role: ApproverRole) -> ApprovalChainBuilder:
        self._roles.append(role)
        return self

    def add_all(self, roles: Iterable[ApproverRole]) -> ApprovalChainBuilder:
        self._roles.extend(roles)
        return self

    def build(self) -> ApprovalChain:
        """
        :return: An immutable chain of the roles added so far.
        :raises EmptyChainError: If no roles were added.
        """
        return ApprovalChain(tuple(self._roles))


__all__ = [
    "EmptyChainError",
    "ApprovalChain",
    "ApprovalChainBuilder",
]
