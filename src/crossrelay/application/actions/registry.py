"""Ordered action registry."""

import logging
from collections.abc import Iterator

from crossrelay.domain.entities import Message
from crossrelay.domain.services import Action

logger = logging.getLogger(__name__)


class ActionRegistry:
    """Holds actions in registration order.

    Matching is first-match-wins: the first registered action whose
    predicate accepts a message handles it, and no later action is asked.
    """

    def __init__(self, actions: list[Action] | None = None) -> None:
        """Initialize the registry.

        Args:
            actions: Actions to register, in priority order.
        """
        self._actions: list[Action] = []
        for action in actions or []:
            self.register(action)

    def register(self, action: Action) -> None:
        """Register an action after all previously registered ones.

        Args:
            action: The action.

        Raises:
            ValueError: If an action with the same name is registered.
        """
        if any(existing.name == action.name for existing in self._actions):
            raise ValueError(f"Action already registered: {action.name}")
        self._actions.append(action)
        logger.debug("Registered action: %s", action.name)

    def find(self, message: Message) -> Action | None:
        """Find the action that handles a message.

        Args:
            message: Inbound message.

        Returns:
            The first matching action, or None.
        """
        for action in self._actions:
            if action.should_execute(message):
                return action
        return None

    @property
    def names(self) -> list[str]:
        """Registered action names in matching order."""
        return [action.name for action in self._actions]

    def __iter__(self) -> Iterator[Action]:
        return iter(self._actions)

    def __len__(self) -> int:
        return len(self._actions)
