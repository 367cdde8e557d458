"""Action result entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ActionResult:
    """Outcome of an action or of a processed message.

    Attributes:
        text: Reply text.
        should_send_message: Whether the text is meant to be delivered.
        context: System context for a follow-up model call. When set, the
            model elaborates on ``text`` instead of ``text`` being sent alone.
        embeds: Rich attachments handed to the platform adapter unmodified.
    """

    text: str
    should_send_message: bool = True
    context: str | None = None
    embeds: tuple[Any, ...] = ()

    @property
    def needs_elaboration(self) -> bool:
        """Check if the result asks for a model elaboration."""
        return bool(self.context)
