"""Message orchestration pipeline."""

import logging

from crossrelay.application.actions import ActionRegistry
from crossrelay.config import PersonaConfig
from crossrelay.domain.entities import (
    ActionResult,
    ConversationTurn,
    MemoryType,
    Message,
    Role,
)
from crossrelay.domain.repositories import MemoryStore
from crossrelay.domain.services import (
    LanguageModelGateway,
    ReplyDispatcher,
    combine_context,
)

logger = logging.getLogger(__name__)

ANALYSIS_SEPARATOR = "\n\n🔍 Analysis:\n"


def join_elaboration(action_text: str, elaboration: str) -> str:
    """Append a model elaboration to an action's literal text."""
    return f"{action_text}{ANALYSIS_SEPARATOR}{elaboration}"


def remembered_statement(message: Message) -> str:
    """Long-term memory text for a message the model answered."""
    return f"Said on {message.platform.value}: {message.text}"


class Orchestrator:
    """Turns one inbound message into one reply.

    Deterministic actions are checked first. Only when none matches is the
    conversation history loaded and a reply generated by the model. Every
    collaborator error propagates to the caller; nothing is retried and
    partial progress is not rolled back.
    """

    def __init__(
        self,
        actions: ActionRegistry,
        memory_store: MemoryStore,
        gateway: LanguageModelGateway,
        dispatcher: ReplyDispatcher,
        persona: PersonaConfig,
        history_limit: int | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            actions: Actions in matching order.
            memory_store: Conversation history and long-term memory.
            gateway: Language model gateway.
            dispatcher: Routes replies to platform adapters.
            persona: Persona whose system prompt leads every generation.
            history_limit: Number of recent turns loaded as context.
                None loads the full history.
        """
        self._actions = actions
        self._memory_store = memory_store
        self._gateway = gateway
        self._dispatcher = dispatcher
        self._persona = persona
        self._history_limit = history_limit

    async def process_message(self, message: Message) -> ActionResult:
        """Process an inbound message and send the reply.

        Processing flow:
        1. Check actions (first match wins, no history is loaded)
        2. Action without context: send its text as is
        3. Action with context: send its text followed by a model elaboration
        4. No action: load history and long-term memory
        5. Generate a reply with persona, context and message text
        6. Store the user and assistant turns
        7. Remember what the user said under their username
        8. Send the reply

        Args:
            message: Canonical inbound message.

        Returns:
            The delivered result.

        Raises:
            Exception: Any action, memory, gateway or adapter error.
        """
        logger.info(
            "Processing message: platform=%s, id=%s",
            message.platform.value,
            message.id,
        )
        try:
            action_result = await self._check_actions(message)
            if action_result is not None:
                return await self._deliver_action_result(action_result, message)

            response = await self._generate_reply(message)

            conversation_id = message.conversation_id
            await self._memory_store.append_turn(
                conversation_id, ConversationTurn(role=Role.USER, content=message.text)
            )
            await self._memory_store.append_turn(
                conversation_id,
                ConversationTurn(role=Role.ASSISTANT, content=response),
            )
            await self._memory_store.remember(
                message.author.username,
                remembered_statement(message),
                MemoryType.CONVERSATION,
            )

            await self._dispatcher.dispatch(response, message)
            return ActionResult(text=response, should_send_message=True)
        except Exception:
            logger.exception("Error processing message: id=%s", message.id)
            raise

    async def process_scheduled_message(
        self,
        message: Message,
        context: str | None = None,
    ) -> ActionResult | None:
        """Process a synthesized message for a periodic job.

        Runs the action check and the model elaboration only. History is
        never read or written and nothing is dispatched; the caller delivers
        the returned text itself.

        Args:
            message: Pseudo-message describing the job.
            context: System context overriding the action's context.

        Returns:
            The model's elaboration when a context applies, the action result
            when none does, or None when no action matched.

        Raises:
            Exception: Any action or gateway error.
        """
        logger.info(
            "Processing scheduled message: platform=%s, text=%s",
            message.platform.value,
            message.text,
        )
        try:
            action_result = await self._check_actions(message)
            if action_result is None:
                return None

            effective_context = context or action_result.context
            if not effective_context:
                return action_result

            elaboration = await self._gateway.generate(
                [
                    {"role": "system", "content": effective_context},
                    {"role": "user", "content": action_result.text},
                ],
                message.platform,
            )
            # Scheduled posts carry the analysis only, not the raw data
            return ActionResult(
                text=elaboration,
                should_send_message=True,
                embeds=action_result.embeds,
            )
        except Exception:
            logger.exception("Error processing scheduled message: id=%s", message.id)
            raise

    async def _check_actions(self, message: Message) -> ActionResult | None:
        """Run the first action that accepts the message.

        Only the current message is inspected, never its history.
        """
        action = self._actions.find(message)
        if action is None:
            return None
        logger.info("Executing action: %s", action.name)
        return await action.execute(message)

    async def _deliver_action_result(
        self,
        action_result: ActionResult,
        message: Message,
    ) -> ActionResult:
        """Send an action's result, elaborated by the model if it asks to be."""
        if not action_result.needs_elaboration:
            await self._dispatcher.dispatch(
                action_result.text, message, action_result.embeds
            )
            return action_result

        assert action_result.context is not None
        elaboration = await self._gateway.generate(
            [
                {"role": "system", "content": action_result.context},
                {"role": "user", "content": action_result.text},
            ],
            message.platform,
        )
        final_text = join_elaboration(action_result.text, elaboration)
        await self._dispatcher.dispatch(final_text, message, action_result.embeds)
        return ActionResult(
            text=final_text,
            should_send_message=True,
            embeds=action_result.embeds,
        )

    async def _generate_reply(self, message: Message) -> str:
        """Build the model context from memory and generate a reply."""
        history = await self._memory_store.get_turns(
            message.conversation_id, limit=self._history_limit
        )
        long_term_entries = await self._memory_store.get_long_term(
            message.author.username
        )
        long_term_context = self._memory_store.format_for_context(long_term_entries)
        full_context = combine_context(long_term_context, history)

        logger.debug(
            "Generating reply: conversation=%s, turns=%d, memories=%d",
            message.conversation_id,
            len(history),
            len(long_term_entries),
        )

        return await self._gateway.generate(
            [
                {"role": "system", "content": self._persona.system_prompt},
                {"role": "system", "content": full_context},
                {"role": "user", "content": message.text},
            ],
            message.platform,
        )
