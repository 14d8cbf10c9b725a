# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

import logging
from typing import List

from botbuilder.core import ActivityHandler, TurnContext, UserState
from botbuilder.schema import ChannelAccount

from data_models import WelcomeUserState
from turn_processing import Member, MembersAdded, Message, Reply, StateAccessError, TurnProcessor


class WelcomeUserBot(ActivityHandler):
    """
      Greets new members and remembers, per user, whether they were welcomed.

      The decisions are made by ``TurnProcessor``; this class only moves data
      between the turn context, the user state and the processor. Replies are
      sent before the state is saved.
    """

    def __init__(self, user_state: UserState, processor: TurnProcessor):
        self.user_state = user_state
        self.processor = processor
        self.user_state_accessor = self.user_state.create_property("WelcomeUserState")

    async def on_turn(self, turn_context: TurnContext):
        await super().on_turn(turn_context)

        # Save any state changes. The replies for this turn have already been sent.
        try:
            await self.user_state.save_changes(turn_context)
        except Exception as e:
            raise StateAccessError(f"Failed to save user state: {e}") from e

    async def on_members_added_activity(
        self, members_added: [ChannelAccount], turn_context: TurnContext
    ):
        event = MembersAdded(
            members=[Member(member.id, member.name) for member in members_added],
            recipient_id=turn_context.activity.recipient.id,
        )
        result = self.processor.process(event)
        await self._send_replies(turn_context, result.replies)

    async def on_message_activity(self, turn_context: TurnContext):
        try:
            welcome_user_state = await self.user_state_accessor.get(
                turn_context, WelcomeUserState
            )
        except Exception as e:
            raise StateAccessError(f"Failed to read user state: {e}") from e

        activity = turn_context.activity
        event = Message(
            text=activity.text,
            sender_name=activity.from_property.name,
            sender_id=activity.from_property.id,
        )
        result = self.processor.process(event, welcome_user_state)

        await self._send_replies(turn_context, result.replies)
        await self.user_state_accessor.set(turn_context, result.state)

    async def _send_replies(self, turn_context: TurnContext, replies: List[Reply]):
        if not replies:
            return
        logging.info(f"Sending {len(replies)} replies")
        await turn_context.send_activities([reply.to_activity() for reply in replies])
