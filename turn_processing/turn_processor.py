# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

import logging
from typing import List, Optional, Tuple

from cards import create_intro_card, create_order_detail_card
from data_models import WelcomeUserState

from .errors import ConfigurationLoadError
from .events import Member, MembersAdded, Message, Reply, TurnEvent, TurnResult

# Messages sent to the user.
WELCOME_MESSAGE = "This is a simple Welcome Bot sample."

FIRST_WELCOME_ONE = (
    "You are seeing this message because this was your first message ever to this bot."
)

FIRST_WELCOME_TWO = "Welcome {}."

INVALID_ID_MESSAGE = "Invalid Id"

DOCUMENTS_UNAVAILABLE_MESSAGE = (
    "Sorry, order details are temporarily unavailable. Please try again later."
)

ECHO = "echo"
INTRO = "intro"

COMMAND_TABLE = {
    "hello": ECHO,
    "hi": ECHO,
    "intro": INTRO,
    "help": INTRO,
}


class TurnProcessor:
    """
      Decides what to send back for a turn and how the user's state changes.

      Nothing here touches the bot framework's turn context; the bot class
      feeds events in and sends the replies it gets back.
    """

    def __init__(self, documents):
        self.documents = documents

    def process(self, event: TurnEvent, state: Optional[WelcomeUserState] = None) -> TurnResult:
        if isinstance(event, MembersAdded):
            logging.info(f"Members added: {len(event.members)}")
            return TurnResult(self.handle_members_added(event.members, event.recipient_id), state)
        if isinstance(event, Message):
            replies, new_state = self.handle_message(state, event.text, event.display_name)
            return TurnResult(replies, new_state)
        raise TypeError(f"Unsupported turn event: {type(event).__name__}")

    def handle_members_added(self, members: List[Member], self_id: Optional[str]) -> List[Reply]:
        return [
            Reply(text=f"Hi there - {member.display_name}. {WELCOME_MESSAGE}")
            for member in members
            if member.id != self_id
        ]

    def handle_message(
        self, state: Optional[WelcomeUserState], text: Optional[str], sender_name: Optional[str]
    ) -> Tuple[List[Reply], WelcomeUserState]:
        if state is None:
            state = WelcomeUserState()
        text = text or ""

        if not state.welcomed:
            # the channel should send the user name in the 'from' object
            logging.info(f"First message from {sender_name}, sending welcome")
            replies = [
                Reply(text=FIRST_WELCOME_ONE),
                Reply(text=FIRST_WELCOME_TWO.format(sender_name)),
            ]
            return replies, WelcomeUserState(welcomed=True)

        # Hardcoded utterances only; a real bot would hand this to an NLU service.
        lowered = text.lower()
        action = COMMAND_TABLE.get(lowered)
        if action == ECHO:
            return [Reply(text=f"You said {lowered}")], state
        if action == INTRO:
            return [Reply(attachment=create_intro_card())], state
        return [self.lookup_order(text)], state

    def lookup_order(self, text: str) -> Reply:
        """Send the order detail card when ``text`` is exactly the reference id."""
        try:
            reference_id = self.documents.reference_id()
            if text != reference_id:
                logging.info(f"No order matches '{text}'")
                return Reply(text=INVALID_ID_MESSAGE)
            template = self.documents.card_template()
        except ConfigurationLoadError as e:
            logging.error(f"Order lookup failed: {e}")
            return Reply(text=DOCUMENTS_UNAVAILABLE_MESSAGE)

        logging.info(f"Order {reference_id} matched, sending card")
        return Reply(attachment=create_order_detail_card(template))
