import pytest
from botbuilder.schema import ActionTypes

from data_models import WelcomeUserState
from turn_processing import (
    ConfigurationLoadError,
    Member,
    MembersAdded,
    Message,
    TurnProcessor,
)
from turn_processing.turn_processor import (
    DOCUMENTS_UNAVAILABLE_MESSAGE,
    FIRST_WELCOME_ONE,
    INVALID_ID_MESSAGE,
)


def _texts(replies):
    return [reply.text for reply in replies]


def test_members_added_greets_everyone_but_the_bot(processor: TurnProcessor) -> None:
    members = [Member("u1", "Alex"), Member("bot", "Bot"), Member("u2", "Sam")]

    replies = processor.handle_members_added(members, "bot")

    assert _texts(replies) == [
        "Hi there - Alex. This is a simple Welcome Bot sample.",
        "Hi there - Sam. This is a simple Welcome Bot sample.",
    ]


def test_members_added_with_only_the_bot_sends_nothing(processor: TurnProcessor) -> None:
    assert processor.handle_members_added([Member("bot", "Bot")], "bot") == []


def test_members_added_empty_list(processor: TurnProcessor) -> None:
    assert processor.handle_members_added([], "bot") == []


def test_members_added_without_name_uses_id(processor: TurnProcessor) -> None:
    replies = processor.handle_members_added([Member("29:abc")], "bot")
    assert _texts(replies) == ["Hi there - 29:abc. This is a simple Welcome Bot sample."]


def test_first_message_welcomes_and_skips_commands(processor: TurnProcessor) -> None:
    replies, state = processor.handle_message(WelcomeUserState(welcomed=False), "hi", "Alex")

    assert _texts(replies) == [
        "You are seeing this message because this was your first message ever to this bot.",
        "Welcome Alex.",
    ]
    assert state.welcomed is True


def test_missing_state_is_treated_as_not_welcomed(processor: TurnProcessor) -> None:
    replies, state = processor.handle_message(None, "help", "Sam")

    assert _texts(replies) == [FIRST_WELCOME_ONE, "Welcome Sam."]
    assert state == WelcomeUserState(welcomed=True)


def test_welcome_is_sent_only_once(processor: TurnProcessor) -> None:
    _, state = processor.handle_message(None, "hello", "Alex")
    replies, state = processor.handle_message(state, "hello", "Alex")

    assert _texts(replies) == ["You said hello"]
    assert state.welcomed is True


@pytest.mark.parametrize("text", ["HELLO", "Hi", "hello", "hI"])
def test_greetings_are_case_insensitive(processor: TurnProcessor, text: str) -> None:
    replies, _ = processor.handle_message(WelcomeUserState(welcomed=True), text, "Alex")
    assert _texts(replies) == [f"You said {text.lower()}"]


@pytest.mark.parametrize("text", ["intro", "help", "HELP", "Intro"])
def test_intro_and_help_send_the_intro_card(processor: TurnProcessor, text: str) -> None:
    replies, _ = processor.handle_message(WelcomeUserState(welcomed=True), text, "Alex")

    assert len(replies) == 1
    attachment = replies[0].attachment
    assert attachment.content_type == "application/vnd.microsoft.card.hero"
    card = attachment.content
    assert card.title == "Welcome to Bot Framework!"
    assert card.images[0].url == "https://aka.ms/bf-welcome-card-image"
    assert [button.title for button in card.buttons] == [
        "Get an overview",
        "Ask a question",
        "Learn how to deploy",
    ]
    assert all(button.type == ActionTypes.open_url for button in card.buttons)
    assert card.buttons[1].value == "https://stackoverflow.com/questions/tagged/botframework"


def test_unknown_text_is_an_invalid_id(processor: TurnProcessor) -> None:
    replies, _ = processor.handle_message(WelcomeUserState(welcomed=True), "foo", "Alex")
    assert _texts(replies) == [INVALID_ID_MESSAGE]
    assert replies[0].text == "Invalid Id"


def test_empty_text_falls_back_to_lookup(processor: TurnProcessor) -> None:
    replies, _ = processor.handle_message(WelcomeUserState(welcomed=True), None, "Alex")
    assert _texts(replies) == ["Invalid Id"]


def test_matching_id_sends_patched_order_card(processor: TurnProcessor) -> None:
    replies, _ = processor.handle_message(WelcomeUserState(welcomed=True), "5722106988174", "Alex")

    assert len(replies) == 1
    attachment = replies[0].attachment
    assert attachment.content_type == "application/vnd.microsoft.card.adaptive"
    assert attachment.content["body"][0]["text"] == "US|5722106988174"
    assert attachment.content["body"][1]["text"] == "Order details"


def test_order_id_match_is_case_sensitive() -> None:
    processor = TurnProcessor(_Documents("AB12"))

    replies, _ = processor.handle_message(WelcomeUserState(welcomed=True), "ab12", "Alex")

    assert _texts(replies) == ["Invalid Id"]


def test_patching_does_not_leak_into_later_turns(processor: TurnProcessor, documents) -> None:
    processor.handle_message(WelcomeUserState(welcomed=True), "5722106988174", "Alex")
    assert documents.card_template()["body"][0]["text"] == "ORDER_ID"


def test_repeated_message_is_idempotent(processor: TurnProcessor) -> None:
    state = WelcomeUserState(welcomed=True)

    first, state_after_first = processor.handle_message(state, "hi", "Alex")
    second, state_after_second = processor.handle_message(state_after_first, "hi", "Alex")

    assert _texts(first) == _texts(second)
    assert state_after_first is state
    assert state_after_second is state
    assert state.welcomed is True


def test_unavailable_documents_degrade_to_apology() -> None:
    processor = TurnProcessor(_Documents(error=ConfigurationLoadError("/missing.json", "file not found")))

    replies, state = processor.handle_message(WelcomeUserState(welcomed=True), "anything", "Alex")

    assert _texts(replies) == [DOCUMENTS_UNAVAILABLE_MESSAGE]
    assert state.welcomed is True


def test_process_dispatches_members_added(processor: TurnProcessor) -> None:
    result = processor.process(MembersAdded([Member("u1", "Alex"), Member("bot")], "bot"))
    assert _texts(result.replies) == ["Hi there - Alex. This is a simple Welcome Bot sample."]
    assert result.state is None


def test_process_dispatches_message(processor: TurnProcessor) -> None:
    result = processor.process(Message("hi", "Alex"), WelcomeUserState())
    assert _texts(result.replies) == [FIRST_WELCOME_ONE, "Welcome Alex."]
    assert result.state.welcomed is True


def test_process_rejects_unknown_events(processor: TurnProcessor) -> None:
    with pytest.raises(TypeError):
        processor.process("typing")


def test_process_welcomes_nameless_sender_by_id(processor: TurnProcessor) -> None:
    result = processor.process(Message("hi", sender_id="29:abc"), WelcomeUserState())
    assert _texts(result.replies) == [FIRST_WELCOME_ONE, "Welcome 29:abc."]


class _Documents:
    def __init__(self, reference_id: str = "", error: Exception = None):
        self._reference_id = reference_id
        self._error = error

    def reference_id(self) -> str:
        if self._error:
            raise self._error
        return self._reference_id

    def card_template(self) -> dict:
        return {"body": [{"text": ""}]}
