# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

from dataclasses import dataclass, field
from typing import List, Optional, Union

from botbuilder.core import MessageFactory
from botbuilder.schema import Activity, Attachment

from data_models import WelcomeUserState


@dataclass(frozen=True)
class Member:
    id: str
    name: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.name or self.id


@dataclass(frozen=True)
class MembersAdded:
    members: List[Member] = field(default_factory=list)
    recipient_id: Optional[str] = None


@dataclass(frozen=True)
class Message:
    text: Optional[str] = None
    sender_name: Optional[str] = None
    sender_id: Optional[str] = None

    @property
    def display_name(self) -> Optional[str]:
        return self.sender_name or self.sender_id


TurnEvent = Union[MembersAdded, Message]


@dataclass
class Reply:
    """An outbound message: plain text or a single card attachment."""

    text: Optional[str] = None
    attachment: Optional[Attachment] = None

    def to_activity(self) -> Activity:
        if self.attachment is not None:
            return MessageFactory.attachment(self.attachment)
        return MessageFactory.text(self.text)


@dataclass
class TurnResult:
    replies: List[Reply]
    state: Optional[WelcomeUserState] = None
