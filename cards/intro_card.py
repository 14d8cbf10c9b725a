# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

from botbuilder.core import CardFactory
from botbuilder.schema import ActionTypes, Attachment, CardAction, CardImage, HeroCard

INTRO_TITLE = "Welcome to Bot Framework!"
INTRO_TEXT = (
    "Welcome to Welcome Users bot sample! This Introduction card "
    "is a great way to introduce your Bot to the user and suggest "
    "some things to get them started. We use this opportunity to "
    "recommend a few next steps for learning more creating and deploying bots."
)
INTRO_IMAGE_URL = "https://aka.ms/bf-welcome-card-image"

OVERVIEW_URL = "https://docs.microsoft.com/en-us/azure/bot-service/?view=azure-bot-service-4.0"
QUESTION_URL = "https://stackoverflow.com/questions/tagged/botframework"
DEPLOY_URL = (
    "https://docs.microsoft.com/en-us/azure/bot-service/"
    "bot-builder-howto-deploy-azure?view=azure-bot-service-4.0"
)


def _open_url_action(title: str, url: str) -> CardAction:
    return CardAction(
        type=ActionTypes.open_url,
        title=title,
        text=title,
        display_text=title,
        value=url,
    )


def create_intro_card() -> Attachment:
    card = HeroCard(
        title=INTRO_TITLE,
        text=INTRO_TEXT,
        images=[CardImage(url=INTRO_IMAGE_URL)],
        buttons=[
            _open_url_action("Get an overview", OVERVIEW_URL),
            _open_url_action("Ask a question", QUESTION_URL),
            _open_url_action("Learn how to deploy", DEPLOY_URL),
        ],
    )
    return CardFactory.hero_card(card)
