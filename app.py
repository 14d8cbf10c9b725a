# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

import asyncio
import logging
from datetime import datetime, timezone

from botbuilder.core import (
    BotFrameworkAdapter,
    BotFrameworkAdapterSettings,
    MemoryStorage,
    TurnContext,
    UserState,
)
from botbuilder.schema import Activity, ActivityTypes
from flask import Flask, Response, jsonify, request

from bots import WelcomeUserBot
from settings import (
    APP_ID,
    APP_PASSWORD,
    CARD_TEMPLATE_PATH,
    HOST,
    LOG_LEVEL,
    PORT,
    REFERENCE_DOCUMENT_PATH,
    STATIC_DOCUMENTS_RELOAD,
)
from turn_processing import TurnProcessor, load_static_documents

TURN_ERROR_MESSAGE = "Sorry, the bot encountered an error. Please try again."

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = Flask(__name__)

# Empty AppId and Password are fine for local testing
SETTINGS = BotFrameworkAdapterSettings(APP_ID, APP_PASSWORD)
ADAPTER = BotFrameworkAdapter(SETTINGS)


# Catch-all for errors.
async def on_error(context: TurnContext, error: Exception):
    logging.error(f"[on_turn_error] unhandled error: {error}", exc_info=error)

    await context.send_activity(TURN_ERROR_MESSAGE)
    if context.activity.channel_id == "emulator":
        trace_activity = Activity(
            label="TurnError",
            name="on_turn_error Trace",
            timestamp=datetime.now(timezone.utc),
            type=ActivityTypes.trace,
            value=f"{error}",
            value_type="https://www.botframework.com/schemas/error",
        )
        await context.send_activity(trace_activity)


ADAPTER.on_turn_error = on_error

STORAGE = MemoryStorage()
USER_STATE = UserState(STORAGE)

# Fails at boot when either document is missing or malformed.
DOCUMENTS = load_static_documents(
    REFERENCE_DOCUMENT_PATH, CARD_TEMPLATE_PATH, reload=STATIC_DOCUMENTS_RELOAD
)
BOT = WelcomeUserBot(USER_STATE, TurnProcessor(DOCUMENTS))


# Listen for incoming requests on /api/messages
@app.route("/api/messages", methods=["POST"])
def messages():
    if "application/json" not in request.headers.get("Content-Type", ""):
        return Response(status=415)

    activity = Activity().deserialize(request.json)
    auth_header = request.headers.get("Authorization", "")
    logging.info(f"Incoming {activity.type} activity on channel {activity.channel_id}")

    try:
        response = asyncio.run(ADAPTER.process_activity(activity, auth_header, BOT.on_turn))
    except Exception as e:
        logging.exception(f"Error processing activity: {e}")
        return Response(str(e), status=500)

    if response:
        if response.body is None:
            return Response(status=response.status)
        return jsonify(response.body), response.status
    return Response(status=201)


if __name__ == "__main__":
    logging.info(f"Starting bot on http://{HOST}:{PORT}/api/messages")
    app.run(host=HOST, port=PORT)
