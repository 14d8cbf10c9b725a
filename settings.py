# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

import os

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Bot Framework credentials; leave empty for the local emulator.
APP_ID = os.environ.get("MicrosoftAppId", "")
APP_PASSWORD = os.environ.get("MicrosoftAppPassword", "")

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", 3978))

RESOURCES_DIR = os.environ.get("RESOURCES_DIR", os.path.join(BASE_DIR, "resources"))
REFERENCE_DOCUMENT_PATH = os.environ.get(
    "REFERENCE_DOCUMENT_PATH", os.path.join(RESOURCES_DIR, "order_detail.json")
)
CARD_TEMPLATE_PATH = os.environ.get(
    "CARD_TEMPLATE_PATH", os.path.join(RESOURCES_DIR, "adaptive_card.json")
)
STATIC_DOCUMENTS_RELOAD = os.environ.get("STATIC_DOCUMENTS_RELOAD", "false").lower() in ("1", "true", "yes")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
