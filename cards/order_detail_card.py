# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

import json
import logging

from botbuilder.core import CardFactory
from botbuilder.schema import Attachment

ORDER_DISPLAY_ID = "US|5722106988174"


def create_order_detail_card(template: dict, display_id: str = ORDER_DISPLAY_ID) -> Attachment:
    """
    Patch the first body element of an adaptive card template with the
    order's display id and wrap it as an attachment. ``template`` is modified
    in place; pass a copy.
    """
    template["body"][0]["text"] = display_id
    logging.debug(f"Order detail card after id update: {json.dumps(template)}")
    return CardFactory.adaptive_card(template)
