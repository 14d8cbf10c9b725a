# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

from .intro_card import create_intro_card
from .order_detail_card import ORDER_DISPLAY_ID, create_order_detail_card

__all__ = ["create_intro_card", "create_order_detail_card", "ORDER_DISPLAY_ID"]
