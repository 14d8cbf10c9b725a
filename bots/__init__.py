# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

from .welcome_user_bot import WelcomeUserBot

__all__ = ["WelcomeUserBot"]
