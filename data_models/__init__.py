# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

from .welcome_user_state import WelcomeUserState

__all__ = ["WelcomeUserState"]
