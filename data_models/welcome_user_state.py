# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.


class WelcomeUserState:
    """
      This is our application state. Just a regular serializable Python class.

      Once ``welcomed`` is set it stays set; the bot never clears it.
    """

    def __init__(self, welcomed: bool = False):
        self.welcomed = welcomed

    def __eq__(self, other) -> bool:
        if not isinstance(other, WelcomeUserState):
            return NotImplemented
        return self.welcomed == other.welcomed

    def __repr__(self) -> str:
        return f"WelcomeUserState(welcomed={self.welcomed})"
