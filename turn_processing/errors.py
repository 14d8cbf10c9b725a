# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.


class ConfigurationLoadError(Exception):
    """A static document is missing, unreadable or malformed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to load '{path}': {reason}")
        self.path = path
        self.reason = reason


class StateAccessError(Exception):
    """The user state could not be read or saved for this turn."""
