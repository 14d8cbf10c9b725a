# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

from .errors import ConfigurationLoadError, StateAccessError
from .events import Member, MembersAdded, Message, Reply, TurnResult
from .static_documents import ReloadingDocuments, StaticDocuments, load_static_documents
from .turn_processor import TurnProcessor

__all__ = [
    "ConfigurationLoadError",
    "StateAccessError",
    "Member",
    "MembersAdded",
    "Message",
    "Reply",
    "TurnResult",
    "StaticDocuments",
    "ReloadingDocuments",
    "load_static_documents",
    "TurnProcessor",
]
