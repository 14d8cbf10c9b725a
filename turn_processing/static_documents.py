# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

import copy
import json
import logging

from .errors import ConfigurationLoadError

REFERENCE_ID_FIELD = "frId"


def read_json_document(path: str) -> dict:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            document = json.load(f)
    except FileNotFoundError:
        raise ConfigurationLoadError(path, "file not found")
    except OSError as e:
        raise ConfigurationLoadError(path, f"unreadable ({e})") from e
    except ValueError as e:
        raise ConfigurationLoadError(path, f"malformed JSON ({e})") from e

    if not isinstance(document, dict):
        raise ConfigurationLoadError(path, "expected a JSON object")
    return document


def read_reference_id(path: str) -> str:
    document = read_json_document(path)
    reference_id = document.get(REFERENCE_ID_FIELD)
    if not isinstance(reference_id, str):
        raise ConfigurationLoadError(path, f"'{REFERENCE_ID_FIELD}' must be a string")
    return reference_id


def read_card_template(path: str) -> dict:
    template = read_json_document(path)
    body = template.get("body")
    if not isinstance(body, list) or not body:
        raise ConfigurationLoadError(path, "'body' must be a non-empty list")
    if not isinstance(body[0], dict):
        raise ConfigurationLoadError(path, "first 'body' element must be an object")
    return template


class StaticDocuments:
    """
      The reference identifier and card template, loaded once.

      ``card_template`` hands out deep copies, so callers may patch the
      result freely.
    """

    def __init__(self, reference_id: str, card_template: dict):
        self._reference_id = reference_id
        self._card_template = card_template

    def reference_id(self) -> str:
        return self._reference_id

    def card_template(self) -> dict:
        return copy.deepcopy(self._card_template)


class ReloadingDocuments:
    """Re-reads both documents from disk on every access."""

    def __init__(self, reference_path: str, card_template_path: str):
        self.reference_path = reference_path
        self.card_template_path = card_template_path

    def reference_id(self) -> str:
        return read_reference_id(self.reference_path)

    def card_template(self) -> dict:
        return read_card_template(self.card_template_path)


def load_static_documents(reference_path: str, card_template_path: str, reload: bool = False):
    """
    Read and validate both documents, raising ``ConfigurationLoadError`` on
    the first problem. Called at startup so a bad deployment fails at boot.

    With ``reload`` the documents are still validated here, but a
    ``ReloadingDocuments`` is returned so later edits are picked up.
    """
    logging.info(f"Loading reference document from {reference_path}")
    reference_id = read_reference_id(reference_path)
    logging.info(f"Loading card template from {card_template_path}")
    card_template = read_card_template(card_template_path)

    if reload:
        return ReloadingDocuments(reference_path, card_template_path)
    return StaticDocuments(reference_id, card_template)
