import json

import pytest

from turn_processing import StaticDocuments, TurnProcessor

ORDER_ID = "5722106988174"


def card_template() -> dict:
    return {
        "type": "AdaptiveCard",
        "version": "1.2",
        "body": [
            {"type": "TextBlock", "text": "ORDER_ID"},
            {"type": "TextBlock", "text": "Order details"},
        ],
    }


@pytest.fixture()
def documents() -> StaticDocuments:
    return StaticDocuments(ORDER_ID, card_template())


@pytest.fixture()
def processor(documents: StaticDocuments) -> TurnProcessor:
    return TurnProcessor(documents)


@pytest.fixture()
def write_json(tmp_path):
    """Write ``content`` (a dict, or raw text) to ``tmp_path/name`` and return the path."""

    def _write(name: str, content) -> str:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return str(path)

    return _write
