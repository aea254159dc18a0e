import json
from pathlib import Path
from typing import Any

import pytest

from gdocs_markdown.converter import DocsMarkdownConverter
from gdocs_markdown.document.loader import load_document_file
from gdocs_markdown.document.models import TabFragment


def _run(content: str, **style: Any) -> dict[str, Any]:
    run: dict[str, Any] = {"content": content}
    if style:
        run["textStyle"] = style
    return {"textRun": run}


def _paragraph(
    *runs: dict[str, Any],
    style: str = "NORMAL_TEXT",
    bullet: dict[str, Any] | None = None,
) -> dict[str, Any]:
    paragraph: dict[str, Any] = {
        "elements": list(runs),
        "paragraphStyle": {"namedStyleType": style, "direction": "LEFT_TO_RIGHT"},
    }
    if bullet is not None:
        paragraph["bullet"] = bullet
    return {"paragraph": paragraph}


def _table(*rows: list[str]) -> dict[str, Any]:
    return {
        "table": {
            "rows": len(rows),
            "columns": len(rows[0]),
            "tableRows": [
                {"tableCells": [{"content": [_paragraph(_run(text + "\n"))]} for text in row]}
                for row in rows
            ],
        }
    }


SECTION_BREAK = {"sectionBreak": {"sectionStyle": {"sectionType": "CONTINUOUS"}}}


def _create_tabbed_payload() -> dict[str, Any]:
    """A two-tab planning document exercising every element type."""
    overview = [
        SECTION_BREAK,
        _paragraph(_run("Quarterly Plan\n"), style="TITLE"),
        _paragraph(
            _run("This plan covers "),
            _run("three", bold=True),
            _run(" areas. See "),
            _run("the tracker", link={"url": "https://example.com/t"}, underline=True),
            _run("\n"),
        ),
        _paragraph(_run("\n")),
        _paragraph(_run("Goals\n"), style="HEADING_1"),
        _paragraph(
            _run("Ship the “v2” API\n"),
            bullet={"listId": "kix.goals"},
        ),
        _paragraph(
            _run("with docs", italic=True),
            _run("\n"),
            bullet={"listId": "kix.goals", "nestingLevel": 1},
        ),
        _paragraph(_run("-\n"), bullet={"listId": "kix.goals"}),
        _paragraph(_run("Hire two engineers\n"), bullet={"listId": "kix.goals"}),
        _paragraph(_run("\n")),
        _table(["Owner", "Due"], ["Dana", "Q3"]),
        SECTION_BREAK,
        _paragraph(_run("Risks\n"), style="HEADING_2"),
        _paragraph(_run("Budget cuts", strikethrough=True), _run("\n")),
    ]
    notes = [
        _paragraph(_run("Notes\n"), style="HEADING_1"),
        _paragraph(_run("Line one\vLine two\n")),
    ]
    return {
        "documentId": "plan-1",
        "title": "Quarterly Plan",
        "revisionId": "rev-7",
        "tabs": [
            {
                "tabProperties": {"tabId": "t.0", "title": "Overview", "index": 0},
                "documentTab": {
                    "body": {"content": overview},
                    "lists": {
                        "kix.goals": {
                            "listProperties": {
                                "nestingLevels": [
                                    {"glyphType": "DECIMAL", "glyphFormat": "%0."},
                                    {"glyphSymbol": "○", "glyphFormat": "%1"},
                                ]
                            }
                        }
                    },
                    "namedStyles": {"styles": []},
                },
                "childTabs": [
                    {
                        "tabProperties": {
                            "tabId": "t.1",
                            "title": "",
                            "parentTabId": "t.0",
                            "nestingLevel": 1,
                        },
                        "documentTab": {"body": {"content": notes}},
                    }
                ],
            }
        ],
    }


def _create_legacy_payload() -> dict[str, Any]:
    """A document from before tabs existed: one body, top-level lists."""
    return {
        "documentId": "legacy-1",
        "title": "Old Memo",
        "body": {
            "content": [
                SECTION_BREAK,
                _paragraph(_run("Memo\n"), style="HEADING_1"),
                _paragraph(_run("First\n"), bullet={"listId": "kix.memo"}),
                _paragraph(_run("Done\n")),
            ]
        },
        "lists": {
            "kix.memo": {"listProperties": {"nestingLevels": [{"glyphType": "ROMAN"}]}}
        },
    }


@pytest.fixture(scope="module")
def payload_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Write all test payloads once per module, as saved API responses."""
    dir_path: Path = tmp_path_factory.mktemp("payloads")

    (dir_path / "tabbed.json").write_text(json.dumps(_create_tabbed_payload()), encoding="utf-8")
    (dir_path / "legacy.json").write_text(json.dumps(_create_legacy_payload()), encoding="utf-8")

    return dir_path


@pytest.fixture(scope="module")
def tabbed_fragments(payload_dir: Path) -> list[TabFragment]:
    """Convert the tabbed document once, reuse across tests."""
    return DocsMarkdownConverter().convert(load_document_file(payload_dir / "tabbed.json"))


@pytest.fixture(scope="module")
def legacy_fragments(payload_dir: Path) -> list[TabFragment]:
    """Convert the legacy document once, reuse across tests."""
    return DocsMarkdownConverter().convert(load_document_file(payload_dir / "legacy.json"))
