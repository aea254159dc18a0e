# src/gdocs_markdown/response.py

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from .document.models import TabFragment


class TabContent(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    tab_id: str = Field(alias="tabId")
    tab_title: str = Field(alias="tabTitle")
    tab_markdown: str = Field(alias="tabMarkdown")


class DocContent(BaseModel):
    """Response envelope for one converted document."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    doc_id: str = Field(alias="docId")
    doc_title: str = Field(alias="docTitle")
    tabs: list[TabContent] = Field(default_factory=list)

    @classmethod
    def from_fragments(
        cls, document_id: str, title: str, fragments: Iterable[TabFragment]
    ) -> "DocContent":
        return cls(
            doc_id=document_id,
            doc_title=title,
            tabs=[
                TabContent(
                    tab_id=fragment.tab_id,
                    tab_title=fragment.tab_title,
                    tab_markdown=fragment.markdown,
                )
                for fragment in fragments
            ],
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    def to_compact(self) -> str:
        """Human-readable rendering: a short header, then each tab in turn."""
        lines = [f"Document: {self.doc_title} ({self.doc_id})", f"Tabs ({len(self.tabs)}):"]
        for tab in self.tabs:
            lines.append("")
            lines.append(f"=== {tab.tab_title} [{tab.tab_id or 'default'}] ===")
            lines.append(tab.tab_markdown.rstrip("\n"))
        return "\n".join(lines) + "\n"

    def render(self, output_format: str) -> str:
        if output_format == "json":
            return self.to_json()
        if output_format == "compact":
            return self.to_compact()
        raise ValueError(f"Unknown output format: {output_format}")
