# markdown/buffer.py


class MarkdownBuffer:
    """Append-only text accumulator for the renderers.

    Spacing decisions depend on what was written last, so the buffer tracks
    its last two characters and whether anything non-whitespace has been
    written, keeping those checks O(1).
    """

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._tail = ""
        self._has_text = False

    def write(self, text: str) -> None:
        if not text:
            return
        self._parts.append(text)
        self._tail = (self._tail + text)[-2:]
        if not self._has_text and text.strip():
            self._has_text = True

    def is_empty(self) -> bool:
        return not self._parts

    def is_blank(self) -> bool:
        """True if nothing but whitespace has been written."""
        return not self._has_text

    def ends_with_blank_line(self) -> bool:
        return self._tail == "\n\n"

    def getvalue(self) -> str:
        return "".join(self._parts)

    def __len__(self) -> int:
        return sum(len(part) for part in self._parts)
