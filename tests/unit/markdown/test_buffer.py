from gdocs_markdown.markdown.buffer import MarkdownBuffer


class TestMarkdownBuffer:
    def test_new_buffer_is_empty_and_blank(self) -> None:
        buffer = MarkdownBuffer()
        assert buffer.is_empty()
        assert buffer.is_blank()
        assert not buffer.ends_with_blank_line()
        assert buffer.getvalue() == ""

    def test_empty_writes_are_ignored(self) -> None:
        buffer = MarkdownBuffer()
        buffer.write("")
        assert buffer.is_empty()

    def test_blank_line_detected_across_writes(self) -> None:
        buffer = MarkdownBuffer()
        buffer.write("text\n")
        assert not buffer.ends_with_blank_line()
        buffer.write("\n")
        assert buffer.ends_with_blank_line()

    def test_whitespace_only_content_is_blank_but_not_empty(self) -> None:
        buffer = MarkdownBuffer()
        buffer.write(" \n\t")
        assert not buffer.is_empty()
        assert buffer.is_blank()
        buffer.write("x")
        assert not buffer.is_blank()

    def test_getvalue_and_len(self) -> None:
        buffer = MarkdownBuffer()
        buffer.write("ab")
        buffer.write("c\n")
        assert buffer.getvalue() == "abc\n"
        assert len(buffer) == 4
