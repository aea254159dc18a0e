# markdown/inline.py

from gdocs_markdown.document.models import TextRun

# Characters treated as surrounding whitespace when wrapping styled text.
_EDGE_WHITESPACE = " \t\n"

_TYPOGRAPHY = str.maketrans(
    {
        "‘": "'",  # left single quote
        "’": "'",  # right single quote / apostrophe
        "“": '"',  # left double quote
        "”": '"',  # right double quote
        "—": "--",  # em dash
    }
)


def format_text_run(run: TextRun) -> str:
    """Render one text run as Markdown.

    Whitespace around the run stays outside the markers so that ``" bold "``
    becomes ``" **bold** "`` rather than the invalid ``"** bold **"``.

    Links keep only their trailing whitespace; leading whitespace is dropped.
    Emphasis keeps both sides.
    """
    text = run.content.replace("\v", "\n\n").translate(_TYPOGRAPHY)

    if not text.strip():
        return text

    style = run.style
    if style is None:
        return text

    if style.link_url:
        suffix = text[len(text.rstrip(_EDGE_WHITESPACE)) :]
        return f"[{text.strip()}]({style.link_url}){suffix}"

    if not style.is_emphasized:
        return text

    core = text.strip()
    leading = text[: len(text) - len(text.lstrip(_EDGE_WHITESPACE))]
    trailing = text[len(text.rstrip(_EDGE_WHITESPACE)) :]

    if style.bold and style.italic:
        core = f"***{core}***"
    elif style.bold:
        core = f"**{core}**"
    elif style.italic:
        core = f"*{core}*"

    if style.strikethrough:
        core = f"~~{core}~~"

    return leading + core + trailing
