import markdown
from markdown.extensions import Extension

MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]


class EscapeHtmlExtension(Extension):
    """Escape raw HTML instead of passing it through to the output."""

    def extendMarkdown(self, md):
        md.preprocessors.deregister("html_block")
        md.inlinePatterns.deregister("html")


def render_markdown(text: str, sanitize: bool = False) -> str:
    """
    Convert a markdown body to HTML.

    Raw HTML embedded in the markdown is kept as-is unless ``sanitize`` is set,
    in which case it is escaped and shows up as text.
    """
    extensions = list(MARKDOWN_EXTENSIONS)
    if sanitize:
        extensions.append(EscapeHtmlExtension())
    return markdown.markdown(text or "", extensions=extensions)
