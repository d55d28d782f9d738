"""HTML rewriting helpers built on :class:`html.parser.HTMLParser`."""

from __future__ import annotations

import html
import re
from html.parser import HTMLParser
from typing import List, Optional, Tuple

from markdownify import markdownify

Attributes = List[Tuple[str, Optional[str]]]

VOID_ELEMENTS = frozenset(
    {
        "area", "base", "br", "col", "embed", "hr", "img", "input",
        "link", "meta", "param", "source", "track", "wbr",
    }
)
UNWANTED_TAGS = frozenset({"script", "style", "iframe", "noscript"})
UNWANTED_ATTRIBUTES = frozenset({"onclick", "onload", "onerror", "style"})
NON_CONTENT_TAGS = frozenset({"head", "script", "style", "noscript", "template", "title"})
BLOCK_ELEMENTS = frozenset(
    {
        "address", "article", "aside", "blockquote", "br", "dd", "div", "dl",
        "dt", "fieldset", "figcaption", "figure", "footer", "form", "h1", "h2",
        "h3", "h4", "h5", "h6", "header", "hr", "li", "main", "nav", "ol", "p",
        "pre", "section", "table", "tr", "ul",
    }
)
PRESERVE_ELEMENTS = frozenset({"pre", "textarea", "script", "style"})
INDENT = "  "


def render_attributes(attrs: Attributes) -> str:
    parts = []
    for name, value in attrs:
        if value is None:
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{html.escape(value, quote=True)}"')
    return "".join(parts)


class _HtmlCleaner(HTMLParser):
    """Re-emits the document without unwanted elements and attributes."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=False)
        self._parts: List[str] = []
        self._dropping: List[str] = []

    def handle_starttag(self, tag: str, attrs: Attributes) -> None:
        if self._dropping:
            if tag == self._dropping[-1]:
                self._dropping.append(tag)
            return
        if tag in UNWANTED_TAGS:
            self._dropping.append(tag)
            return
        kept = [(name, value) for name, value in attrs if name not in UNWANTED_ATTRIBUTES]
        self._parts.append(f"<{tag}{render_attributes(kept)}>")

    def handle_startendtag(self, tag: str, attrs: Attributes) -> None:
        if self._dropping or tag in UNWANTED_TAGS:
            return
        kept = [(name, value) for name, value in attrs if name not in UNWANTED_ATTRIBUTES]
        self._parts.append(f"<{tag}{render_attributes(kept)} />")

    def handle_endtag(self, tag: str) -> None:
        if self._dropping:
            if tag == self._dropping[-1]:
                self._dropping.pop()
            return
        if tag in VOID_ELEMENTS:
            return
        self._parts.append(f"</{tag}>")

    def handle_data(self, data: str) -> None:
        if not self._dropping:
            self._parts.append(data)

    def handle_entityref(self, name: str) -> None:
        if not self._dropping:
            self._parts.append(f"&{name};")

    def handle_charref(self, name: str) -> None:
        if not self._dropping:
            self._parts.append(f"&#{name};")

    def handle_comment(self, data: str) -> None:
        if not self._dropping:
            self._parts.append(f"<!--{data}-->")

    def handle_decl(self, decl: str) -> None:
        self._parts.append(f"<!{decl}>")

    def handle_pi(self, data: str) -> None:
        self._parts.append(f"<?{data}>")

    def result(self) -> str:
        return "".join(self._parts)


class _TextExtractor(HTMLParser):
    """Collects visible text, breaking lines at block boundaries."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._parts: List[str] = []
        self._hidden = 0

    def handle_starttag(self, tag: str, attrs: Attributes) -> None:
        if tag in NON_CONTENT_TAGS:
            self._hidden += 1
        elif tag in BLOCK_ELEMENTS:
            self._parts.append("\n")

    def handle_startendtag(self, tag: str, attrs: Attributes) -> None:
        if tag in BLOCK_ELEMENTS:
            self._parts.append("\n")

    def handle_endtag(self, tag: str) -> None:
        if tag in NON_CONTENT_TAGS:
            self._hidden = max(self._hidden - 1, 0)
        elif tag in BLOCK_ELEMENTS:
            self._parts.append("\n")

    def handle_data(self, data: str) -> None:
        if not self._hidden:
            self._parts.append(data)

    def text(self) -> str:
        lines = (re.sub(r"[ \t\r\f\v]+", " ", line).strip() for line in "".join(self._parts).split("\n"))
        collapsed = "\n".join(lines)
        return re.sub(r"\n{3,}", "\n\n", collapsed).strip()


class _ResourceCollector(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.images: List[str] = []
        self.links: List[str] = []
        self.videos: List[str] = []
        self._video_depth = 0

    def handle_starttag(self, tag: str, attrs: Attributes) -> None:
        values = dict(attrs)
        if tag == "img" and values.get("src"):
            self.images.append(values["src"])  # type: ignore[arg-type]
        elif tag == "a" and values.get("href"):
            self.links.append(values["href"])  # type: ignore[arg-type]
        elif tag == "video":
            self._video_depth += 1
        elif tag == "source" and self._video_depth and values.get("src"):
            self.videos.append(values["src"])  # type: ignore[arg-type]

    def handle_endtag(self, tag: str) -> None:
        if tag == "video":
            self._video_depth = max(self._video_depth - 1, 0)


class _HtmlFormatter(HTMLParser):
    """Writes one element per line, indented by nesting depth."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=False)
        self._lines: List[str] = []
        self._stack: List[str] = []
        self._text: List[str] = []
        self._raw: List[str] | None = None
        self._raw_tag: str | None = None

    def _emit(self, line: str) -> None:
        self._lines.append(f"{INDENT * len(self._stack)}{line}")

    def _flush_text(self) -> None:
        text = " ".join("".join(self._text).split())
        self._text = []
        if text:
            self._emit(text)

    def handle_starttag(self, tag: str, attrs: Attributes) -> None:
        if self._raw is not None:
            self._raw.append(self.get_starttag_text() or f"<{tag}>")
            return
        self._flush_text()
        opening = f"<{tag}{render_attributes(attrs)}>"
        if tag in PRESERVE_ELEMENTS:
            self._raw = [opening]
            self._raw_tag = tag
            return
        self._emit(opening)
        if tag not in VOID_ELEMENTS:
            self._stack.append(tag)

    def handle_startendtag(self, tag: str, attrs: Attributes) -> None:
        if self._raw is not None:
            self._raw.append(self.get_starttag_text() or f"<{tag} />")
            return
        self._flush_text()
        self._emit(f"<{tag}{render_attributes(attrs)} />")

    def handle_endtag(self, tag: str) -> None:
        if self._raw is not None:
            self._raw.append(f"</{tag}>")
            if tag == self._raw_tag:
                self._emit("".join(self._raw))
                self._raw = None
                self._raw_tag = None
            return
        self._flush_text()
        if tag in VOID_ELEMENTS:
            return
        if tag in self._stack:
            while self._stack and self._stack.pop() != tag:
                pass
        self._emit(f"</{tag}>")

    def handle_data(self, data: str) -> None:
        if self._raw is not None:
            self._raw.append(data)
        else:
            self._text.append(data)

    def handle_entityref(self, name: str) -> None:
        self.handle_data(f"&{name};")

    def handle_charref(self, name: str) -> None:
        self.handle_data(f"&#{name};")

    def handle_comment(self, data: str) -> None:
        if self._raw is not None:
            self._raw.append(f"<!--{data}-->")
            return
        self._flush_text()
        self._emit(f"<!--{data}-->")

    def handle_decl(self, decl: str) -> None:
        self._flush_text()
        self._emit(f"<!{decl}>")

    def result(self) -> str:
        self._flush_text()
        if self._raw is not None:
            self._emit("".join(self._raw))
            self._raw = None
        return "\n".join(self._lines) + "\n"


def clean_html(markup: str) -> str:
    """Drop script-like elements and event/style attributes."""

    parser = _HtmlCleaner()
    parser.feed(markup)
    parser.close()
    return parser.result()


def html_to_text(markup: str) -> str:
    parser = _TextExtractor()
    parser.feed(markup)
    parser.close()
    return parser.text()


def html_to_markdown(markup: str) -> str:
    return markdownify(markup, heading_style="ATX").strip()


def extract_resources(markup: str) -> dict[str, List[str]]:
    """Return image, link and video URLs referenced by ``markup``."""

    collector = _ResourceCollector()
    collector.feed(markup)
    collector.close()
    return {"images": collector.images, "links": collector.links, "videos": collector.videos}


def format_html(markup: str) -> str:
    parser = _HtmlFormatter()
    parser.feed(markup)
    parser.close()
    return parser.result()


__all__ = [
    "clean_html",
    "html_to_text",
    "html_to_markdown",
    "extract_resources",
    "format_html",
    "render_attributes",
]
