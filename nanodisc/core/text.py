from __future__ import annotations

from typing import Protocol

PAGEBREAK = "<pagebreak>"


class ReplyChannel(Protocol):
    def reply(self, message: str | list[str]) -> None: ...


class ConsoleReply:
    def reply(self, message: str | list[str]) -> None:
        pages = message if isinstance(message, list) else [message]
        for page in pages:
            print(page)


class BufferedReply:
    def __init__(self) -> None:
        self.messages: list[str | list[str]] = []

    def reply(self, message: str | list[str]) -> None:
        self.messages.append(message)


class TextFormatter:
    """Chat markup helpers: item links, command links and collapsible blobs."""

    def __init__(self, bot_name: str = "Nanobot", max_page_size: int = 7500):
        self.bot_name = bot_name
        self.max_page_size = max_page_size

    def make_item(self, low_id: int, high_id: int, ql: int, name: str) -> str:
        return f'<a href="itemref://{low_id}/{high_id}/{ql}">{name}</a>'

    def make_chatcmd(self, label: str, command: str) -> str:
        command = command.replace("<myname>", self.bot_name).replace("'", "&#39;")
        return f"<a href='chatcmd://{command}'>{label}</a>"

    def _paginate(self, header: str, body: str) -> list[str]:
        chunks = [chunk for chunk in body.split(PAGEBREAK) if chunk]
        pages: list[str] = []
        current = header
        for chunk in chunks:
            if current != header and len(current) + len(chunk) > self.max_page_size:
                pages.append(current)
                current = header + chunk.lstrip("\n")
                continue
            current += chunk
        pages.append(current)
        return pages

    def make_blob(self, title: str, body: str, header: str | None = None) -> list[str]:
        """Wrap ``body`` in one or more popup links.

        The body may contain ``<pagebreak>`` markers; pages are only split
        there, so a single oversized chunk still ends up on its own page.
        """
        head = f"<header>{header}<end>\n\n" if header else ""
        pages = self._paginate(head, body)
        if len(pages) == 1:
            return [self._blob_link(title, pages[0])]
        total = len(pages)
        return [self._blob_link(f"{title} (Page {idx} of {total})", page) for idx, page in enumerate(pages, start=1)]

    @staticmethod
    def _blob_link(title: str, content: str) -> str:
        escaped = content.replace('"', "&quot;")
        return f'<a href="text://{escaped}">{title}</a>'
