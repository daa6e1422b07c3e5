"""
Journal — Entry List Controller
================================

What:  The list view at "/", where the entry form navigates after a save.
How:   load() fetches every entry; render() shows title and notes for each
       with its edit link, plus a link to create a new one.
"""

import logging
from typing import List, Optional

import httpx

from journal.client.api import ApiError, EntriesClient
from journal.client.form import FormState
from journal.schemas.entry import EntryResponse

logger = logging.getLogger(__name__)

NEW_ENTRY_PATH = "/details/new"


def entry_path(entry_id: int) -> str:
    return f"/details/{entry_id}"


class EntryList:
    def __init__(self, api: EntriesClient):
        self.api = api
        self.state = FormState.IDLE
        self.entries: List[EntryResponse] = []
        self.error: Optional[str] = None

    async def load(self) -> None:
        self.state = FormState.LOADING
        try:
            self.entries = await self.api.list_entries()
        except (ApiError, httpx.HTTPError) as e:
            logger.warning("Loading entries failed: %s", e)
            self.error = str(e) or type(e).__name__
            self.state = FormState.ERROR
            return
        self.state = FormState.LOADED

    def render(self) -> str:
        if self.state is FormState.LOADING:
            return "Loading..."
        if self.state is FormState.ERROR:
            return f"Error Loading Entries: {self.error}"

        lines = [f"Entries [New → {NEW_ENTRY_PATH}]"]
        if not self.entries:
            lines.append("No entries")
        for entry in self.entries:
            lines.append(f"- {entry.title} ({entry_path(entry.entry_id)})")
            lines.append(f"  {entry.notes}")
        return "\n".join(lines)
