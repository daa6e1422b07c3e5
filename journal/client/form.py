"""
Journal — Entry Form Controller
================================

What:  Create/edit/delete logic behind the entry form view.
How:   Holds the view state and talks to the API through EntriesClient.
       Navigation is delegated to a `navigate(path)` callback so the
       controller works under any UI shell (and in tests).

State Machine:
    IDLE ──load()──▶ LOADING ──ok──▶ LOADED
                        └──fail──▶ ERROR
    create mode: IDLE ──load()──▶ LOADED (nothing to fetch)

    is_deleting is a local toggle on top of LOADED:
    request_delete() → True, cancel_delete() → False, confirm_delete() → call API

Failure handling:
    A failed save or delete keeps the user on the form with `save_error`
    set; navigation to the list view only happens after the API call
    succeeds.
"""

import enum
import logging
from typing import Callable, Dict, List, Mapping, Optional

import httpx

from journal.client.api import ApiError, EntriesClient
from journal.schemas.entry import EntryResponse

logger = logging.getLogger(__name__)

LIST_PATH = "/"
PLACEHOLDER_IMAGE = "/images/placeholder-image-square.jpg"
SAVE_ERROR_MESSAGE = "Failed to save entry. Please try again."
DELETE_ERROR_MESSAGE = "Failed to delete an entry. entryId may not exist."


class FormState(str, enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


class EntryForm:
    """
    Form that adds or edits an entry.

    `entry_id` comes from the route. None or "new" means create mode;
    any other value is the id of the entry to edit.
    """

    def __init__(
        self,
        api: EntriesClient,
        navigate: Callable[[str], None],
        entry_id: Optional[str] = None,
    ):
        self.api = api
        self.navigate = navigate
        self.entry_id = entry_id
        self.state = FormState.IDLE
        self.entry: Optional[EntryResponse] = None
        # Field values shown in the form, keyed by wire name
        self.values: Dict[str, str] = {"title": "", "notes": "", "photoUrl": ""}
        self.photo_url: Optional[str] = None
        self.error: Optional[str] = None
        self.save_error: Optional[str] = None
        self.is_deleting = False

    @property
    def is_editing(self) -> bool:
        return bool(self.entry_id) and self.entry_id != "new"

    @property
    def heading(self) -> str:
        return "Edit Entry" if self.is_editing else "New Entry"

    @property
    def photo_preview(self) -> str:
        return self.photo_url or PLACEHOLDER_IMAGE

    # ── Lifecycle ─────────────────────────────────────────────────────────

    async def load(self) -> None:
        """Fetch the entry being edited. Called once when the view mounts."""
        if not self.is_editing:
            self.state = FormState.LOADED
            return

        self.state = FormState.LOADING
        try:
            entry = await self.api.read_entry(self.entry_id)
        except ApiError as e:
            self.error = f"Entry with ID {self.entry_id} not found. ({e.status_code})"
            self.state = FormState.ERROR
            return
        except httpx.HTTPError as e:
            self.error = str(e) or type(e).__name__
            self.state = FormState.ERROR
            return

        self.entry = entry
        self.photo_url = entry.photo_url
        self.values = {"title": entry.title, "notes": entry.notes, "photoUrl": entry.photo_url}
        self.state = FormState.LOADED

    # ── Form events ───────────────────────────────────────────────────────

    def set_photo_url(self, value: str) -> None:
        """Photo URL input changed; refresh the preview."""
        self.photo_url = value
        self.values["photoUrl"] = value

    async def submit(self, form_data: Mapping[str, str]) -> bool:
        """
        Save the form values, then navigate to the list view.

        Fields absent from form_data keep the values already on the form.
        The submitted values stay on the form, so a failed save redraws
        them. Returns True when the entry was saved.
        """
        self.values = {key: form_data.get(key, current) for key, current in self.values.items()}
        self.photo_url = self.values["photoUrl"]
        title, notes, photo_url = self.values["title"], self.values["notes"], self.values["photoUrl"]

        self.save_error = None
        try:
            if self.is_editing:
                await self.api.update_entry(self.entry_id, title, notes, photo_url)
            else:
                await self.api.add_entry(title, notes, photo_url)
        except (ApiError, httpx.HTTPError) as e:
            logger.warning("Saving entry %s failed: %s", self.entry_id or "new", e)
            self.save_error = SAVE_ERROR_MESSAGE
            return False

        self.navigate(LIST_PATH)
        return True

    def request_delete(self) -> None:
        self.is_deleting = True

    def cancel_delete(self) -> None:
        self.is_deleting = False

    async def confirm_delete(self) -> bool:
        """Delete the loaded entry, then navigate to the list view."""
        self.is_deleting = False
        self.save_error = None
        if self.entry is None:
            logger.warning("Delete requested with no entry loaded")
            self.save_error = DELETE_ERROR_MESSAGE
            return False

        try:
            await self.api.remove_entry(self.entry.entry_id)
        except (ApiError, httpx.HTTPError) as e:
            logger.warning("Deleting entry %s failed: %s", self.entry.entry_id, e)
            self.save_error = DELETE_ERROR_MESSAGE
            return False

        self.navigate(LIST_PATH)
        return True

    # ── Rendering ─────────────────────────────────────────────────────────

    def render(self) -> str:
        """Plain-text rendering of the current view."""
        if self.state is FormState.LOADING:
            return "Loading..."
        if self.state is FormState.ERROR:
            return f"Error Loading Entry with ID {self.entry_id}: {self.error or 'Unknown Error'}"

        lines: List[str] = [
            self.heading,
            f"[image: {self.photo_preview}]",
            f"Title: {self.values['title']}",
            f"Photo URL: {self.photo_url or ''}",
            f"Notes: {self.values['notes']}",
        ]
        if self.save_error:
            lines.append(f"! {self.save_error}")
        buttons = ["[Delete Entry]", "[SAVE]"] if self.is_editing else ["[SAVE]"]
        lines.append(" ".join(buttons))
        if self.is_deleting:
            lines.append("Are you sure you want to delete this entry?")
            lines.append("[Cancel] [Confirm]")
        return "\n".join(lines)

