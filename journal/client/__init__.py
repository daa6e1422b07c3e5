"""
Journal — Client Package
=========================

The consumer side of the API:
    - api.py:  EntriesClient (httpx) and ApiError
    - form.py: EntryForm, the create/edit/delete controller
    - entry_list.py: EntryList, the "/" view the form navigates to
"""

from journal.client.api import ApiError, EntriesClient
from journal.client.form import EntryForm, FormState
from journal.client.entry_list import EntryList

__all__ = ["ApiError", "EntriesClient", "EntryForm", "EntryList", "FormState"]
