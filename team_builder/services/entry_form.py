# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Add-member entry form.
Owns the private Draft and the clean/editing state machine. The form never
validates values; on submit it hands the Draft over and resets itself.
"""

from typing import Callable, Union

from team_builder.models.domain import Draft, DraftField, FormState

DraftListener = Callable[[Draft], None]


class EntryForm:
    """Controlled form: the Draft is the single source of truth for every input."""

    def __init__(self, on_submit_draft: Callable[[Draft], None]) -> None:
        self._on_submit_draft = on_submit_draft
        self._draft = Draft()
        self._state = FormState.CLEAN
        self._listeners: list[DraftListener] = []

    @property
    def draft(self) -> Draft:
        return self._draft

    @property
    def state(self) -> FormState:
        return self._state

    def on_field_change(self, field: Union[DraftField, str], value: str) -> None:
        """Overwrite exactly one Draft field. Raises ValueError for an unknown field name."""
        self._draft = self._draft.replace(DraftField(field), value)
        self._state = FormState.EDITING
        self._publish()

    def on_submit(self) -> Draft:
        """Hand the current Draft to the submit callable, then reset to all-empty."""
        submitted = self._draft
        self._on_submit_draft(submitted)
        self._draft = Draft()
        self._state = FormState.CLEAN
        self._publish()
        return submitted

    def reset(self) -> None:
        self._draft = Draft()
        self._state = FormState.CLEAN
        self._publish()

    def subscribe(self, listener: DraftListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self) -> None:
        draft = self._draft
        for listener in list(self._listeners):
            listener(draft)
