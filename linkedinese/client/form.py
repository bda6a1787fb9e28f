import threading
from dataclasses import dataclass
from typing import Callable, Optional

import httpx

COPIED_RESET_MS = 2000

ClipboardWriter = Callable[[str], None]
Scheduler = Callable[[float, Callable[[], None]], None]

class FormSubmitError(Exception):
    pass

@dataclass
class FormState:
    input: str = ""
    output: str = ""
    is_loading: bool = False
    error: str = ""
    has_copied: bool = False

def _schedule_timer(delay_s: float, callback: Callable[[], None]) -> None:
    timer = threading.Timer(delay_s, callback)
    timer.daemon = True
    timer.start()

class FormController:
    """
    Client side of the LinkedInese form: one state record, changed only by
    user actions (set_input, submit, copy) and by the copied-flag timer.
    """

    def __init__(
        self,
        endpoint_url: str,
        http_client: httpx.Client,
        clipboard: ClipboardWriter,
        schedule: Scheduler = _schedule_timer,
    ):
        self.endpoint_url = endpoint_url
        self.http_client = http_client
        self.clipboard = clipboard
        self.schedule = schedule
        self.state = FormState()

    def set_input(self, text: str) -> None:
        self.state.input = text

    def submit(self) -> FormState:
        state = self.state
        state.is_loading = True
        state.error = ""
        state.output = ""
        state.has_copied = False

        try:
            if not state.input.strip():
                raise FormSubmitError("Input cannot be empty.")

            response = self.http_client.post(self.endpoint_url, json={"text": state.input})
            data = response.json()
            if not response.is_success:
                message = data.get("error") if isinstance(data, dict) else None
                raise FormSubmitError(message or "An error occurred from the API.")

            if not isinstance(data, dict) or not isinstance(data.get("result"), str):
                raise FormSubmitError("The API returned an unexpected response.")
            state.output = data["result"]
        except (FormSubmitError, httpx.HTTPError, ValueError) as e:
            state.error = str(e) or "An unexpected error occurred. Please try again."
        finally:
            state.is_loading = False
        return state

    def copy(self) -> bool:
        if not self.state.output:
            return False
        self.clipboard(self.state.output)
        self.state.has_copied = True
        self.schedule(COPIED_RESET_MS / 1000, self._reset_copied)
        return True

    def _reset_copied(self) -> None:
        self.state.has_copied = False
