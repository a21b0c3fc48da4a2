"""
Client-side state of the VPC console.

Every console operation walks the same transitions:

    idle ──begin()──▶ loading ──succeed()──▶ idle   (data updated)
                              └──fail()─────▶ idle   (error shown)

While the phase is ``loading`` the view disables every control that could
issue a conflicting request.  A failure only sets ``error``; the list and
the typed form values are left as they were.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

FORM_FIELDS = ("name", "cidrBlock", "region", "description")


def empty_form() -> dict[str, str]:
    return {name: "" for name in FORM_FIELDS}


class Phase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"


class ConsoleStateError(RuntimeError):
    """Raised on a transition the state machine does not allow."""


@dataclass
class ConsoleState:
    phase: Phase = Phase.IDLE
    vpcs: list[dict] = field(default_factory=list)
    form: dict[str, str] = field(default_factory=empty_form)
    error: Optional[str] = None
    notice: Optional[str] = None

    @property
    def is_loading(self) -> bool:
        return self.phase is Phase.LOADING

    @property
    def controls_disabled(self) -> bool:
        return self.is_loading

    def begin(self) -> None:
        """Enter ``loading``; only one request may be in flight."""
        if self.is_loading:
            raise ConsoleStateError("A request is already in progress.")
        self.phase = Phase.LOADING
        self.error = None
        self.notice = None

    def succeed(self, vpcs: Optional[list[dict]] = None, notice: Optional[str] = None) -> None:
        self._require_loading()
        self.phase = Phase.IDLE
        if vpcs is not None:
            self.vpcs = vpcs
        self.notice = notice

    def fail(self, message: str) -> None:
        self._require_loading()
        self.phase = Phase.IDLE
        self.error = message

    def reset_form(self) -> None:
        self.form = empty_form()

    def _require_loading(self) -> None:
        if not self.is_loading:
            raise ConsoleStateError("No request is in progress.")
