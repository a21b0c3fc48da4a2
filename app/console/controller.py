"""
Console controller — runs each user action through `ConsoleState`.

A page is rendered from a fresh state on every HTTP request, so after a
failed action the list is fetched again to put the screen back the way it
was; the action's error message is kept over whatever the refresh reports.
"""

import logging
from typing import Mapping, Optional

from app.console.client import ApiRequestError, VPCApiClient
from app.console.state import FORM_FIELDS, ConsoleState

logger = logging.getLogger(__name__)


class ConsoleController:
    def __init__(self, client: VPCApiClient, state: Optional[ConsoleState] = None) -> None:
        self.client = client
        self.state = state or ConsoleState()

    def load(self, notice: Optional[str] = None) -> ConsoleState:
        """Fetch the list; *notice* is shown alongside a successful refresh."""
        self.state.begin()
        try:
            vpcs = self.client.list_vpcs()
        except ApiRequestError as exc:
            self.state.fail(f"Error fetching VPCs: {exc.message}")
        else:
            self.state.succeed(vpcs=vpcs, notice=notice)
        return self.state

    def create(self, form: Mapping[str, str]) -> ConsoleState:
        """Submit the form; on success clear it and refresh the list."""
        self.state.form = {name: form.get(name, "") for name in FORM_FIELDS}
        self.state.begin()
        try:
            created = self.client.create_vpc(self.state.form)
        except ApiRequestError as exc:
            self.state.fail(f"Error creating VPC: {exc.message}")
            return self.reload_keeping_error()

        logger.info("Console created VPC '%s'.", created.get("id"))
        self.state.succeed()
        self.state.reset_form()
        return self.load(notice="VPC created successfully!")

    def delete(self, vpc_id: str) -> ConsoleState:
        """Delete a record the user already confirmed, then refresh the list."""
        self.state.begin()
        try:
            self.client.delete_vpc(vpc_id)
        except ApiRequestError as exc:
            self.state.fail(f"Error deleting VPC: {exc.message}")
            return self.reload_keeping_error()

        logger.info("Console deleted VPC '%s'.", vpc_id)
        self.state.succeed()
        return self.load(notice="VPC deleted successfully!")

    def confirm(self, vpc_id: str) -> Optional[dict]:
        """Fetch the record shown on the confirmation page; ``None`` on failure."""
        self.state.begin()
        try:
            vpc = self.client.get_vpc(vpc_id)
        except ApiRequestError as exc:
            self.state.fail(f"Error loading VPC: {exc.message}")
            return None
        self.state.succeed()
        return vpc

    def reload_keeping_error(self) -> ConsoleState:
        error = self.state.error
        self.load()
        self.state.error = error
        return self.state
