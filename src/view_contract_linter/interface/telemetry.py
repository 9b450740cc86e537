"""Console telemetry: banner, progress steps, warnings and errors."""

import logging
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from view_contract_linter.domain.constants import VIEW_CONTRACT_BANNER
from view_contract_linter.domain.protocols import TelemetryPort


class ProjectTelemetry(TelemetryPort):
    """TelemetryPort written to a rich Console (stderr by default) and mirrored to logging."""

    def __init__(
        self,
        project_name: str,
        color: str = "cyan",
        welcome: str = "",
        console: Optional[Console] = None,
    ) -> None:
        self.project_name = project_name
        self.color = color
        self.welcome = welcome
        self.console = console or Console(stderr=True, highlight=False)
        self.logger = logging.getLogger("view_contract_linter.telemetry")

    def handshake(self) -> None:
        self.console.print(Text.from_ansi(VIEW_CONTRACT_BANNER))
        if self.welcome:
            self.console.print(f"[bold {self.color}]{self.project_name}[/]: {escape(self.welcome)}")
        self.logger.info("%s: %s", self.project_name, self.welcome)

    def step(self, message: str) -> None:
        self.console.print(f"[{self.color}]>[/] {escape(message)}")
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]warning:[/] {escape(message)}")
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]error:[/] {escape(message)}")
        self.logger.error(message)
