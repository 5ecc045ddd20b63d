"""Console telemetry: styled status lines on a rich Console, mirrored to logging."""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from variant_registry.domain.constants import DEFAULT_LOG_LEVEL
from variant_registry.domain.protocols import TelemetryPort


class ProjectTelemetry(TelemetryPort):
    """Implements TelemetryPort for the CLI."""

    def __init__(self, project_name: str, color: str, welcome_msg: str) -> None:
        self.project_name = project_name
        self.color = color
        self.welcome_msg = welcome_msg
        self.console = Console(stderr=True)
        self.logger = logging.getLogger(project_name.lower())
        # Messages reach the terminal through self.console only.
        self.logger.propagate = False
        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def handshake(self) -> None:
        """Announce the session."""
        self.console.print(
            f"[bold {self.color}]{escape(f'[{self.project_name}]')}[/] {escape(self.welcome_msg)}")
        self.logger.info(self.welcome_msg)

    def step(self, message: str) -> None:
        self.console.print(f"[{self.color}]>[/] {escape(message)}")
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]WARNING[/] {escape(message)}")
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]ERROR[/] {escape(message)}")
        self.logger.error(message)

    def debug(self, message: str) -> None:
        # Log only; the console stays quiet unless logging is at DEBUG.
        self.logger.debug(message)

    @staticmethod
    def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
        """Install a single rich log handler on the root logger."""
        root = logging.getLogger()
        root.setLevel(level)
        if not any(isinstance(h, RichHandler) for h in root.handlers):
            root.addHandler(RichHandler(
                console=Console(stderr=True), show_path=False))
