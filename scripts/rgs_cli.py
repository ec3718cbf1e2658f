#!/usr/bin/env python3
"""Command-line tool for manual calls to the RGS API."""

import json
import sys
from pathlib import Path

import httpx
from rich.console import Console
from rich.json import JSON
from rich.markup import escape
from rich.panel import Panel

from rgs_client.clients import MetricsRgsClient, PatientRgsClient, RgsApiConfig
from rgs_client.exceptions import RgsError, RgsValidationError
from rgs_client.models.patient import Patient
from rgs_client.utils.logging import setup_logging

USAGE = """
[bold]Usage:[/bold] rgs_cli.py <command> <argument>

[bold]Commands:[/bold]
• get-patient <external_id> - Show a patient
• create-patient <file.json> - Register a patient from a JSON file in wire format
• metrics-last <external_id> - Show the latest questionnaire answers

[bold]Environment:[/bold] RGS_API_HOST, RGS_PARTNER_ID, RGS_API_TIMEOUT, LOG_LEVEL
"""


class RgsCLI:
    """Runs a single RGS API call and prints the result."""

    def __init__(self, config: RgsApiConfig):
        """Initialize CLI with partner settings."""
        self.console = Console()
        self.http_client = httpx.Client(timeout=config.timeout)
        self.patients = PatientRgsClient(self.http_client, config)
        self.metrics = MetricsRgsClient(self.http_client, config)

    def run(self, command: str, argument: str) -> int:
        """Execute a command and return the process exit code."""
        try:
            if command == "get-patient":
                response = self.patients.get_patient(int(argument))
            elif command == "create-patient":
                payload = json.loads(Path(argument).read_text(encoding="utf-8"))
                response = self.patients.create_patient(Patient.from_wire(payload))
            elif command == "metrics-last":
                response = self.metrics.get_metrics_last(int(argument))
            else:
                self._show_usage()
                return 2
        except RgsValidationError as e:
            self._show_errors(e.errors)
            return 1
        except RgsError as e:
            self.console.print(f"[red]❌ {escape(str(e))}[/red]")
            return 1
        except (ValueError, OSError) as e:
            self.console.print(f"[red]❌ Invalid argument {escape(repr(argument))}: {escape(str(e))}[/red]")
            return 1
        finally:
            self.http_client.close()

        self.console.print(
            Panel(
                JSON(response.text or "null"),
                title=f"[bold green]{response.status_code}[/bold green]",
                border_style="green",
            )
        )
        return 0

    def _show_errors(self, errors: dict[str, str]) -> None:
        """Show validation errors per field."""
        lines = "\n".join(f"• [bold]{field}[/bold]: {message}" for field, message in errors.items())
        self.console.print(Panel(lines, title="[red]Invalid patient[/red]", border_style="red"))

    def _show_usage(self) -> None:
        self.console.print(Panel(USAGE.strip(), title="[cyan]❓ Help[/cyan]", border_style="cyan"))


def main() -> int:
    """Main entry point for the RGS CLI."""
    setup_logging()

    if len(sys.argv) != 3:
        Console().print(Panel(USAGE.strip(), title="[cyan]❓ Help[/cyan]", border_style="cyan"))
        return 2

    try:
        config = RgsApiConfig.from_env()
    except ValueError as e:
        Console().print(f"[red]❌ {e}[/red]")
        return 1

    cli = RgsCLI(config)
    return cli.run(sys.argv[1], sys.argv[2])


if __name__ == "__main__":
    sys.exit(main())
