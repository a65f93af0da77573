"""
Opt-in request/response panels rendered with rich.

Enabled with ``ClientConfig(trace=True)`` or ``MAILERLITE_TRACE=1``.
"""
import json
from typing import Any, Dict, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax

from .config import mask_sensitive

SENSITIVE_HEADERS = ("authorization", "x-api-key")

console = Console(stderr=True)


def mask_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """Mask authorization headers for safe output."""
    masked = dict(headers)
    for key in masked:
        if key.lower() in SENSITIVE_HEADERS:
            masked[key] = mask_sensitive(masked[key], 15)
    return masked


def format_body(body: Any) -> str:
    """Format body for pretty printing."""
    if body is None:
        return ""
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return f"<binary data: {len(body)} bytes>"
    if isinstance(body, str):
        try:
            body = json.loads(body)
        except ValueError:
            return body
    return json.dumps(body, indent=2, ensure_ascii=False)


def print_request(method: str, url: str, headers: Dict[str, str], body: Optional[bytes]) -> None:
    console.print(
        Panel(
            f"[bold cyan]{escape(method)}[/bold cyan] {escape(url)}",
            title="[bold blue]Request[/bold blue]",
        )
    )
    console.print("[bold]Headers:[/bold]", mask_headers(headers))
    if body:
        console.print(Panel(Syntax(format_body(body), "json"), title="[bold]Request Body[/bold]"))


def print_response(url: str, status_code: int, headers: Dict[str, str], body: bytes) -> None:
    color = "green" if 200 <= status_code < 300 else "red"
    console.print(
        Panel(
            f"[bold {color}]{status_code}[/bold {color}]",
            title=f"[bold blue]Response[/bold blue] ({escape(url)})",
        )
    )
    console.print("[bold]Headers:[/bold]", headers)
    if body:
        console.print(Panel(Syntax(format_body(body), "json"), title="[bold]Response Body[/bold]"))
