"""
modules/formatting.py

Terminal output for rendered tables.
"""
from typing import Optional

from rich.console import Console
from rich.markdown import Markdown


def preview_markdown(text: str, console: Optional[Console] = None) -> None:
    """
    Render markdown text in the terminal as a formatted table.
    The raw text is printed separately by the caller; this is only a preview.
    """
    console = console or Console()
    console.rule("[bold]Preview")
    console.print(Markdown(text))
