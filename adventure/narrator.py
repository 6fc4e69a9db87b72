import os
import json
import yaml
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.theme import Theme

MESSAGES_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "messages.yaml")

custom_theme = Theme({
    "info": "bold #b0d8e3",       # Pale Cyan
    "text": "default",            # Adaptive
    "dim": "dim",                 # Grey
    "warning": "bold #ffafaf",    # Soft red
    "success": "bold #a3be8c",    # Soft green
})


def make_console(**kwargs):
    return Console(theme=custom_theme, **kwargs)


def load_messages(path=MESSAGES_PATH):
    """
    Loads the message catalogue and flattens it to dotted ids:
    {'room1': {'enter': ...}} -> {'room1.enter': ...}
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    messages = {}
    for section, entries in raw.items():
        if isinstance(entries, dict):
            for name, text in entries.items():
                messages[f"{section}.{name}"] = str(text)
        else:
            messages[section] = str(entries)
    return messages


class Narrator:
    def __init__(self, console=None, messages=None, debug_mode=False):
        """
        The Narrator owns every word the player reads.
        The Director only tells it which event happened.
        """
        self.console = console or make_console()
        self.messages = messages if messages is not None else load_messages()
        self.debug_mode = debug_mode

    def text(self, event_id, **fields):
        # Fields are escaped so exception text can't inject rich markup.
        template = self.messages[event_id]
        safe_fields = {name: escape(str(value)) for name, value in fields.items()}
        return template.format(**safe_fields)

    def narrate(self, event_id, **fields):
        self.console.print(self.text(event_id, **fields))

    def announce(self, event_id, style="info", title=None, **fields):
        """Bordered panel for the moments that matter: welcome, endings, failures."""
        self.console.print(Panel(
            f"[{style}]{self.text(event_id, **fields)}[/{style}]",
            title=title,
            border_style=style,
        ))

    def debug(self, title, payload):
        if not self.debug_mode:
            return
        self.console.print(Panel(
            f"[dim]{escape(json.dumps(payload, indent=2, default=str))}[/dim]",
            title=f"[DEBUG: {title}]",
            border_style="dim",
        ))
