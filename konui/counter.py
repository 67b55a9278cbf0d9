"""A window with a button that counts how often it was clicked."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .app import run
from .color import Color
from .elements import Split, column, label, layers, on_click, rect
from .events import consume
from .shared import SignalSender
from .values import concat, strfy


def element_builder(signal_sender: SignalSender) -> Split:
    """A label showing the click count above a green button."""
    counter = signal_sender.shared(0)

    def increment() -> None:
        with counter.lock() as guard:
            guard.value += 1

    return column(
        label(concat("clicked ", strfy(counter), " times")),
        on_click(layers(rect(Color.GREEN), label("click me!")), consume(increment)),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="counter", description="Show a button that counts its clicks."
    )
    parser.parse_args(argv)
    run(element_builder)
    return 0