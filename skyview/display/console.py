"""Terminal presentation sink for lookups."""

import sys
from typing import TextIO

from skyview.display.formatters import format_location, format_lookup_json, format_lookup_text
from skyview.display.session import DisplaySession
from skyview.models.errors import SkyviewError
from skyview.models.lookup import LookupResult


class ConsoleSink:
    """Writes results to ``out`` and loading/error notices to ``err``."""

    def __init__(
        self,
        session: DisplaySession,
        json_output: bool = False,
        announce_location: bool = False,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ):
        self.session = session
        self.json_output = json_output
        self.announce_location = announce_location
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def loading_started(self, label: str) -> None:
        print(f"Fetching weather for {label}...", file=self.err)

    def loading_finished(self) -> None:
        self.err.flush()

    def render(self, result: LookupResult) -> None:
        if self.json_output:
            print(format_lookup_json(result, self.session), file=self.out)
            return
        if self.announce_location:
            print(f"Showing weather for {format_location(result.current)}", file=self.err)
        print(format_lookup_text(result, self.session), file=self.out)

    def show_error(self, error: SkyviewError) -> None:
        print(f"Error: {error}", file=self.err)
