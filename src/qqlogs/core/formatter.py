from __future__ import annotations

"""
Line Formatter.

Renders one log event into a single text line from the configured
template. Placeholders are substituted in one pass, so text coming from the
message or the prefix is never itself treated as a template.
"""

import re
from datetime import datetime
from typing import Callable, Optional

from qqlogs.domain.levels import LevelLike, display_name, symbolic_name

Clock = Callable[[], datetime]

PLACEHOLDER_PATTERN = re.compile(r"%(DateTime|szLogLevel|LogLevel|Message)%")
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


def format_timestamp(moment: datetime) -> str:
    """Render a local timestamp as ISO-8601-like text with millisecond precision."""
    return moment.strftime(TIMESTAMP_FORMAT)[:-3]


class LineFormatter:
    """
    Pure renderer bound to a template source and a clock.

    The template is read through a callable so setter changes on the owning
    configuration take effect on the next line without rebuilding the
    formatter.
    """

    def __init__(self, template: Callable[[], str], clock: Optional[Clock] = None) -> None:
        self._template = template
        self._clock: Clock = clock or datetime.now

    def render(self, level: LevelLike, message: str, prefix: Optional[str] = None) -> str:
        """
        Produce the text of one log line (without the line terminator).

        Args:
            level: Enumerated or raw integer level in [0, 10].
            message: Message body, inserted verbatim.
            prefix: Optional text placed before the rendered template.

        Returns:
            str: The rendered line.

        Raises:
            InvalidLevel: If the level lies outside the display table.
        """
        if message is None:
            raise TypeError("message must be a string, not None")

        values = {
            "DateTime": format_timestamp(self._clock()),
            "szLogLevel": display_name(level),
            "LogLevel": symbolic_name(level),
            "Message": str(message),
        }
        line = PLACEHOLDER_PATTERN.sub(lambda m: values[m.group(1)], self._template())

        if prefix:
            line = f"{prefix}{line}"
        return line
