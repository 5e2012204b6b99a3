"""Parses human readable durations ("2ms", "3.05ms", "1.5s") into microseconds."""

import logging
import re
from decimal import Decimal
from typing import ClassVar, Dict, Pattern

from spanfilterlib.exceptions.invalid_duration_exception import (
    InvalidDurationException,
)
from spanfilterlib.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["SEARCH"])


class DurationParser:
    """
    Converts ``<number><unit>`` strings to a float number of microseconds.

    Decimal arithmetic keeps values such as "3.05ms" exact (3050.0) so that
    boundary comparisons against stored span durations behave as written.
    """

    UNIT_TO_MICROS: ClassVar[Dict[str, Decimal]] = {
        "ns": Decimal("0.001"),
        "us": Decimal(1),
        # micro sign and greek small letter mu both appear in the wild
        "\u00b5s": Decimal(1),
        "\u03bcs": Decimal(1),
        "ms": Decimal(1_000),
        "s": Decimal(1_000_000),
        "m": Decimal(60_000_000),
        "h": Decimal(3_600_000_000),
    }

    DURATION_PATTERN: ClassVar[Pattern[str]] = re.compile(
        r"^(?P<number>\d+(?:\.\d+)?|\.\d+)\s*(?P<unit>ns|us|\u00b5s|\u03bcs|ms|s|m|h)$"
    )

    @staticmethod
    def parse(*, text: str) -> float:
        """
        Parse a duration string.

        Args:
            text: Duration such as "2ms", "3.05ms" or "1h"

        Returns:
            The duration in microseconds

        Raises:
            InvalidDurationException: If the text is not a number followed by a supported unit
        """
        match = DurationParser.DURATION_PATTERN.match(text.strip()) if text else None
        if match is None:
            logger.warning("Unable to parse duration: %r", text)
            raise InvalidDurationException(
                message=f"Invalid duration '{text}'. Expected <number><unit> with unit one of "
                f"{', '.join(DurationParser.UNIT_TO_MICROS)}",
                duration=text,
            )

        micros = Decimal(match.group("number")) * DurationParser.UNIT_TO_MICROS[
            match.group("unit")
        ]
        return float(micros)
