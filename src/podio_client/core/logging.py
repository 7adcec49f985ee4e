import logging
from typing import Any, Iterable, Optional

# Structured fields the client and the grants attach through ``extra``.
LOG_EXTRA_FIELDS = (
    "method",
    "path",
    "status",
    "duration_ms",
    "grant_type",
    "error_kind",
)

_HANDLER_MARKER = "_podio_logfmt"


def logfmt_value(val: Any) -> str:
    """Render one value; strings that would break key=value parsing are quoted."""
    if isinstance(val, (bool, int, float)):
        return str(val)
    text = str(val)
    if text and not any(ch in text for ch in ' ="'):
        return text
    return '"' + text.replace('"', '\\"') + '"'


class LogfmtFormatter(logging.Formatter):
    """
    One ``key=value`` line per record: level, logger, event, then whichever
    of ``fields`` the record carries. Anything else passed in ``extra`` is
    left out, which keeps tokens and secrets off the log line.
    """

    def __init__(self, fields: Optional[Iterable[str]] = None):
        super().__init__()
        self.fields = tuple(LOG_EXTRA_FIELDS if fields is None else fields)

    def format(self, record: logging.LogRecord) -> str:
        pairs = [("level", record.levelname.lower()), ("logger", record.name)]

        event = record.getMessage()
        if event:
            pairs.append(("event", event))

        pairs.extend(
            (key, getattr(record, key))
            for key in self.fields
            if getattr(record, key, None) is not None
        )

        if record.exc_info and record.exc_info[0] is not None:
            pairs.append(("exc_type", record.exc_info[0].__name__))

        return " ".join(f"{key}={logfmt_value(val)}" for key, val in pairs)


def setup_logging(level: str = "INFO") -> None:
    """Install a logfmt handler on the root logger.

    Calling it again only adjusts the level.
    """
    root = logging.getLogger()
    installed = [h for h in root.handlers if getattr(h, _HANDLER_MARKER, False)]
    if not installed:
        handler = logging.StreamHandler()
        handler.setFormatter(LogfmtFormatter())
        setattr(handler, _HANDLER_MARKER, True)
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS", "logfmt_value"]
