"""
Logging setup for learnkit.
Records go to a single stream handler on the ``learnkit`` logger, either as
``LEVEL: message`` lines or as one JSON object per line.
"""

import json
import logging

# attributes every LogRecord carries; anything else came in through ``extra``
_STANDARD_ATTRS = frozenset(vars(logging.LogRecord('', 0, '', 0, '', (), None))) | {'message', 'asctime'}


class JsonFormatter(logging.Formatter):
    """
    Render a log record as a JSON object.

    The object holds ``level``, ``time``, ``name`` and ``message``, then every
    field passed through ``extra`` (for example the K-Means ``shift``). A
    formatted traceback is added under ``exception`` when one is attached.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "time": self.formatTime(record, self.datefmt),
            "name": record.name,
            "message": record.getMessage(),
        }
        payload.update({key: value for key, value in vars(record).items()
                        if key not in _STANDARD_ATTRS})
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def setup_logging(level=logging.WARNING, json_format: bool = False, stream=None) -> logging.Logger:
    """
    Route learnkit log records to a stream.

    Args:
        level: Logging level, as a number or a name such as 'INFO'
        json_format: Emit JSON objects instead of plain lines
        stream: Target stream; stderr when None

    Returns:
        The configured ``learnkit`` logger
    """
    handler = logging.StreamHandler(stream)
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    logger = logging.getLogger("learnkit")
    logger.handlers = [handler]
    logger.setLevel(level)
    return logger
