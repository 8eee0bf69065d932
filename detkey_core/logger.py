"""
detkey_core.logger
------------------
One JSON-line format for every component. Records go to stderr so that
stdout carries only command output (the "<identifier> <name>" line).
"""

import logging, json, sys, time, os

LOG_FORMAT = json.dumps({
    "ts": "%(asctime)s",
    "level": "%(levelname)s",
    "name": "%(name)s",
    "msg": "%(message)s",
})
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%SZ"


def _formatter() -> logging.Formatter:
    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    fmt.converter = time.gmtime
    return fmt


def get_logger(name="detkey", level=logging.INFO, to_file=None):
    """Return the named logger, attaching handlers on first use only."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if logger.handlers:
        return logger

    fmt = _formatter()
    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(fmt)
    logger.addHandler(stream)

    if to_file:
        os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
        sink = logging.FileHandler(to_file)
        sink.setFormatter(fmt)
        logger.addHandler(sink)

    return logger


def set_level(level) -> None:
    """Apply a level (name or number) to every detkey logger created so far."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    for name, obj in logging.Logger.manager.loggerDict.items():
        if isinstance(obj, logging.Logger) and (name == "detkey" or name.startswith("DetKey")):
            obj.setLevel(level)
