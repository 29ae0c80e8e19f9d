# io/op_logging.py
import json
import logging
import sys

from lineref.config.models import LogModel

ROOT = "lineref"


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload)


def _default_json_logger(name=ROOT, level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


def get_logger(name: str = ROOT) -> logging.Logger:
    """Child of `lineref`; the JSON handler is installed on first use."""
    _default_json_logger()
    return logging.getLogger(name)


def configure(cfg: LogModel | None = None) -> logging.Logger:
    cfg = cfg or LogModel()
    logger = _default_json_logger(level=cfg.level)
    logger.setLevel("DEBUG" if cfg.debug else cfg.level)
    return logger


def emit(log: logging.Logger, level: str, msg: str, **extra) -> None:
    lvl = getattr(logging, level)
    if log.isEnabledFor(lvl):
        log.log(lvl, msg, extra={"extra": extra})
