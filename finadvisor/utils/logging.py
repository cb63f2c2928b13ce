import logging
import json
import os
from logging.handlers import TimedRotatingFileHandler
from datetime import datetime, timezone


class JSONFormatter(logging.Formatter):
    def format(self, record):
        log_record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "name": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
            "module": record.module,
            "funcName": record.funcName,
            "lineNo": record.lineno
        }
        if hasattr(record, "consultation_id"):
            log_record["consultation_id"] = record.consultation_id
        if hasattr(record, "action"):
            log_record["action"] = record.action

        return json.dumps(log_record)


def _log_dir() -> str:
    return os.getenv("ADVISOR_LOG_DIR", "logs")


def setup_logger(name="finadvisor", log_file=None, level=logging.INFO):
    log_file = log_file or os.path.join(_log_dir(), "finadvisor.log")
    os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers
    if not logger.handlers:
        # File Handler (Daily Rotation)
        file_handler = TimedRotatingFileHandler(log_file, when="midnight", interval=1, backupCount=30)
        file_handler.setFormatter(JSONFormatter())

        # Console Handler
        console_handler = logging.StreamHandler()
        console_formatter = logging.Formatter('%(asctime)s - %(name)s - [%(levelname)s] - %(message)s')
        console_handler.setFormatter(console_formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

    return logger


def quiet_third_party_loggers(names=("yfinance", "urllib3", "httpx", "peewee")):
    for name in names:
        noisy = logging.getLogger(name)
        noisy.setLevel(logging.WARNING)


audit_logger = setup_logger("advisor_audit", os.path.join(_log_dir(), "audit.log"))


def log_audit_action(consultation_id, action, details):
    """Audit trail of consultation stages."""
    audit_logger.info(details, extra={"consultation_id": consultation_id, "action": action})
