"""Logging configuration for variantinput parse diagnostics.

Provides console logging plus a structured JSONL record of invalid inputs.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from variantinput.models.variant import UserInput


class InputDiagnosticsLogger:
    """Logger for batch parse diagnostics with structured output."""

    def __init__(self, log_dir: Path | None = None, enable_file_logging: bool = True):
        """Initialize the diagnostics logger.

        Args:
            log_dir: Directory for log files. Defaults to ./logs
            enable_file_logging: Whether to write logs to files
        """
        self.logger = logging.getLogger("variantinput.diagnostics")
        self.logger.setLevel(logging.INFO)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_handler.setFormatter(console_formatter)
        self.logger.addHandler(console_handler)

        self.file_handler = None
        if enable_file_logging:
            if log_dir is None:
                log_dir = Path("./logs")
            log_dir.mkdir(parents=True, exist_ok=True)

            timestamp = datetime.now().strftime("%Y%m%d")
            log_file = log_dir / f"parse_diagnostics_{timestamp}.jsonl"

            self.file_handler = logging.FileHandler(log_file)
            self.file_handler.setLevel(logging.DEBUG)
            self.file_handler.setFormatter(logging.Formatter('%(message)s'))
            self.file_handler.addFilter(lambda record: record.levelno == logging.DEBUG)
            self.logger.addHandler(self.file_handler)

            self.log_file = log_file
            self.logger.info(f"Parse diagnostics logging enabled: {log_file}")
        else:
            self.log_file = None

    def log_batch(self, source: str, user_inputs: list[UserInput]) -> str:
        """Log a parsed batch and each of its invalid inputs.

        Returns:
            Batch ID for tracking
        """
        batch_id = f"batch_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}"
        invalid = [user_input for user_input in user_inputs if not user_input.is_valid]

        self._write({
            "timestamp": datetime.now().isoformat(),
            "event_type": "batch",
            "batch_id": batch_id,
            "source": source,
            "total": len(user_inputs),
            "invalid": len(invalid),
            "formats": _format_counts(user_inputs),
        })

        self.logger.info(f"Batch {source}: {len(user_inputs)} inputs, {len(invalid)} invalid")

        for index, user_input in enumerate(user_inputs):
            if not user_input.is_valid:
                self.log_invalid_input(batch_id, index, user_input)

        return batch_id

    def log_invalid_input(self, batch_id: str, index: int, user_input: UserInput) -> None:
        """Log one invalid input with its errors."""
        self._write({
            "timestamp": datetime.now().isoformat(),
            "event_type": "invalid_input",
            "batch_id": batch_id,
            "index": index,
            "input": user_input.input_str,
            "type": user_input.type.value,
            "format": user_input.format.value,
            "errors": user_input.errors,
        })

    def _write(self, log_entry: dict[str, Any]) -> None:
        # Write JSON to file handler only
        if self.file_handler:
            self.file_handler.stream.write(json.dumps(log_entry) + '\n')
            self.file_handler.flush()


def _format_counts(user_inputs: list[UserInput]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for user_input in user_inputs:
        counts[user_input.format.value] = counts.get(user_input.format.value, 0) + 1
    return counts


# Global logger instance
_global_logger: InputDiagnosticsLogger | None = None


def get_logger(log_dir: Path | None = None, enable_file_logging: bool = True) -> InputDiagnosticsLogger:
    """Get or create the global diagnostics logger."""
    global _global_logger

    if _global_logger is None:
        _global_logger = InputDiagnosticsLogger(log_dir=log_dir, enable_file_logging=enable_file_logging)

    return _global_logger


def reset_logger() -> None:
    """Reset the global logger (mainly for testing)."""
    global _global_logger
    _global_logger = None
