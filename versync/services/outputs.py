"""GitHub Actions step outputs and failure reporting."""

import logging
import uuid
from pathlib import Path

logger = logging.getLogger(__name__)


def _format_value(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class StepOutputs:
    """Writes ``name=value`` step outputs to the GITHUB_OUTPUT file."""

    def __init__(self, output_path: Path | str | None = None):
        self.output_path = Path(output_path) if output_path else None
        self.failed = False

    def set_output(self, name: str, value: object) -> None:
        """Record a step output."""
        text = _format_value(value)
        logger.info("Output %s=%s", name, text)

        if self.output_path is None:
            logger.debug("GITHUB_OUTPUT not set, output %s not persisted", name)
            return

        with self.output_path.open("a", encoding="utf-8") as fh:
            if "\n" in text or "\r" in text:
                delimiter = f"ghadelimiter_{uuid.uuid4()}"
                print(f"{name}<<{delimiter}", file=fh)
                print(text, file=fh)
                print(delimiter, file=fh)
            else:
                print(f"{name}={text}", file=fh)

    def set_failed(self, message: str) -> None:
        """Mark the step as failed and emit an error annotation."""
        self.failed = True
        logger.error(message)
        print(f"::error::{message}", flush=True)
