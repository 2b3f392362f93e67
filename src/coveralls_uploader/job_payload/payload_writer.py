"""Job payload artifact writer."""

from __future__ import annotations

import json
from pathlib import Path

from .payload_models import JobPayload


class PayloadWriteError(Exception):
    """Raised when the json_file artifact cannot be written."""


class PayloadWriter:  # pylint: disable=too-few-public-methods
    """Serializes a job payload to the json_file uploaded to the Jobs API."""

    def write(self, payload: JobPayload, destination: Path | str) -> Path:
        """Write the payload document and return the written path.

        Raises:
          PayloadWriteError: If the directory or file cannot be written.
        """
        output = Path(destination)
        text = json.dumps(payload.to_document(), ensure_ascii=False, separators=(",", ":"))
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise PayloadWriteError(f"Failed to write json_file {output}: {exc}") from exc
        return output
