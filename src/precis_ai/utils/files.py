from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Optional

from precis_ai.data_models import SubmittedFile


def guess_media_type(path: Path) -> Optional[str]:
    """Guess a media type from the file name, as a browser would when uploading."""
    media_type, _ = mimetypes.guess_type(path.name)
    return media_type


def load_submitted_file(path: Path, media_type: Optional[str] = None) -> SubmittedFile:
    """Read a local file into a `SubmittedFile`, guessing its media type unless one is given."""
    return SubmittedFile(
        name=path.name,
        content=path.read_bytes(),
        media_type=media_type or guess_media_type(path),
    )
