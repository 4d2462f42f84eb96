"""Skeleton loader for JSON skeleton documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import IO, Any, Dict

from ..animation.skeleton import Skeleton
from ..config.settings import PROJECT_ROOT
from ..core.document import SkeletonDocument

logger = logging.getLogger(__name__)


class SkeletonLoader:
    """Load skeletons from JSON documents."""

    def load(self, path: Path | str) -> Skeleton:
        """Load a skeleton from disk."""

        skeleton_path = Path(path)
        if not skeleton_path.is_absolute():
            skeleton_path = PROJECT_ROOT / skeleton_path
        skeleton_path = skeleton_path.resolve()

        if not skeleton_path.exists():
            raise FileNotFoundError(f"Skeleton file not found: {skeleton_path}")

        with skeleton_path.open("r", encoding="utf-8") as handle:
            skeleton = self.load_stream(handle)

        logger.info("Loaded skeleton %s: %r", skeleton_path.name, skeleton)
        return skeleton

    def load_stream(self, handle: IO[str]) -> Skeleton:
        """Load a skeleton from an open text stream."""
        return self.load_dict(json.load(handle))

    def load_dict(self, payload: Dict[str, Any]) -> Skeleton:
        """Build a skeleton from an already-decoded JSON payload."""
        return Skeleton.from_document(SkeletonDocument.from_dict(payload))
