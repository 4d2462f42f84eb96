"""Errors raised while building skeletons and resolving animation sessions."""


class SkeletonError(RuntimeError):
    """Base class for structural errors in a skeleton document."""


class BoneNotFound(SkeletonError):
    """Raised when a bone or parent reference matches no declared bone."""

    def __init__(self, name: str):
        super().__init__(f"Bone not found: {name}")
        self.name = name


class SlotNotFound(SkeletonError):
    """Raised when a slot reference matches no declared slot."""

    def __init__(self, name: str):
        super().__init__(f"Slot not found: {name}")
        self.name = name


class DuplicateName(SkeletonError):
    """Raised when two bones or two slots share a name."""

    def __init__(self, kind: str, name: str):
        super().__init__(f"Duplicate {kind} name: {name}")
        self.kind = kind
        self.name = name


class SkinNotFound(SkeletonError):
    """Raised when a requested (or the fallback default) skin is absent."""

    def __init__(self, name: str):
        super().__init__(f"Skin not found: {name}")
        self.name = name


class AnimationNotFound(SkeletonError):
    """Raised when a requested animation is absent."""

    def __init__(self, name: str):
        super().__init__(f"Animation not found: {name}")
        self.name = name


class ColorDecodeError(SkeletonError):
    """Raised when a tint string is not a valid RRGGBBAA hex color."""

    def __init__(self, value):
        super().__init__(f"Invalid RRGGBBAA color: {value!r}")
        self.value = value


class TimelineOrderError(SkeletonError):
    """Raised when keyframe times within one timeline decrease."""

    def __init__(self, previous: float, current: float):
        super().__init__(
            f"Keyframe times must be non-decreasing (got {current} after {previous})"
        )
        self.previous = previous
        self.current = current


class DocumentError(ValueError):
    """Raised when a skeleton document is missing fields or has unknown tags."""
