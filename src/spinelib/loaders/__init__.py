"""Loader utilities for skeleton documents."""

from .skeleton_loader import SkeletonLoader

__all__ = ['SkeletonLoader']
