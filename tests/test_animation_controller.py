"""Tests for animation sessions, streaming and the one-call animator"""

import math

import numpy as np
import pytest

from spinelib.animation.animation_controller import (
    AnimationSession, AnimationStream, SkeletonAnimator, resolve,
)
from spinelib.animation.skeleton import build
from spinelib.core.errors import AnimationNotFound, SkinNotFound


def test_end_to_end_rotation(arm_document):
    """Rotating the root by 90 degrees turns the child slot by 45 at half time"""
    skeleton = build(arm_document)
    session = resolve(skeleton, "default", "turn")

    sprites = session.sample(0.5)
    assert len(sprites) == 1
    sprite = sprites[0]
    assert sprite.attachment == "hand"
    assert sprite.color == (255, 255, 255, 255)
    assert math.degrees(sprite.srt.rotation) == pytest.approx(45.0)
    assert (sprite.srt.scale_x, sprite.srt.scale_y) == pytest.approx((1.0, 1.0))
    offset = 10.0 * math.cos(math.radians(45.0))
    assert (sprite.srt.x, sprite.srt.y) == pytest.approx((offset, offset))


def test_end_to_end_quad_corners(arm_document):
    """Quad corners follow the slot bone's world transform"""
    skeleton = build(arm_document)
    sprite = resolve(skeleton, "default", "turn").sample(1.0)[0]

    # Bone at (0, 10) rotated 90 degrees: local top-left (-5, 5) maps to (-5, 5)
    expected = np.array([[-5.0, 5.0], [-5.0, 15.0], [5.0, 15.0], [5.0, 5.0]])
    assert np.allclose(sprite.positions, expected)


def test_sample_past_duration(arm_document):
    """Sampling after the last keyframe yields no pose, sampling at it does"""
    session = resolve(build(arm_document), "default", "turn")
    assert session.duration == 1.0
    assert session.sample(1.0) is not None
    assert session.sample(1.0001) is None


def test_setup_pose_session(arm_document):
    """A session without animation only has the setup pose at time zero"""
    session = resolve(build(arm_document), "default")
    assert session.duration == 0.0
    sprites = session.sample(0.0)
    assert sprites[0].srt.rotation == 0.0
    assert session.sample(0.1) is None


def test_empty_animation(leg_document):
    """An animation without keyframes has zero duration"""
    session = resolve(build(leg_document), "default", "empty")
    assert session.sample(0.0) is not None
    assert session.sample(0.5) is None


def test_attachment_switch(leg_document):
    """Stepped attachment keyframes switch exactly at their time"""
    session = resolve(build(leg_document), "default", "walk")
    assert session.resolver.is_dynamic(0)
    assert not session.resolver.is_dynamic(1)

    assert [s.attachment for s in session.sample(0.9)] == ["legA"]
    assert [s.attachment for s in session.sample(1.0)] == ["legB"]
    assert session.sample(1.0)[0].source.height == 14.0


def test_attachment_hidden_and_before_first_key(leg_document):
    """A nameless keyframe hides the slot; before the first key the setup attachment shows"""
    session = resolve(build(leg_document), "default", "blink")
    assert [s.attachment for s in session.sample(0.25)] == ["legA"]
    assert session.sample(0.75) == []
    assert [s.attachment for s in session.sample(1.0)] == ["legB"]


def test_skin_overrides_with_default_fallback(leg_document):
    """Skins replace attachments they define and fall back to the default skin"""
    session = resolve(build(leg_document), "armored", "walk")
    first = session.sample(0.0)[0]
    assert first.attachment == "legA_armored"
    assert first.source.width == 5.0
    assert session.sample(1.0)[0].attachment == "legB"


def test_slot_without_attachment_is_omitted(leg_document):
    """Slots with nothing to draw produce no sprite"""
    sprites = resolve(build(leg_document), "default").sample(0.0)
    assert [s.attachment for s in sprites] == ["legA"]


def test_unresolvable_timeline_attachment_hides_slot(leg_document):
    """Names found in no skin hide the slot instead of failing at sample time"""
    leg_document["animations"]["walk"]["slots"]["leg"]["attachment"][1]["name"] = "legZ"
    session = resolve(build(leg_document), "default", "walk")
    assert session.sample(1.0) == []


def test_color_timeline(leg_document):
    """Slot tints follow the color timeline"""
    session = resolve(build(leg_document), "default", "fade")
    assert session.sample(0.0)[0].color == (0, 0, 0, 255)
    assert session.sample(1.0)[0].color == (128, 128, 128, 255)
    assert session.sample(2.0)[0].color == (255, 255, 255, 255)


def test_sampling_is_pure(leg_document):
    """Resolving the same pair twice and sampling the same time gives equal sprites"""
    skeleton = build(leg_document)
    first = resolve(skeleton, "armored", "fade")
    second = resolve(skeleton, "armored", "fade")
    assert first.sample(0.7) == second.sample(0.7)
    assert first.sample(0.7) == first.sample(0.7)


def test_resolve_errors(leg_document):
    """Missing skins or animations are reported when resolving"""
    skeleton = build(leg_document)
    with pytest.raises(SkinNotFound):
        resolve(skeleton, "golden", "walk")
    with pytest.raises(AnimationNotFound):
        resolve(skeleton, "default", "jump")


def test_resolve_requires_default_skin(leg_document):
    """The default skin is required as fallback"""
    leg_document["skins"]["main"] = leg_document["skins"].pop("default")
    skeleton = build(leg_document)
    with pytest.raises(SkinNotFound) as excinfo:
        resolve(skeleton, "main", "walk")
    assert excinfo.value.name == "default"


def test_get_animated_skin(arm_document):
    """Skeletons create sessions directly"""
    session = build(arm_document).get_animated_skin("default", "turn")
    assert isinstance(session, AnimationSession)
    assert session.track.name == "turn"


def test_stream_stops_after_duration(arm_document):
    """Streams sample at fixed steps and end once past the duration"""
    session = resolve(build(arm_document), "default", "turn")
    frames = list(session.stream(0.25))
    assert len(frames) == 5
    assert math.degrees(frames[2][0].srt.rotation) == pytest.approx(45.0)
    assert frames[2] == session.sample(0.5)


def test_stream_is_finite_and_not_restartable(arm_document):
    """An exhausted stream stays exhausted; a new stream starts over"""
    session = resolve(build(arm_document), "default", "turn")
    stream = session.stream(0.3)
    assert len(list(stream)) == 4
    assert list(stream) == []
    assert len(list(session.stream(0.3))) == 4


def test_stream_start_offset(arm_document):
    """Streams can begin part way through the animation"""
    session = resolve(build(arm_document), "default", "turn")
    stream = session.stream(0.5, start=0.5)
    assert stream.time == 0.5
    assert len(list(stream)) == 2


def test_stream_rejects_non_positive_delta(arm_document):
    """Zero or negative steps would never end"""
    session = resolve(build(arm_document), "default", "turn")
    with pytest.raises(ValueError):
        AnimationStream(session, 0.0)
    with pytest.raises(ValueError):
        session.stream(-0.1)


def test_skeleton_animator_caches_sessions(leg_document):
    """The animator reuses one session per skin and animation"""
    animator = SkeletonAnimator(build(leg_document))
    assert animator.session("default", "walk") is animator.session("default", "walk")
    assert animator.session("default", "walk") is not animator.session("armored", "walk")

    sprites = animator.calculate("default", "walk", 1.0)
    assert [s.attachment for s in sprites] == ["legB"]
    assert animator.calculate("default", "walk", 3.0) is None
