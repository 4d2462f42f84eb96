"""Tests for the sample animation example script"""

import runpy

from spinelib.config.settings import PROJECT_ROOT

SCRIPT = PROJECT_ROOT / "examples" / "sample_animation.py"


def _load_script():
    return runpy.run_path(str(SCRIPT))


def _frame_count(out):
    return sum(line.startswith("t=") for line in out.splitlines())


def test_default_is_setup_pose():
    """Leaving out --animation samples the setup pose"""
    args = _load_script()["build_parser"]().parse_args([])
    assert args.animation is None
    assert args.skin == "default"


def test_setup_pose_prints_single_frame(capsys):
    """The setup pose has zero duration, so exactly one frame is printed"""
    _load_script()["main"]([])
    out = capsys.readouterr().out
    assert "animation='None'" in out
    assert _frame_count(out) == 1


def test_named_animation(capsys):
    """A named animation is streamed until its end"""
    _load_script()["main"](["--animation", "walk", "--fps", "4"])
    out = capsys.readouterr().out
    assert "animation='walk'" in out
    assert _frame_count(out) == 5
