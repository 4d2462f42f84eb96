"""Shared skeleton documents for the animation tests."""

import copy

import pytest


ARM_DOCUMENT = {
    "bones": [
        {"name": "root"},
        {"name": "arm", "parent": "root", "x": 10.0},
    ],
    "slots": [
        {"name": "hand", "bone": "arm", "attachment": "hand"},
    ],
    "skins": {
        "default": {
            "hand": {"hand": {"width": 10, "height": 10}},
        },
    },
    "animations": {
        "turn": {
            "bones": {
                "root": {
                    "rotate": [
                        {"time": 0.0, "angle": 0.0},
                        {"time": 1.0, "angle": 90.0},
                    ],
                },
            },
        },
    },
}


LEG_DOCUMENT = {
    "bones": [
        {"name": "root"},
        {"name": "hip", "parent": "root", "y": 5.0},
    ],
    "slots": [
        {"name": "leg", "bone": "hip", "attachment": "legA"},
        {"name": "shadow", "bone": "root"},
    ],
    "skins": {
        "default": {
            "leg": {
                "legA": {"width": 4, "height": 12},
                "legB": {"width": 4, "height": 14, "y": -1},
            },
        },
        "armored": {
            "leg": {
                "legA": {"name": "legA_armored", "width": 5, "height": 12},
            },
        },
    },
    "animations": {
        "walk": {
            "slots": {
                "leg": {
                    "attachment": [
                        {"time": 0.0, "name": "legA"},
                        {"time": 1.0, "name": "legB"},
                    ],
                },
            },
        },
        "blink": {
            "slots": {
                "leg": {
                    "attachment": [
                        {"time": 0.5, "name": None},
                        {"time": 1.0, "name": "legB"},
                    ],
                },
            },
        },
        "fade": {
            "slots": {
                "leg": {
                    "color": [
                        {"time": 0.0, "color": "000000FF"},
                        {"time": 2.0, "color": "FFFFFFFF"},
                    ],
                },
            },
        },
        "empty": {},
    },
}


@pytest.fixture
def arm_document():
    """Root bone rotating 90 degrees over one second, child arm with one slot."""
    return copy.deepcopy(ARM_DOCUMENT)


@pytest.fixture
def leg_document():
    """Slot switching between two leg attachments, plus skin and color variants."""
    return copy.deepcopy(LEG_DOCUMENT)
