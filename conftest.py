"""
Shared pytest fixtures for modifier tests.
"""

import pytest


@pytest.fixture
def chained_options():
    """Option bag with a primary step and two chained steps."""
    return {
        "width": 500,
        "height": 500,
        "aspectRatio": "16:9",
        "crop": "scale",
        "chaining": [
            {"bitRate": 12, "effect": "grayscale"},
            {
                "effect": "pixelate",
                "border": {"width": 1, "type": "dashed", "color": "#fff"},
            },
        ],
    }
