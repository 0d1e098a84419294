"""
Default Image Config

Built-in presets served whenever no remote config has been fetched.
"""

from typing import Any

DEFAULT_IMAGE_CONFIG: dict[str, Any] = {
    "thumbnails": {
        "avatar": {
            "mobile": {"width": 90, "height": 90},
            "tablet": {"width": 111, "height": 111},
            "desktop": {"width": 160, "height": 160},
        },
        # Lists are crop variants, largest first
        "school-thumbnail": {
            "mobile": [{"width": 369, "height": 230}],
            "tablet": [
                {"width": 474, "height": 249},
                {"width": 318, "height": 165},
                {"width": 159.19, "height": 82.909},
                {"width": 159.19, "height": 82.909},
            ],
            "desktop": [
                {"width": 768, "height": 352},
                {"width": 512, "height": 235},
                {"width": 256, "height": 118},
                {"width": 256, "height": 118},
            ],
        },
        "school-banner": {
            "mobile": {"width": 181, "height": 111},
            "tablet": {"width": 240, "height": 240},
            "desktop": {"width": 240, "height": 240},
        },
        "content": {
            "mobile": {"width": 340, "height": 191},
            "tablet": {"width": 638, "height": 359},
            "desktop": {"width": 638, "height": 359},
        },
        "edu-banner": {
            "mobile": {"width": 414, "height": 263},
            "tablet": {"width": 1920, "height": 584},
            "desktop": {"width": 1920, "height": 584},
        },
    },
    "original": {
        "school-photos": {"max_width": 966, "max_height": 644},
        "content": {"max_width": 966, "max_height": 644},
        "og-images": {"max_width": 600, "max_height": 315},
    },
}
