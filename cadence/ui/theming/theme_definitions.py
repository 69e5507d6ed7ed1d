# cadence/ui/theming/theme_definitions.py
# Theme color palette definitions for Cadence CLI

from __future__ import annotations


# gradient palettes; index 0-4 feed the accent colors, index 5 is a contrast tone
THEMES = {
    "deep_blue": [
        "#4a90e2",  # sky blue
        "#357abd",  # medium blue
        "#2563eb",  # royal blue
        "#1d4ed8",  # deep blue
        "#1e40af",  # dark blue
        "#0891b2",  # teal
    ],
    "pink_purple": [
        "#ff69b4",  # hot pink
        "#ff1493",  # deep pink
        "#da70d6",  # orchid
        "#ba55d3",  # medium orchid
        "#9932cc",  # dark orchid
        "#8a2be2",  # blue violet
    ],
    "sunset_coral": [
        "#FF7F50",  # coral
        "#FF8C69",  # salmon
        "#FFA500",  # orange
        "#FFB347",  # peach
        "#FFD700",  # gold
        "#FFDC00",  # bright gold
    ],
    "teal_lime": [
        "#00CED1",  # dark turquoise
        "#20B2AA",  # light sea green
        "#3CB371",  # medium sea green
        "#66CDAA",  # medium aquamarine
        "#90EE90",  # light green
        "#ADFF2F",  # green yellow
    ],
    "stage_dark": [
        "#e2e8f0",  # slate 200
        "#cbd5e1",  # slate 300
        "#94a3b8",  # slate 400
        "#64748b",  # slate 500
        "#475569",  # slate 600
        "#f59e0b",  # amber spotlight
    ],
}

DEFAULT_THEME = "deep_blue"
