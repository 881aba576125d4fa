"""Theme colors and color utilities for the UI."""


class BoardColors:
    """Light theme palette for the puzzle window."""

    BG_TOP = "#e0f7fa"
    BG_BOTTOM = "#80deea"

    PRIMARY = "#00838f"
    PRIMARY_LIGHT = "#4fb3bf"
    PRIMARY_DARK = "#005662"

    CORAL = "#ff8a65"
    HEART = "#e53935"

    CARD_BG = "rgba(255, 255, 255, 0.85)"

    TEXT_PRIMARY = "#1a3a3a"
    TEXT_SECONDARY = "#4a6572"
    TEXT_MUTED = "#78909c"

    GRID_LINE = "#37474f"
    IGNORED_FADE = "#ffffff"
    CIRCLE_RING = "#1a3a3a"

    MESSAGE_SUCCESS = "#2e7d32"
    MESSAGE_ERROR = "#c62828"


IGNORED_FADE_AMOUNT = 0.7


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    try:
        a = a.strip()
        b = b.strip()
        if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
            return a
        t = max(0.0, min(1.0, float(t)))
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
        r = int(ar + (br - ar) * t)
        g = int(ag + (bg - ag) * t)
        bl = int(ab + (bb - ab) * t)
        return f"#{r:02X}{g:02X}{bl:02X}"
    except ValueError:
        return a


def ignored_fill(base_hex: str) -> str:
    """Washed-out fill for an ignored cell of color *base_hex*."""
    return blend_hex(base_hex, BoardColors.IGNORED_FADE, IGNORED_FADE_AMOUNT)
