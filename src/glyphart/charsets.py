from enum import Enum

# Every alphabet runs from darkest/densest (brightness 0.0) to lightest (1.0)

BASIC = tuple("@%#*+=-:. ")

DETAILED = tuple("$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`'. ")

# Shades, half blocks and geometric shapes, thinning out towards a blank cell
HIGH_DENSITY = (
    "█", "▓", "▒", "░", "▄", "▀", "■", "▪", "●", "◆",
    "◉", "◍", "◎", "○", "◌", "◊", "♦", "♢", "•", ".",
    " ",
)  # fmt: skip


class AlphabetKind(Enum):
    BASIC = "basic"
    DETAILED = "detailed"
    HIGH_DENSITY = "high_density"

    @property
    def glyphs(self) -> tuple[str, ...]:
        return _ALPHABETS[self]

    @classmethod
    def from_flags(cls, use_detailed_chars: bool, use_high_density: bool) -> "AlphabetKind":
        if use_high_density:
            return cls.HIGH_DENSITY
        if use_detailed_chars:
            return cls.DETAILED
        return cls.BASIC


_ALPHABETS = {
    AlphabetKind.BASIC: BASIC,
    AlphabetKind.DETAILED: DETAILED,
    AlphabetKind.HIGH_DENSITY: HIGH_DENSITY,
}
