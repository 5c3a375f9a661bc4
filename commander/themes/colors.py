# Commander CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color palette and rich theme used for Commander console output.

`OneColors` exposes hex colors as class attributes. Appending `_b` to any name
(e.g. `OneColors.DARK_RED_b`) yields the bold variant, resolved by `ColorsMeta`.
"""
from rich.style import Style
from rich.theme import Theme


class ColorsMeta(type):
    """Resolves `<NAME>_b` attributes to a bold rich style string."""

    def __getattr__(cls, name: str) -> str:
        if name.endswith("_b"):
            base = name[:-2]
            if base in cls.__dict__:
                return f"bold {cls.__dict__[base]}"
        raise AttributeError(f"{cls.__name__} has no color '{name}'")


class OneColors(metaclass=ColorsMeta):
    """One Dark inspired palette."""

    BLACK = "#282C34"
    WHITE = "#ABB2BF"
    COMMENT_GREY = "#5C6370"
    DARK_RED = "#BE5046"
    LIGHT_RED = "#E06C75"
    GREEN = "#98C379"
    DARK_YELLOW = "#D19A66"
    LIGHT_YELLOW = "#E5C07B"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"
    CYAN = "#56B6C2"


def get_theme() -> Theme:
    """Return the rich theme used by the Commander console."""
    return Theme(
        {
            "repr.number": Style.parse(OneColors.DARK_YELLOW),
            "repr.str": Style.parse(OneColors.GREEN),
            "logging.level.debug": Style.parse(OneColors.COMMENT_GREY),
            "logging.level.info": Style.parse(OneColors.CYAN),
            "logging.level.warning": Style.parse(OneColors.LIGHT_YELLOW_b),
            "logging.level.error": Style.parse(OneColors.DARK_RED_b),
        }
    )
