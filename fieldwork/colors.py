from more_termcolor import colors

# blocks:
# full  █
# 3/4   ▊
# 1/2   ▌
# 1/4   ▎

COLORIZERS = {
    "black": colors.black,
    "red": colors.red,
    "green": colors.green,
    "yellow": colors.yellow,
    "blue": colors.blue,
    "magenta": colors.magenta,
    "cyan": colors.cyan,
    "white": colors.white,
    "brightwhite": colors.brightwhite,
    "brightblack": colors.brightblack,
    "bold": colors.bold,
    "dark": colors.dark,
    "italic": colors.italic,
}


def colorize(text, color_name: str) -> str:
    """Console renderer entry point: colors `text` by name, e.g. 'yellow', 'bright white'."""
    normalized = color_name.replace(" ", "").replace("_", "").lower()
    colorizer = COLORIZERS.get(normalized)
    if colorizer is None:
        raise ValueError(f"Unknown color {color_name!r}. Expected one of: {', '.join(COLORIZERS)}")
    return colorizer(str(text))


def h3(text, **kwargs):
    # Dark 3/4 block. Manual italic (3) because of more_termcolor crash
    return (
        "\x1b[3m\x1b[2m▊ \x1b[22m" + colors.bold(text, "ul", "bright white", **kwargs) + "\x1b[0m"
    )


def dim(text, **kwargs):
    return colors.dark(text, **kwargs)


def b(text, **kwargs):
    return colors.bold(text, **kwargs)


def field(text):
    return colorize(text, "cyan")


def value(text):
    return colorize(text, "green")


def warn(text):
    return colorize(text, "yellow")
