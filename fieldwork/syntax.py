from typing import Literal, Type

from pygments import highlight as pygments_highlight
from pygments.formatters import TerminalTrueColorFormatter
from pygments.lexer import Lexer
from pygments.lexers import JsonLexer

Language = Literal["json"]

formatters: dict[str, TerminalTrueColorFormatter] = {}
lexer_classes: dict[Language, Type[Lexer]] = {
    "json": JsonLexer,
}
lexers: dict[Language, Lexer] = {}


# *** Helper Functions
def _get_lexer(lang: Language) -> Lexer:
    lexer = lexers.get(lang)
    if lexer is None:
        lexer_class = lexer_classes[lang]
        lexer = lexer_class()
        lexers[lang] = lexer
    return lexer


def _get_color_formatter(style: str) -> TerminalTrueColorFormatter:
    formatter = formatters.get(style)
    if formatter is None:
        formatter = TerminalTrueColorFormatter(style=style)
        formatters[style] = formatter
    return formatter


def syntax_highlight(text: str, lang: Language, style: str = "monokai") -> str:
    lexer: Lexer = _get_lexer(lang)
    color_formatter: TerminalTrueColorFormatter = _get_color_formatter(style)
    highlighted: str = pygments_highlight(text, lexer, color_formatter)
    return highlighted
