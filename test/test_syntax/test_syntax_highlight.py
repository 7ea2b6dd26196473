import json

from fieldwork import syntax
from fieldwork.syntax import syntax_highlight
from fieldwork.util import decolor


class TestJson:
    def test_highlight_preserves_text(self):
        text = json.dumps([{"Name": "notes.txt", "Length": 120}], indent=2)
        highlighted = syntax_highlight(text, "json")
        assert highlighted != text
        assert decolor(highlighted).strip() == text

    def test_formatter_is_cached_per_style(self):
        syntax_highlight("{}", "json", style="monokai")
        formatter = syntax.formatters["monokai"]
        syntax_highlight("[]", "json", style="monokai")
        assert syntax.formatters["monokai"] is formatter
