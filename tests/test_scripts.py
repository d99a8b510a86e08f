from script import fetch_words
from script.normalize_words import normalize_words

PAGE = """
<html><body><table>
<tr><td>2024-01-03 (Wed) 929</td><td>CRANE</td></tr>
<tr><td>2024-01-02 (Tue) 928</td><td>STARE</td></tr>
<tr><td>2024-01-01 (Mon) 927</td><td>CRANE</td></tr>
</table></body></html>
"""


def test_normalize_words():
    words = ["crane", "Animé", " CRANE ", "???", "planet", ""]
    assert normalize_words(words, 5) == ["CRANE", "ANIME"]


def test_parse_answers():
    assert fetch_words.parse_answers(PAGE) == ["CRANE", "STARE"]


def test_fetch_answers(monkeypatch):
    class _Response:
        text = PAGE

        def raise_for_status(self):
            pass

    calls = []

    def fake_get(url, timeout):
        calls.append(url)
        return _Response()

    monkeypatch.setattr(fetch_words.requests, "get", fake_get)
    assert fetch_words.fetch_answers("http://example.test") == ["CRANE", "STARE"]
    assert calls == ["http://example.test"]
