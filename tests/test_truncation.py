from docdigest.config import FILE_LIMITS
from docdigest.truncation import truncate, truncate_text, truncation_marker


def test_long_text_is_cut_and_marked():
    original = "a" * 20000

    result = truncate_text(original, 12000)

    assert len(result) == 12000 + len(truncation_marker(12000))
    assert result[:12000] == original[:12000]
    suffix = result[12000:]
    assert "12,000" in suffix
    assert "truncated" in suffix


def test_short_text_unchanged():
    assert truncate_text("short text", 12000) == "short text"


def test_text_at_exact_cap_unchanged():
    text = "b" * 50
    assert truncate_text(text, 50) is text


def test_default_cap_comes_from_file_limits():
    text = "c" * (FILE_LIMITS.max_chars_for_ai + 1)
    result = truncate(text)

    assert result.truncated
    assert result.text.startswith("c" * FILE_LIMITS.max_chars_for_ai)
    assert result.text.endswith(truncation_marker(FILE_LIMITS.max_chars_for_ai))


def test_truncate_reports_flag():
    assert truncate("tiny", 10).truncated is False
    assert truncate("x" * 11, 10).truncated is True


def test_marker_mentions_stored_text():
    marker = truncation_marker(1500)
    assert "1,500" in marker
    assert "full text is stored" in marker
