from mercury.parsing import clean_line, collapse_whitespace


def test_collapse_whitespace_handles_nbsp_and_line_breaks():
    assert collapse_whitespace("  05 марта\n\t2022   года ") == "05 марта 2022 года"


def test_collapse_whitespace_returns_empty_for_blank_text():
    assert collapse_whitespace("  \n") == ""


def test_clean_line_strips_bullet_and_trailing_punctuation():
    assert clean_line("- по проекту планировки;") == "по проекту планировки"
    assert clean_line("— по проекту межевания.") == "по проекту межевания"
    assert clean_line("по проекту застройки..;") == "по проекту застройки"


def test_clean_line_keeps_text_without_trailing_punctuation():
    assert clean_line("- по проекту планировки") == "- по проекту планировки"
    assert clean_line("по проекту X:") == "по проекту X:"


def test_clean_line_of_punctuation_only_is_empty():
    assert clean_line(" ; ") == ""
