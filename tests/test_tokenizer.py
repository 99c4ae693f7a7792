from __future__ import annotations

import unittest

from txn_validation.parsing.tokenizer import has_balanced_quotes, is_blank_line, tokenize_line


class TestTokenizeLine(unittest.TestCase):
    def test_splits_plain_fields(self) -> None:
        self.assertEqual(
            tokenize_line("2024-01-15,TXN1234567,100.50,USD"),
            ["2024-01-15", "TXN1234567", "100.50", "USD"],
        )

    def test_removes_quotes_around_fields(self) -> None:
        self.assertEqual(
            tokenize_line('"2024-01-15","TXN1234567","100.50","USD"'),
            ["2024-01-15", "TXN1234567", "100.50", "USD"],
        )

    def test_delimiter_inside_quotes_is_literal(self) -> None:
        self.assertEqual(tokenize_line('"1,000.50",USD'), ["1,000.50", "USD"])

    def test_trailing_delimiter_yields_empty_field(self) -> None:
        self.assertEqual(tokenize_line("2024-01-15,TXN1234567,100.50,"), ["2024-01-15", "TXN1234567", "100.50", ""])

    def test_fields_are_trimmed_after_quote_removal(self) -> None:
        self.assertEqual(tokenize_line('  "  padded  " , b '), ["padded", "b"])

    def test_quote_in_middle_of_field_toggles_mode(self) -> None:
        self.assertEqual(tokenize_line('ab"c,d"e,f'), ["abc,de", "f"])

    def test_unterminated_quote_absorbs_rest_of_line(self) -> None:
        self.assertEqual(tokenize_line('a,"b,c,d'), ["a", "b,c,d"])

    def test_line_terminators_are_ignored(self) -> None:
        self.assertEqual(tokenize_line("a,b\r\n"), ["a", "b"])

    def test_custom_delimiter(self) -> None:
        self.assertEqual(tokenize_line("a;b,c;d", delimiter=";"), ["a", "b,c", "d"])

    def test_empty_line_yields_single_empty_field(self) -> None:
        self.assertEqual(tokenize_line(""), [""])


class TestQuoteBalance(unittest.TestCase):
    def test_balanced_quotes(self) -> None:
        self.assertTrue(has_balanced_quotes('"a","b",c'))
        self.assertTrue(has_balanced_quotes("a,b,c"))

    def test_unbalanced_quotes(self) -> None:
        self.assertFalse(has_balanced_quotes('"a,b,c'))


class TestBlankLine(unittest.TestCase):
    def test_whitespace_only_line_is_blank(self) -> None:
        self.assertTrue(is_blank_line("   \t\r\n"))
        self.assertTrue(is_blank_line(""))

    def test_delimiters_are_not_blank(self) -> None:
        self.assertFalse(is_blank_line(",,,"))


if __name__ == "__main__":
    unittest.main()
