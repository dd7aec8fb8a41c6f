import unittest

import lexer


class TestSplitFields(unittest.TestCase):
    def test_split_on_semicolon(self):
        self.assertEqual(["echo a", " ls", " pwd"], lexer.split_fields("echo a; ls; pwd", ";"))

    def test_consecutive_delimiters_collapse(self):
        self.assertEqual(["a", "b"], lexer.split_fields(";;a;;;b;", ";"))

    def test_only_delimiters_yields_empty_list(self):
        for line, delim in ((";;;", ";"), ("|", "|"), ("   \t ", " \t"), ("", ";")):
            with self.subTest(line=line):
                self.assertEqual([], lexer.split_fields(line, delim))

    def test_no_empty_fields_ever(self):
        fields = lexer.split_fields("|a||b| |c|", "|")
        self.assertEqual(["a", "b", " ", "c"], fields)
        self.assertTrue(all(fields))

    def test_no_delimiter_returns_whole_line(self):
        self.assertEqual(["sort -r"], lexer.split_fields("sort -r", "|"))

    def test_quotes_do_not_protect_delimiters(self):
        self.assertEqual(['"a', 'b"'], lexer.split_fields('"a;b"', ";"))

    def test_multiple_delimiter_characters(self):
        self.assertEqual(["ls", "-l", "/tmp"], lexer.split_fields(" ls\t-l  /tmp\t", " \t"))


class TestSplitWords(unittest.TestCase):
    def test_split_words_on_spaces_and_tabs(self):
        self.assertEqual(["wc", "-l"], lexer.split_words("  wc \t -l "))

    def test_split_words_blank(self):
        self.assertEqual([], lexer.split_words(" \t "))


if __name__ == "__main__":
    unittest.main()
