import unittest
from strtoolkit import classifiers

class TestIsAlphabetic(unittest.TestCase):
    def test_word(self):
        result = classifiers.is_alphabetic('hello')
        self.assertEqual(result, True)

    def test_integer(self):
        self.assertEqual(classifiers.is_alphabetic('42'), False)
        self.assertEqual(classifiers.is_alphabetic('-3'), False)
        self.assertEqual(classifiers.is_alphabetic('0'), False)

    def test_float(self):
        result = classifiers.is_alphabetic('1.5')
        self.assertEqual(result, False)

    def test_non_canonical_numbers_pass(self):
        # Only strings that read back unchanged count as numbers
        self.assertEqual(classifiers.is_alphabetic('1.0'), True)
        self.assertEqual(classifiers.is_alphabetic('007'), True)
        self.assertEqual(classifiers.is_alphabetic('12abc'), True)

    def test_large_integer_reads_back(self):
        result = classifiers.is_alphabetic('99999999999999999999')
        self.assertEqual(result, False)

    def test_empty(self):
        self.assertEqual(classifiers.is_alphabetic(''), False)
        self.assertEqual(classifiers.is_alphabetic('', min_length=0), True)

    def test_max_length(self):
        self.assertEqual(classifiers.is_alphabetic('hello', max_length=3), False)
        self.assertEqual(classifiers.is_alphabetic('hello', max_length=5), True)

    def test_max_length_ignored_below_min_length(self):
        result = classifiers.is_alphabetic('hello', min_length=5, max_length=3)
        self.assertEqual(result, True)

    def test_min_length(self):
        result = classifiers.is_alphabetic('hi', min_length=3)
        self.assertEqual(result, False)

class TestIsAlphanumeric(unittest.TestCase):
    def test_word_characters(self):
        for text in ('abc', 'abc123', '_', 'a-b', 'é'):
            with self.subTest(text=text):
                self.assertEqual(classifiers.is_alphanumeric(text), True)

    def test_no_word_characters(self):
        for text in ('', '!!!', ' - '):
            with self.subTest(text=text):
                self.assertEqual(classifiers.is_alphanumeric(text), False)

class TestIsNumeric(unittest.TestCase):
    def test_numbers(self):
        for text in ('42', '-1.5', '+7', '.5', '5.', '1e3', '2.5E-4', ' 42 ', '\t42\n'):
            with self.subTest(text=text):
                self.assertEqual(classifiers.is_numeric(text), True)

    def test_not_numbers(self):
        for text in ('', '.', '+', 'abc', '1,000', 'nan', 'inf', '0x1A', '1_000', '1e', '4 2'):
            with self.subTest(text=text):
                self.assertEqual(classifiers.is_numeric(text), False)

class TestIsFloatNumeric(unittest.TestCase):
    def test_grouped_decimal(self):
        result = classifiers.is_float_numeric('1,234.56')
        self.assertEqual(result, True)

    def test_integer_and_trailing_dot(self):
        self.assertEqual(classifiers.is_float_numeric('123'), True)
        self.assertEqual(classifiers.is_float_numeric('12.'), True)

    def test_rejected(self):
        for text in ('', '.5', '-1', '1,,2', '1.2.3', '1.5\n'):
            with self.subTest(text=text):
                self.assertEqual(classifiers.is_float_numeric(text), False)

class TestIsIntegerNumeric(unittest.TestCase):
    def test_grouped_integer(self):
        result = classifiers.is_integer_numeric('1,234')
        self.assertEqual(result, True)

    def test_rejected(self):
        for text in ('', '1.5', '12,', ',12', '-1'):
            with self.subTest(text=text):
                self.assertEqual(classifiers.is_integer_numeric(text), False)

class TestIsTelNumber(unittest.TestCase):
    def test_valid(self):
        for text in ('+233201234567', '(020) 123-4567', '0024412345', '+1234567'):
            with self.subTest(text=text):
                self.assertEqual(classifiers.is_tel_number(text), True)

    def test_invalid(self):
        for text in ('abc', '123', '1234567890123456', '+233 20 123 456x', '1234567\n'):
            with self.subTest(text=text):
                self.assertEqual(classifiers.is_tel_number(text), False)

class TestLengthBounds(unittest.TestCase):
    def test_is_max_length(self):
        self.assertEqual(classifiers.is_max_length('hello', 5), True)
        self.assertEqual(classifiers.is_max_length('hello', 4), False)

    def test_is_min_length(self):
        self.assertEqual(classifiers.is_min_length('hello', 5), True)
        self.assertEqual(classifiers.is_min_length('hello', 6), False)

    def test_counts_code_points(self):
        result = classifiers.is_max_length('héllo', 5)
        self.assertEqual(result, True)
