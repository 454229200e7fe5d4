import os
import tempfile
import unittest

from huffcodec.validators import validate_type, validate_file_exists, validate_bit_count


class TestValidators(unittest.TestCase):
    def test_validate_type(self):
        validate_type(b"abc", "Data", bytes)
        with self.assertRaises(ValueError):
            validate_type("abc", "Data", bytes)

    def test_validate_file_exists(self):
        with tempfile.NamedTemporaryFile(delete=False) as temp_file:
            temp_file_name = temp_file.name
        try:
            validate_file_exists(temp_file_name)
        finally:
            os.remove(temp_file_name)
        with self.assertRaises(ValueError):
            validate_file_exists(temp_file_name)

    def test_validate_bit_count(self):
        validate_bit_count(0)
        validate_bit_count(64)
        with self.assertRaises(ValueError):
            validate_bit_count(-1)
        with self.assertRaises(ValueError):
            validate_bit_count(1.5)


if __name__ == '__main__':
    unittest.main()
