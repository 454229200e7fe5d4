import os
import random
import tempfile
import unittest
from io import BytesIO

from huffcodec.codecs import HuffCodec, HuffCodecFile
from huffcodec.coders import BitInputStream
from huffcodec.errors import FormatError, TruncatedHeaderError, TruncatedPayloadError
from huffcodec.logger import Logger, ErrorLog
from huffcodec.models import collect_leaves
from huffcodec.settings import HUFF_TREE, PSEUDO_EOF, BITS_PER_INT
from huffcodec.trees import read_tree_header


class TestHuffCodec(unittest.TestCase):
    def setUp(self):
        self.codec = HuffCodec()

    def test_compress_decompress(self):
        """Test that compressing and decompressing data preserves the original data."""
        data = b'Testing Data'
        compressed_data = self.codec.compress(data)
        decompressed_data = self.codec.decompress(compressed_data)

        self.assertEqual(data, decompressed_data)

    def test_round_trip_samples(self):
        rng = random.Random(6013)
        samples = [
            b'',
            b'a',
            b'\x00',
            b'\xff' * 3,
            bytes(range(256)),
            b'abracadabra' * 20,
            bytes(rng.getrandbits(8) for _ in range(2000)),
            bytes(rng.choice(b'ab') for _ in range(500)),
        ]
        for data in samples:
            with self.subTest(length=len(data)):
                self.assertEqual(self.codec.decompress(self.codec.compress(data)), data)

    def test_compresses_skewed_data(self):
        data = b'a' * 1000 + b'bcd'
        self.assertLess(len(self.codec.compress(data)), len(data) // 4)

    def test_deterministic(self):
        data = b'the same input twice'
        self.assertEqual(self.codec.compress(data), self.codec.compress(data))

    def test_single_repeated_byte(self):
        data = b'q' * 21
        compressed = self.codec.compress(data)
        # magic 32 bits, header 21 bits, payload 21 one-bit codes and a one-bit PSEUDO_EOF
        self.assertEqual(len(compressed), (32 + 21 + 22 + 7) // 8)
        self.assertEqual(self.codec.decompress(compressed), data)

    def test_header_describes_counted_symbols(self):
        data = b'header self description'
        bit_in = BitInputStream(BytesIO(self.codec.compress(data)))
        self.assertEqual(bit_in.read_bits(BITS_PER_INT), HUFF_TREE)
        root = read_tree_header(bit_in)
        self.assertEqual({leaf.symbol for leaf in collect_leaves(root)}, set(data) | {PSEUDO_EOF})

    def test_magic_mismatch(self):
        with self.assertRaises(FormatError):
            self.codec.decompress(b'this is not compressed')
        with self.assertRaises(FormatError):
            self.codec.decompress(b'')

    def test_truncated_header(self):
        compressed = self.codec.compress(b'hello world')
        with self.assertRaises(TruncatedHeaderError):
            self.codec.decompress(compressed[:6])

    def test_truncated_payload(self):
        compressed = self.codec.compress(b'hello world, hello again')
        with self.assertRaises(TruncatedPayloadError):
            self.codec.decompress(compressed[:-1])

    def test_errors_are_logged(self):
        logger = Logger()
        logger.display_error = False
        with self.assertRaises(FormatError):
            self.codec.decompress(b'bad!', logger)
        self.assertEqual(len(logger.get_logs(ErrorLog)), 1)

    def test_invalid_input_type(self):
        with self.assertRaises(ValueError):
            self.codec.compress('not bytes')
        with self.assertRaises(ValueError):
            self.codec.decompress(bytearray(b'abc'))


class TestHuffCodecFile(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.input_path = os.path.join(self.temp_dir.name, 'input.txt')
        self.compressed_path = self.input_path + '.compressed'
        self.decompressed_path = self.input_path + '.decompressed'

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_compress_decompress(self):
        """Test that compressing and decompressing a file preserves the original data."""
        data = b'Testing Data\n' * 50
        with open(self.input_path, 'wb') as f:
            f.write(data)

        codec = HuffCodecFile()
        codec.compress(self.input_path, self.compressed_path)
        codec.decompress(self.compressed_path, self.decompressed_path)

        with open(self.decompressed_path, 'rb') as f:
            self.assertEqual(f.read(), data)
        with open(self.compressed_path, 'rb') as f:
            compressed = f.read()
        self.assertEqual(compressed, HuffCodec().compress(data))

    def test_empty_file(self):
        open(self.input_path, 'wb').close()
        codec = HuffCodecFile()
        codec.compress(self.input_path, self.compressed_path)
        codec.decompress(self.compressed_path, self.decompressed_path)
        self.assertEqual(os.path.getsize(self.decompressed_path), 0)

    def test_missing_input(self):
        with self.assertRaises(ValueError):
            HuffCodecFile().compress(self.input_path, self.compressed_path)
        with self.assertRaises(ValueError):
            HuffCodecFile().decompress(self.input_path, self.decompressed_path)

    def test_corrupt_file(self):
        with open(self.compressed_path, 'wb') as f:
            f.write(b'garbage')
        with self.assertRaises(FormatError):
            HuffCodecFile().decompress(self.compressed_path, self.decompressed_path)


if __name__ == '__main__':
    unittest.main()
