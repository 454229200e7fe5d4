"""
coders.py

Bit streams and the Huffman coder that drives a compression or decompression
run over them.

"""


import numpy as np
from typing import List, Optional, IO

from .errors import HuffException, FormatError, TruncatedPayloadError
from .logger import Logger, ErrorLog, MagicNumberLog, SymbolFrequencyLog, CodingLog, CodingProgressStep
from .models import HuffmanNode, HuffmanLeaf, Code
from .settings import BITS_PER_WORD, BITS_PER_INT, ALPH_SIZE, PSEUDO_EOF, HUFF_TREE
from .trees import make_tree_from_counts, make_codings_from_tree, write_tree_header, read_tree_header
from .validators import validate_bit_count


class BitOutputStream:
    """
    A helper class to write bits to an underlying binary stream.
    """

    def __init__(self, out: IO[bytes]) -> None:
        """
        Initialize with an underlying output stream (e.g., a file opened in binary mode).

        Args:
            out (IO[bytes]): The output stream.
        """
        self.out: IO[bytes] = out
        self.current_byte: int = 0
        self.num_bits_filled: int = 0
        self.bits_written: int = 0

    def write(self, bit: int) -> None:
        """
        Write a single bit (0 or 1) to the stream.

        Args:
            bit (int): The bit to write.

        Raises:
            ValueError: If the bit is not 0 or 1.
        """
        if bit not in (0, 1):
            raise ValueError("Bit must be 0 or 1")
        self.current_byte = (self.current_byte << 1) | bit
        self.num_bits_filled += 1
        self.bits_written += 1
        if self.num_bits_filled == 8:
            self.flush_current_byte()

    def write_bits(self, num_bits: int, value: int) -> None:
        """
        Write the low num_bits bits of value, most significant bit first.

        Args:
            num_bits (int): Width of the field. 0 writes nothing.
            value (int): The field value.

        Raises:
            ValueError: If the width is negative or the value does not fit in it.
        """
        validate_bit_count(num_bits)
        if value < 0 or value >= (1 << num_bits):
            raise ValueError(f"Value {value} does not fit in {num_bits} bits")
        for shift in range(num_bits - 1, -1, -1):
            self.write((value >> shift) & 1)

    def flush_current_byte(self) -> None:
        """
        Write the current byte to the underlying stream and reset the buffer.
        """
        self.out.write(bytes((self.current_byte,)))
        self.current_byte = 0
        self.num_bits_filled = 0

    def finish(self) -> None:
        """
        Flush any remaining bits to the stream by padding with zeros.
        """
        if self.num_bits_filled > 0:
            self.current_byte = self.current_byte << (8 - self.num_bits_filled)
            self.flush_current_byte()
        self.out.flush()

    def close(self) -> None:
        """
        Finish writing and close the underlying stream.
        """
        self.finish()
        self.out.close()

    def __enter__(self) -> 'BitOutputStream':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


class BitInputStream:
    """
    A helper class to read bits from an underlying binary stream.
    """

    def __init__(self, inp: IO[bytes]) -> None:
        """
        Initialize with an underlying input stream (e.g., a file opened in binary mode).

        Args:
            inp (IO[bytes]): The input stream.
        """
        self.inp: IO[bytes] = inp
        self.current_byte: int = 0
        self.num_bits_remaining: int = 0
        self.bits_read: int = 0

    def read(self) -> int:
        """
        Read a single bit from the stream.

        Returns:
            int: 0 or 1 for a valid bit, or -1 if no more bits are available.
        """
        if self.num_bits_remaining == 0:
            byte = self.inp.read(1)
            if len(byte) == 0:
                return -1
            self.current_byte = byte[0]
            self.num_bits_remaining = 8
        self.num_bits_remaining -= 1
        self.bits_read += 1
        return (self.current_byte >> self.num_bits_remaining) & 1

    def read_bits(self, num_bits: int) -> int:
        """
        Read a num_bits wide field, most significant bit first.

        Returns:
            int: The field value, or -1 if the stream ends before num_bits bits are read.
        """
        validate_bit_count(num_bits)
        value = 0
        for _ in range(num_bits):
            bit = self.read()
            if bit == -1:
                return -1
            value = (value << 1) | bit
        return value

    def reset(self) -> None:
        """
        Rewind to the start of the underlying stream.

        Raises:
            ValueError: If the underlying stream cannot seek.
        """
        if not self.inp.seekable():
            raise ValueError("Input stream does not support reset")
        self.inp.seek(0)
        self.current_byte = 0
        self.num_bits_remaining = 0

    def close(self) -> None:
        """
        Close the underlying input stream.
        """
        self.inp.close()

    def __enter__(self) -> 'BitInputStream':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


class HuffmanCoder:
    """
    Runs the two passes of a compression (count, then encode) and the single
    pass of a decompression over bit streams.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    def compress(self, bit_in: BitInputStream, bit_out: BitOutputStream) -> None:
        """
        Compress everything bit_in holds into bit_out. bit_in is read twice, so
        it must support reset(). bit_out is finished (padded and flushed) even on failure.

        Args:
            bit_in (BitInputStream): The data to compress.
            bit_out (BitOutputStream): Destination of the compressed stream.
        """
        try:
            counts = self.read_for_counts(bit_in)
            root = make_tree_from_counts(counts, self.logger)
            codings = make_codings_from_tree(root, self.logger)

            bit_out.write_bits(BITS_PER_INT, HUFF_TREE)
            self._log(MagicNumberLog(HUFF_TREE))
            write_tree_header(root, bit_out, self.logger)

            self._log(f"Read {bit_in.bits_read} bits before reset")
            bit_in.reset()
            self.write_compressed_bits(codings, bit_in, bit_out)
        except HuffException as e:
            self._log(ErrorLog(e))
            raise
        finally:
            bit_out.finish()
        self._log(CodingLog(bit_in.bits_read, bit_out.bits_written))

    def decompress(self, bit_in: BitInputStream, bit_out: BitOutputStream) -> None:
        """
        Decompress a stream written by compress(). bit_out is finished even on failure.

        Raises:
            FormatError: If the stream does not start with the magic number or its tree is invalid.
            TruncatedHeaderError: If the stream ends inside the tree header.
            TruncatedPayloadError: If the stream ends before the end-of-stream code.
        """
        try:
            magic = bit_in.read_bits(BITS_PER_INT)
            if magic != HUFF_TREE:
                raise FormatError(f"Illegal header starts with {magic}")
            self._log(MagicNumberLog(magic, written=False))

            root = read_tree_header(bit_in)
            self.read_compressed_bits(root, bit_in, bit_out)
        except HuffException as e:
            self._log(ErrorLog(e))
            raise
        finally:
            bit_out.finish()
        self._log(CodingLog(bit_in.bits_read, bit_out.bits_written))

    def read_for_counts(self, bit_in: BitInputStream) -> np.ndarray:
        """
        Count every 8-bit unit until the reader is exhausted.

        Returns:
            np.ndarray: Counts indexed by symbol, with PSEUDO_EOF set to 1.
        """
        counts = np.zeros(ALPH_SIZE + 1, dtype=np.int64)
        counts[PSEUDO_EOF] = 1
        while True:
            bits = bit_in.read_bits(BITS_PER_WORD)
            if bits == -1:
                break
            counts[bits] += 1

        if self.logger is not None:
            for symbol in np.flatnonzero(counts):
                self.logger.log(SymbolFrequencyLog(int(symbol), int(counts[symbol])))
        return counts

    def write_compressed_bits(self, codings: List[Optional[Code]], bit_in: BitInputStream, bit_out: BitOutputStream) -> None:
        """
        Write the code of every 8-bit unit of bit_in, then the code of PSEUDO_EOF.

        Raises:
            ValueError: If the input holds a symbol that has no code.
        """
        while True:
            bits = bit_in.read_bits(BITS_PER_WORD)
            if bits == -1:
                code = codings[PSEUDO_EOF]
                bit_out.write_bits(code.length, code.value)
                break
            code = codings[bits]
            if code is None:
                raise ValueError(f"No code for symbol {bits}, input changed since it was counted")
            bit_out.write_bits(code.length, code.value)
            if self.logger is not None:
                self.logger.log(CodingProgressStep("Encoding symbols"))

    def read_compressed_bits(self, root: HuffmanNode, bit_in: BitInputStream, bit_out: BitOutputStream) -> None:
        """
        Walk the tree one bit at a time, writing each symbol reached, until PSEUDO_EOF is reached.

        Raises:
            TruncatedPayloadError: If bit_in ends before PSEUDO_EOF.
            FormatError: If the tree is a single leaf other than PSEUDO_EOF.
        """
        if isinstance(root, HuffmanLeaf):
            if root.symbol == PSEUDO_EOF:
                return
            raise FormatError("Tree has no end-of-stream leaf")

        current = root
        while True:
            bit = bit_in.read_bits(1)
            if bit == -1:
                raise TruncatedPayloadError("Bad input, no PSEUDO_EOF")
            current = current.left if bit == 0 else current.right

            if isinstance(current, HuffmanLeaf):
                if current.symbol == PSEUDO_EOF:
                    break
                bit_out.write_bits(BITS_PER_WORD, current.symbol)
                current = root
                if self.logger is not None:
                    self.logger.log(CodingProgressStep("Decoding symbols"))

    def _log(self, log) -> None:
        if self.logger is not None:
            self.logger.log(log)
