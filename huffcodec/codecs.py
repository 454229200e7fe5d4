from io import BytesIO
from typing import Optional

from .validators import validate_type, validate_file_exists
from .coders import BitInputStream, BitOutputStream, HuffmanCoder
from .logger import Logger


class HuffCodec:
    def compress(self, data: bytes, logger: Optional[Logger] = None) -> bytes:
        """
        Compress the input data.

        Args:
            data (bytes): The data to compress.
            logger: Logger instance for logging.

        Returns:
            bytes: The compressed stream: magic number, tree header and payload.
        """
        validate_type(data, "Data", bytes)

        out_buffer = BytesIO()
        coder = HuffmanCoder(logger)
        coder.compress(BitInputStream(BytesIO(data)), BitOutputStream(out_buffer))
        return out_buffer.getvalue()

    def decompress(self, data: bytes, logger: Optional[Logger] = None) -> bytes:
        """
        Decompress data produced by compress().

        Args:
            data (bytes): The compressed stream.
            logger: Logger instance for logging.

        Returns:
            bytes: The original data.
        """
        validate_type(data, "Data", bytes)

        out_buffer = BytesIO()
        coder = HuffmanCoder(logger)
        coder.decompress(BitInputStream(BytesIO(data)), BitOutputStream(out_buffer))
        return out_buffer.getvalue()


class HuffCodecFile:
    def compress(self, input_path: str, output_path: str, logger: Optional[Logger] = None) -> None:
        """
        Compress the input file and write the result to an output file.

        Args:
            input_path (str): Path to the input file.
            output_path (str): Path to the output file.
            logger: Logger instance for logging.
        """
        validate_type(input_path, "Input path", str)
        validate_type(output_path, "Output path", str)
        validate_file_exists(input_path)

        with BitInputStream(open(input_path, "rb")) as bit_in, BitOutputStream(open(output_path, "wb")) as bit_out:
            HuffmanCoder(logger).compress(bit_in, bit_out)

    def decompress(self, compressed_file_path: str, output_file_path: str, logger: Optional[Logger] = None) -> None:
        """
        Decompress the input file and write the decompressed data to an output file.

        Args:
            compressed_file_path (str): Path to the compressed file.
            output_file_path (str): Path to the output file.
            logger: Logger instance for logging.
        """
        validate_type(compressed_file_path, "Compressed file path", str)
        validate_type(output_file_path, "Output file path", str)
        validate_file_exists(compressed_file_path)

        with BitInputStream(open(compressed_file_path, "rb")) as bit_in, BitOutputStream(open(output_file_path, "wb")) as bit_out:
            HuffmanCoder(logger).decompress(bit_in, bit_out)
