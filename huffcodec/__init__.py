"""
huffcodec: A Python library for lossless Huffman compression and decompression of byte streams.
"""

from .codecs import (
    HuffCodec,
    HuffCodecFile,
)

from .coders import (
    BitOutputStream,
    BitInputStream,
    HuffmanCoder,
)

from .models import (
    HuffmanNode,
    HuffmanLeaf,
    HuffmanInternal,
    Code,
    collect_leaves,
)

from .trees import (
    make_tree_from_counts,
    make_codings_from_tree,
    write_tree_header,
    read_tree_header,
)

from .errors import (
    HuffException,
    FormatError,
    TruncatedHeaderError,
    StreamError,
    TruncatedPayloadError,
)

from .statistics import (
    entropy,
    average_code_length,
)

from .settings import (
    BITS_PER_WORD,
    BITS_PER_INT,
    ALPH_SIZE,
    PSEUDO_EOF,
    LEAF_VALUE_BITS,
    HUFF_NUMBER,
    HUFF_TREE,
)

from .logger import (
    Logger,
    Log,
    LogLevel,
    MagicNumberLog,
    SymbolFrequencyLog,
    TreeBuildLog,
    SymbolCodeLog,
    HeaderLeafLog,
    CodingLog,
    ErrorLog,
    CodingProgressStep,
)

# Validators
from .validators import *

__all__ = [

    "HuffCodec",
    "HuffCodecFile",

    "BitOutputStream",
    "BitInputStream",
    "HuffmanCoder",

    "HuffmanNode",
    "HuffmanLeaf",
    "HuffmanInternal",
    "Code",
    "collect_leaves",

    "make_tree_from_counts",
    "make_codings_from_tree",
    "write_tree_header",
    "read_tree_header",

    "HuffException",
    "FormatError",
    "TruncatedHeaderError",
    "StreamError",
    "TruncatedPayloadError",

    "entropy",
    "average_code_length",

    "BITS_PER_WORD",
    "BITS_PER_INT",
    "ALPH_SIZE",
    "PSEUDO_EOF",
    "LEAF_VALUE_BITS",
    "HUFF_NUMBER",
    "HUFF_TREE",

    "Logger",
    "Log",
    "LogLevel",
    "MagicNumberLog",
    "SymbolFrequencyLog",
    "TreeBuildLog",
    "SymbolCodeLog",
    "HeaderLeafLog",
    "CodingLog",
    "ErrorLog",
    "CodingProgressStep",

    "validate_type",
    "validate_file_exists",
    "validate_bit_count",
]
