#experiments.py
import os
import time
import numpy as np

from .codecs import HuffCodecFile
from .logger import Logger, SymbolFrequencyLog, SymbolCodeLog
from .performance_display import PerformanceDisplay
from .settings import ALPH_SIZE
from .statistics import entropy, average_code_length


class HuffmanExperiment:
    def __init__(self, name: str, input_file_path, experiment_root_folder_path):

        self.name = name

        if not os.path.exists(input_file_path):
            raise FileNotFoundError(f"File {input_file_path} not found.")
        if not os.access(input_file_path, os.R_OK):
            raise PermissionError(f"File {input_file_path} is not readable.")

        self.input_file_path = input_file_path

        self.experiment_folder_path = os.path.join(experiment_root_folder_path, name)
        if not os.path.exists(self.experiment_folder_path):
            os.makedirs(self.experiment_folder_path)

        input_file_name = os.path.basename(input_file_path)
        self.compressed_file_path = os.path.join(self.experiment_folder_path, f"{input_file_name}.hf")
        self.decompressed_file_path = os.path.join(self.experiment_folder_path, f"{input_file_name}_decompressed")

        self.compression_logger = Logger()
        self.decompression_logger = Logger()
        self.codec = HuffCodecFile()

    def run(self):
        self.input_file_size = os.path.getsize(self.input_file_path)

        self.compression_start_time = time.time()
        self.codec.compress(self.input_file_path, self.compressed_file_path, self.compression_logger)
        self.compression_end_time = time.time()

        self.decompression_start_time = time.time()
        self.codec.decompress(self.compressed_file_path, self.decompressed_file_path, self.decompression_logger)
        self.decompression_end_time = time.time()

        self.compressed_file_size = os.path.getsize(self.compressed_file_path)
        self.decompressed_file_size = os.path.getsize(self.decompressed_file_path)

        self.compression_ratio = self.input_file_size / self.compressed_file_size

        with open(self.input_file_path, 'rb') as original, open(self.decompressed_file_path, 'rb') as decompressed:
            self.round_trip_ok = original.read() == decompressed.read()

        # the sentinel is counted once, like any other symbol, when measuring the code
        counts = np.zeros(ALPH_SIZE + 1, dtype=np.int64)
        for log in self.compression_logger.get_logs(SymbolFrequencyLog):
            counts[log.symbol] = log.count
        codings = [None] * (ALPH_SIZE + 1)
        for log in self.compression_logger.get_logs(SymbolCodeLog):
            codings[log.symbol] = log.code
        self.entropy = entropy(counts)
        self.average_code_length = average_code_length(counts, codings)

    def save_report_in_text(self, file_path: str):
        if not os.path.exists(os.path.dirname(file_path)):
            raise FileNotFoundError(f"Folder {os.path.dirname(file_path)} not found.")
        if not os.access(os.path.dirname(file_path), os.W_OK):
            raise PermissionError(f"Folder {os.path.dirname(file_path)} is not writable.")

        if not hasattr(self, 'compression_start_time'):
            raise RuntimeError("The experiment has not been run yet.")

        with open(file_path, 'w') as f:
            f.write(f"Experiment name: {self.name}\n")
            f.write(f"Input file size: {self.input_file_size}\n")
            f.write(f"Compression time: {self.compression_end_time - self.compression_start_time}\n")
            f.write(f"Decompression time: {self.decompression_end_time - self.decompression_start_time}\n")
            f.write(f"Compressed file size: {self.compressed_file_size}\n")
            f.write(f"Decompressed file size: {self.decompressed_file_size}\n")
            f.write(f"Compression ratio: {self.compression_ratio}\n")
            f.write(f"Entropy (bits/symbol): {self.entropy}\n")
            f.write(f"Average code length (bits/symbol): {self.average_code_length}\n")
            f.write(f"Round trip ok: {self.round_trip_ok}\n")

    def display_graphs(self, show_graphs=False):
        if not hasattr(self, 'compression_start_time'):
            raise RuntimeError("The experiment has not been run yet.")

        display = PerformanceDisplay(self.compression_logger.logs)
        display.generate_symbol_frequency_plot(show_graphs, os.path.join(self.experiment_folder_path, f"{self.name}_symbol_frequency.png"))
        display.generate_code_length_plot(show_graphs, os.path.join(self.experiment_folder_path, f"{self.name}_code_length.png"))
