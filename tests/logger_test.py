#logger_test.py

import io
import os
import sys
import tempfile
import unittest
from huffcodec.logger import Logger, Log, LogLevel, SymbolFrequencyLog, CodingLog, CodingProgressStep, MagicNumberLog


class TestLogger(unittest.TestCase):
    def setUp(self):
        self.logger = Logger()
        self.saved_stdout = sys.stdout
        self.captured_output = io.StringIO()
        sys.stdout = self.captured_output

    def tearDown(self):
        sys.stdout = self.saved_stdout

    def test_invalid_log(self):
        with self.assertRaises(ValueError):
            self.logger.log(123)

    def test_string_log(self):
        self.logger.log("plain message")
        self.assertEqual(len(self.logger.logs), 1)
        self.assertEqual(self.logger.logs[0].type_name, "General")
        self.assertEqual(self.logger.logs[0].level, LogLevel.INFO)

    def test_info_is_recorded_not_displayed(self):
        self.logger.log(SymbolFrequencyLog(97, 4))
        self.assertEqual(len(self.logger.logs), 1)
        self.assertEqual(self.captured_output.getvalue(), "")

    def test_display_info(self):
        self.logger.display_info = True
        self.logger.log(MagicNumberLog(0xface8201))
        self.assertIn("0xface8201", self.captured_output.getvalue())

    def test_warning_logging(self):
        warning_log = Log("WarningTest", LogLevel.WARNING, "This is a warning")
        self.logger.log(warning_log)
        self.assertEqual(len(self.logger.logs), 1)
        printed_output = self.captured_output.getvalue()
        self.assertIn("This is a warning", printed_output)

    def test_error_logging(self):
        error_log = Log("ErrorTest", LogLevel.ERROR, "This is an error")
        self.logger.log(error_log)
        self.assertEqual(len(self.logger.logs), 1)

        printed_output = self.captured_output.getvalue()
        self.assertIn("This is an error", printed_output)

    def test_progress_steps(self):
        self.logger.record_progress = True
        self.logger.coding_step_interval_count = 2
        for _ in range(4):
            self.logger.log(CodingProgressStep("Encoding symbols", 4))
        self.assertEqual(self.logger.coding_progress_count, 4)
        self.assertEqual(self.logger.logs[-1].message, "Encoding symbols (4/4)")
        self.assertEqual(self.captured_output.getvalue().count("Encoding symbols"), 2)

    def test_progress_not_recorded_by_default(self):
        self.logger.log(CodingProgressStep("Decoding symbols"))
        self.assertEqual(self.logger.logs, [])

    def test_get_logs_by_type(self):
        self.logger.log(SymbolFrequencyLog(1, 2))
        self.logger.log(CodingLog(8, 16))
        self.assertEqual(len(self.logger.get_logs()), 2)
        coding_logs = self.logger.get_logs(CodingLog)
        self.assertEqual(len(coding_logs), 1)
        self.assertEqual(coding_logs[0].bits_written, 16)

    def test_clear_logs(self):
        self.logger.log("message")
        self.logger.clear_logs()
        self.assertEqual(self.logger.get_logs(), [])

    def test_save(self):
        self.logger.save_info = False
        self.logger.log(SymbolFrequencyLog(1, 2))
        self.logger.log(Log("WarningTest", LogLevel.WARNING, "kept warning"))
        with tempfile.TemporaryDirectory() as temp_dir:
            path = os.path.join(temp_dir, "log.txt")
            self.logger.save(path)
            with open(path) as f:
                content = f.read()
        self.assertIn("kept warning", content)
        self.assertNotIn("Symbol_frequency_log", content)


if __name__ == '__main__':
    unittest.main()
