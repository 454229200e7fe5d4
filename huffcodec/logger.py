"""
logger.py

Logging module for huffcodec.


"""


from datetime import datetime
from typing import Union, Optional, Any

class LogLevel:
    INFO = 0
    WARNING = 1
    ERROR = 2
    PROGRESS = 3


class Log:
    def __init__(self, type_name: str, level: int, message: str) -> None:
        self.level = level
        self.type_name = type_name
        self.message = message
        self.date = datetime.now()

    def __str__(self) -> str:
        return f"{self.date} - {self.type_name} - {self.level} - {self.message}"

    def __repr__(self) -> str:
        return self.__str__()


class MagicNumberLog(Log):
    def __init__(self, value: int, written: bool = True) -> None:
        self.value = value
        action = "Wrote" if written else "Read"
        super().__init__("Magic_number_log", LogLevel.INFO, f"{action} magic number {value:#010x}")


class SymbolFrequencyLog(Log):
    def __init__(self, symbol: int, count: int) -> None:
        self.symbol = symbol
        self.count = count
        super().__init__("Symbol_frequency_log", LogLevel.INFO, f"Symbol: {symbol}, Count: {count}")


class TreeBuildLog(Log):
    def __init__(self, leaf_count: int) -> None:
        self.leaf_count = leaf_count
        super().__init__("Tree_build_log", LogLevel.INFO, f"Heap created with {leaf_count} nodes")


class SymbolCodeLog(Log):
    def __init__(self, symbol: int, code: Any) -> None:
        self.symbol = symbol
        self.code = code
        super().__init__("Symbol_code_log", LogLevel.INFO, f"Symbol: {symbol}, Code: {code}")


class HeaderLeafLog(Log):
    def __init__(self, symbol: int) -> None:
        self.symbol = symbol
        super().__init__("Header_leaf_log", LogLevel.INFO, f"Wrote leaf for symbol {symbol}")


class CodingLog(Log):
    def __init__(self, bits_read: int, bits_written: int) -> None:
        self.bits_read = bits_read
        self.bits_written = bits_written
        super().__init__("Coding_log", LogLevel.INFO, f"Bits read: {bits_read}, Bits written: {bits_written}")


class ErrorLog(Log):
    def __init__(self, error: Exception) -> None:
        self.error = error
        super().__init__("Error_log", LogLevel.ERROR, f"{type(error).__name__}: {error}")


class CodingProgressStep(Log):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__("Coding_progress_step", LogLevel.PROGRESS, message)


class Logger:
    def __init__(self) -> None:
        self.coding_progress_count = 0

        self.logs = []

        self.record_info = True
        self.record_warning = True
        self.record_error = True
        self.record_progress = False

        self.display_info = False
        self.display_warning = True
        self.display_error = True
        self.display_progress = True

        self.save_info = True
        self.save_warning = True
        self.save_error = True
        self.save_progress = False

        self.coding_step_interval_count = 10000

    def log(self, log: Union[Log, str]) -> None:
        if not (isinstance(log, Log) or isinstance(log, str)):
            raise ValueError("Log must be an instance of Log class or a string")
        if isinstance(log, str):
            log = Log("General", LogLevel.INFO, log)

        if log.level == LogLevel.INFO:
            if self.record_info:
                self.logs.append(log)
            if self.display_info:
                print(log)
        elif log.level == LogLevel.WARNING:
            if self.record_warning:
                self.logs.append(log)
            if self.display_warning:
                print(log)
        elif log.level == LogLevel.ERROR:
            if self.record_error:
                self.logs.append(log)
            if self.display_error:
                print(log)
        elif log.level == LogLevel.PROGRESS:
            if isinstance(log, CodingProgressStep):
                self.coding_progress_count += 1
                count = self.coding_progress_count
                if log.total_steps is not None:
                    log.message = f"{log.base_message} ({count}/{log.total_steps})"
                else:
                    log.message = f"{log.base_message} ({count})"
                if self.record_progress:
                    self.logs.append(log)
                if self.display_progress and (count % self.coding_step_interval_count == 0):
                    print(log)

    def _should_save(self, log: Log) -> bool:
        if log.level == LogLevel.INFO:
            return self.save_info
        if log.level == LogLevel.WARNING:
            return self.save_warning
        if log.level == LogLevel.ERROR:
            return self.save_error
        return self.save_progress

    def get_logs(self, log_type: Optional[type] = None) -> list:
        if log_type is None:
            return list(self.logs)
        return [log for log in self.logs if isinstance(log, log_type)]

    def clear_logs(self) -> None:
        self.logs = []
        self.coding_progress_count = 0

    def save(self, file_path: str) -> None:
        with open(file_path, 'w') as file:
            for log in self.logs:
                if self._should_save(log):
                    file.write(str(log) + "\n")
