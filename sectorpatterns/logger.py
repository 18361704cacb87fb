"""
logger.py

Logging module for sectorpatterns.


"""


from datetime import datetime
from typing import Union, Optional

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


class PatternFileLog(Log):
    def __init__(self, file_name: str, pattern_code: int, size: int) -> None:
        self.file_name = file_name
        self.pattern_code = pattern_code
        self.size = size
        super().__init__("Pattern_file_log", LogLevel.INFO, f"File: {file_name}, Pattern: {pattern_code}, Size: {size}")


class VerificationLog(Log):
    def __init__(self, file_name: str, passed: bool, reason: str = "") -> None:
        self.file_name = file_name
        self.passed = passed
        self.reason = reason
        level = LogLevel.INFO if passed else LogLevel.ERROR
        message = f"File: {file_name}, Passed: {passed}"
        if reason:
            message += f", Reason: {reason}"
        super().__init__("Verification_log", level, message)


class GenerationProgressStep(Log):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__("Generation_progress_step", LogLevel.PROGRESS, message)


class Logger:
    def __init__(self) -> None:
        self.generation_progress_count = 0

        self.logs = []

        self.record_info = True
        self.record_warning = True
        self.record_error = True
        self.record_progress = False

        self.display_info = False
        self.display_warning = True
        self.display_error = True
        self.display_progress = True

        self.generation_step_interval_count = 30

    def _handle(self, log: Log, record: bool, display: bool) -> None:
        if record:
            self.logs.append(log)
        if display:
            print(log)

    def log(self, log: Union[Log, str]) -> None:
        if not (isinstance(log, Log) or isinstance(log, str)):
            raise ValueError("Log must be an instance of Log class or a string")
        if isinstance(log, str):
            log = Log("General", LogLevel.INFO, log)

        if log.level == LogLevel.INFO:
            self._handle(log, self.record_info, self.display_info)
        elif log.level == LogLevel.WARNING:
            self._handle(log, self.record_warning, self.display_warning)
        elif log.level == LogLevel.ERROR:
            self._handle(log, self.record_error, self.display_error)
        elif log.level == LogLevel.PROGRESS:
            if isinstance(log, GenerationProgressStep):
                self.generation_progress_count += 1
                count = self.generation_progress_count
                if log.total_steps is not None:
                    log.message = f"{log.base_message} ({count}/{log.total_steps})"
                else:
                    log.message = f"{log.base_message} ({count})"
                self._handle(log, self.record_progress,
                             self.display_progress and (count % self.generation_step_interval_count == 0))

    def reset_generation_progress(self) -> None:
        self.generation_progress_count = 0

    def get_logs(self, level: Optional[int] = None) -> list:
        if level is None:
            return list(self.logs)
        return [log for log in self.logs if log.level == level]

    def save(self, file_path: str) -> None:
        with open(file_path, 'w') as file:
            for log in self.logs:
                file.write(str(log) + "\n")
