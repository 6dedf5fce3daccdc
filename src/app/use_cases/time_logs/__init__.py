"""Manual time log use cases"""
from .log_time import LogTime
from .list_time_logs import ListTimeLogs
from .dtos import LogTimeCommandDTO, TimeLogResponseDTO

__all__ = [
    "LogTime",
    "ListTimeLogs",
    "LogTimeCommandDTO",
    "TimeLogResponseDTO",
]
