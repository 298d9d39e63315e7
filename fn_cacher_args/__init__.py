from .cacher_args import CacherArgs
from .error_counter import ErrorCounter
from .report_args import ReportArgs

__all__ = ["CacherArgs", "ErrorCounter", "ReportArgs"]
