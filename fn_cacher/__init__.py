from .memoizer import CacheStats, Memoizer, memoizer
from .report import MemoizerRecord, report_xml, save_report, write_report

__all__ = ["CacheStats", "Memoizer", "memoizer",
           "MemoizerRecord", "report_xml", "save_report", "write_report"]
