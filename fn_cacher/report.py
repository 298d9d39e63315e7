import os
from dataclasses import dataclass
from typing import Any, List, Optional

from lxml import etree  # type: ignore
from lxml.builder import E  # type: ignore

from fn_cacher.memoizer import Memoizer
from yaml2obj.writer import YamlWriter

REPORT_FILE_NAME = "memoizer-report"


@dataclass
class MemoizerRecord:
    test: Optional[str]  # pytest nodeid, None outside of a test
    memoizer: Memoizer

    def to_dict(self) -> dict:
        m = self.memoizer
        return {"name": m.name,
                "test": self.test,
                "entries": len(m),
                "hits": m.stats.hits,
                "misses": m.stats.misses,
                "hit_ratio": round(m.stats.hit_ratio, 4)}


def report_xml(records: List[MemoizerRecord]) -> etree._Element:
    elements: List[Any] = []
    for record in records:
        # xml attributes must be strings, and a missing test is left out
        attrs = {k: str(v)
                 for k, v in record.to_dict().items() if v is not None}
        elements.append(E.memoizer(**attrs))
    return E.memoizers(*elements, count=str(len(records)))


def write_report(records: List[MemoizerRecord], writer: YamlWriter) -> None:
    writer.comment("memoizer usage collected in this session")
    if len(records) == 0:
        writer.name("memoizers").value([])
        return

    writer.name("memoizers").begin_array()
    for record in records:
        writer.begin_object()
        for k, v in record.to_dict().items():
            writer.name(k).value(v)
        writer.end_object()
    writer.end_array()


def save_report(records: List[MemoizerRecord], result_dir: str, format: str = "xml") -> str:
    if not os.path.exists(result_dir):
        os.makedirs(result_dir)
    if format == "xml":
        path = os.path.join(result_dir, REPORT_FILE_NAME + ".xml")
        with open(path, "w", encoding="utf-8") as out_strm:
            out_strm.write(etree.tostring(
                report_xml(records), encoding="unicode", pretty_print=True))
    elif format == "yaml":
        path = os.path.join(result_dir, REPORT_FILE_NAME + ".yml")
        with open(path, "w", encoding="utf-8") as out_strm:
            write_report(records, YamlWriter(out_strm))
    else:
        raise Exception("unknown report format: %s" % format)
    return path
