from typing import TYPE_CHECKING, Any, Optional

from yaml2obj.writer import YamlWriter
from fn_cacher_args.error_counter import ErrorCounter

if TYPE_CHECKING:
    from fn_cacher_args.cacher_args import CacherArgs

REPORT_FORMATS = ["xml", "yaml"]


class ReportArgs:
    def __init__(self, parent: "CacherArgs"):
        self.parent = parent
        self.enabled = False
        self.format = "xml"
        self.result_dir: Optional[str] = None

    def fill_and_validate(self, data: Any, error_counter: ErrorCounter, line: Optional[int] = None):
        # no report section means no report
        self.enabled = False
        if data is None:
            return
        if not isinstance(data, dict):
            error_counter.record("@report: must be a section, but %s" % str(data), line)
            return
        self.enabled = self.parent.check_bool_field(
            data, "enabled", True, error_counter)
        self.format = self.parent.check_choice_field(
            data, "format", REPORT_FORMATS, "xml", error_counter)
        if self.enabled:
            self.result_dir = self.parent.check_mandatory_field(
                data, "result_dir", error_counter)
        else:
            self.result_dir = data.get("result_dir", None)

    def write_to(self, writer: YamlWriter):
        writer.name("enabled").value(self.enabled)
        writer.comment("format can be xml or yaml")
        writer.name("format").value(self.format)
        writer.comment("The memoizer report is placed here")
        writer.name("result_dir").value(self.result_dir)

    @classmethod
    def auto_configure(cls, parent: "CacherArgs") -> "ReportArgs":
        a = ReportArgs(parent)
        a.enabled = True
        a.format = "xml"
        a.result_dir = "fn-cacher-report"
        return a
