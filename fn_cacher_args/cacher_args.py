from pathlib import Path
from typing import Any, List, Optional

from yaml2obj.loader import YamlLoaderWithLineNumber
from yaml2obj.writer import YamlWriter

from fn_cacher_args.error_counter import ErrorCounter
from fn_cacher_args.report_args import ReportArgs

SCHEMA_VERSION = "1.0"
DEFAULT_CONF_PATH = ".fn_cacher.d/config.yml"


class CacherArgs:
    def __init__(self):
        self.schema_version: Optional[str] = SCHEMA_VERSION
        self.trace = False
        self.report = ReportArgs(self)
        self.error_counter = ErrorCounter()
        self.source_object: dict = {}

    # fill content and print message if necessary
    # 'data' should have line number information
    def fill_and_validate(self, data: Any):
        self.error_counter = ErrorCounter()
        if not isinstance(data, dict):
            self.source_object = {}
            self.error_counter.record(
                "configuration must be a mapping, but %s" % type(data).__name__)
            self.error_counter.print_errors()
            return
        self.source_object = data
        line_info = data.get("__line__", {})

        version = data.get("schema-version", None)
        self.schema_version = None if version is None else str(version)
        if self.schema_version is None:
            self.error_counter.record("schema-version is not specified")
        elif self.schema_version != SCHEMA_VERSION:
            self.error_counter.record("schema-version must be %s, but %s" % (
                SCHEMA_VERSION, self.schema_version), line_info.get("schema-version"))

        self.trace = self.check_bool_field(
            data, "trace", False, self.error_counter)
        self.report.fill_and_validate(
            data.get("report", None), self.error_counter, line_info.get("report"))

        if self.error_counter.error_count > 0:
            self.error_counter.print_errors()

    def write_to(self, writer: YamlWriter):
        writer.comment("fn_cacher memoizer configuration file")
        writer.comment(" ")

        writer.name("schema-version").value(self.schema_version)
        writer.comment("print every cache hit and miss to stdout")
        writer.name("trace").value(self.trace)

        writer.name("report").begin_object()
        self.report.write_to(writer)
        writer.end_object()

    def write_as_yaml(self, path: str):
        p = Path(path).resolve()
        p.parents[0].mkdir(parents=True, exist_ok=True)
        with p.open('w', encoding="utf-8") as s:
            self.write_to(YamlWriter(s))

    # read value from dictionary and verify the content.
    # a missing or empty key is an error. returns None on error.
    def check_mandatory_field(self, data: dict, key: str, error_counter: ErrorCounter) -> Optional[str]:
        value = data.get(key)
        line_info = data["__line__"]
        if value is None or value == "":
            error_counter.record("object from line %d: key %s is not found" % (
                line_info["__begin__"], key))
            return None
        return str(value)

    # parse optional boolean field
    def check_bool_field(self, data: dict, key: str, default_value: bool, error_counter: ErrorCounter) -> bool:
        value = data.get(key)
        if value is None:
            return default_value
        if not isinstance(value, bool):
            error_counter.record("@%s: %s is not true or false" % (key, str(value)),
                                 data["__line__"][key])
            return default_value
        return value

    # parse optional field restricted to some values
    def check_choice_field(self, data: dict, key: str, choices: List[str], default_value: str, error_counter: ErrorCounter) -> str:
        value: Any = data.get(key)
        if value is None:
            return default_value
        if value not in choices:
            error_counter.record("@%s: '%s' must be one of %s" % (key, str(value), ", ".join(choices)),
                                 data["__line__"][key])
            return default_value
        return value

    @classmethod
    def from_yaml(cls, path: str) -> "CacherArgs":
        args = CacherArgs()
        args.fill_and_validate(YamlLoaderWithLineNumber.from_file(path))
        return args

    @classmethod
    def auto_configure(cls) -> "CacherArgs":
        args = CacherArgs()
        args.schema_version = SCHEMA_VERSION
        args.trace = False
        args.report = ReportArgs.auto_configure(args)
        return args
