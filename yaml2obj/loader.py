import io
import os
from typing import Any
import yaml
from yaml.constructor import SafeConstructor
from yaml.loader import SafeLoader

# load YAML with line number information
# every mapping gets "__line__": {key: line, ..., "__begin__": first line}


class YamlLoaderWithLineNumber(SafeLoader):
    def construct_mapping(self, node, deep=False):
        # start_mark.line is 0-based
        line_info = {k.value: k.start_mark.line + 1 for k, _ in node.value}
        line_info["__begin__"] = min(line_info.values(),
                                     default=node.start_mark.line + 1)

        mapping = SafeConstructor.construct_mapping(self, node, deep=deep)
        mapping["__line__"] = line_info
        return mapping

    @classmethod
    def from_file(cls, path: str) -> Any:
        with open(path, encoding="utf-8") as file:
            o = yaml.load(file, Loader=cls)
        if o is None:  # empty document
            o = cls.from_string("{}")
        # a list or scalar document is returned as is and rejected by the caller
        if isinstance(o, dict):
            o["__fullpath__"] = os.path.abspath(path)
        return o

    @classmethod
    def from_string(cls, body: str) -> Any:
        return yaml.load(io.StringIO(body), Loader=cls)
