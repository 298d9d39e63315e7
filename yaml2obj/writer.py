# write object tree to text stream as YAML format

from typing import Any, List, TextIO

import yaml


class YamlWriter:
    def __init__(self, stream: TextIO):
        self.stream = stream
        self.level = 0
        self.array_levels: List[int] = []  # levels where an array is open

    def name(self, key: str) -> "YamlWriter":
        self.__indent()
        self.stream.write(format_scalar(key))
        self.stream.write(":")
        return self

    def value(self, value: Any) -> "YamlWriter":
        if self.level in self.array_levels:
            self.__indent()
            self.stream.write("- ")
        else:
            self.stream.write(" ")
        self.stream.write(format_scalar(value))
        self.stream.write("\n")
        return self

    def begin_object(self) -> "YamlWriter":
        if self.level in self.array_levels:
            self.__indent()
            self.stream.write("-")
        self.stream.write("\n")
        self.level = self.level + 1
        return self

    def end_object(self) -> "YamlWriter":
        if self.level <= 0:
            raise Exception("level is already 0")
        self.level = self.level - 1
        return self

    def begin_array(self) -> "YamlWriter":
        self.array_levels.insert(0, self.level)
        self.stream.write("\n")
        return self

    def end_array(self) -> "YamlWriter":
        if len(self.array_levels) == 0:
            raise Exception("no array is open")
        self.array_levels.pop(0)
        return self

    def comment(self, body: str) -> "YamlWriter":
        self.__indent()
        self.stream.write("# ")
        self.stream.write(body)
        self.stream.write("\n")
        return self

    def __indent(self) -> "YamlWriter":
        self.stream.write("  " * (self.level + len(self.array_levels)))
        return self


def format_scalar(value: Any) -> str:
    """render one value in flow style, quoted when a plain scalar would not read back as is"""
    text = yaml.safe_dump(value, default_flow_style=True,
                          width=float("inf"))
    if text.endswith("\n...\n"):  # document end marker after a bare scalar
        text = text[:-len("\n...\n")]
    return text.rstrip("\n")
