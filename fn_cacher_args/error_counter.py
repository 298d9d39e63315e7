from typing import List, Optional


class ErrorCounter:
    def __init__(self):
        self.error_count = 0
        self.error_messages: List[str] = []

    def record(self, message: str, line: Optional[int] = None):
        self.error_count += 1
        if line is not None:
            message = "line %d: %s" % (line, message)
        self.error_messages.append(message)

    def print_errors(self):
        print("total %d errors are found." % (self.error_count, ))
        for message in self.error_messages:
            print(message)
