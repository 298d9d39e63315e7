import os
from typing import Callable, List, Optional

import pytest
from fn_cacher import Memoizer, MemoizerRecord, save_report
from fn_cacher_args import CacherArgs
from fn_cacher_args.cacher_args import DEFAULT_CONF_PATH

# global scope test session context
cc: Optional["CacherTestContext"] = None


class CacherTestContext:
    def __init__(self, args: Optional[CacherArgs] = None):
        self.enabled = args is not None
        self.args = args
        self.init()

    def init(self) -> None:
        self.records: List[MemoizerRecord] = []

    def new_memoizer(self, function: Callable, name: Optional[str] = None, test: Optional[str] = None) -> Memoizer:
        trace = self.args.trace if self.args is not None else False
        m = Memoizer(function, name=name, trace=trace)
        self.records.append(MemoizerRecord(test, m))
        return m

    def memoize_factory(self, test: Optional[str] = None) -> Callable[..., Memoizer]:
        def factory(function: Callable, name: Optional[str] = None) -> Memoizer:
            return self.new_memoizer(function, name=name, test=test)
        return factory

    def save_report(self) -> Optional[str]:
        if self.args is None or not self.args.report.enabled:
            return None
        if self.args.report.result_dir is None:
            raise Exception("report result_dir is not configured")
        return save_report(self.records, self.args.report.result_dir, self.args.report.format)


def pytest_addoption(parser):
    group = parser.getgroup("fn_cacher arguments")
    group.addoption('--fn-cacher',
                    action="store_true",
                    dest="fn_cacher",
                    help="enable memoizer report")
    group.addoption('--fn-cacher-conf-path',
                    action="store",
                    dest="fn_cacher_conf_path",
                    metavar="",
                    default=DEFAULT_CONF_PATH,
                    help="path of fn_cacher configuration file")


def pytest_configure(config) -> None:
    global cc
    enabled = getattr(config.option, "fn_cacher", False)
    if not enabled:
        cc = CacherTestContext()
        return

    conf_file_path = config.option.fn_cacher_conf_path
    if os.path.isfile(conf_file_path):
        args = CacherArgs.from_yaml(conf_file_path)
    else:
        print("%s does not exist. default fn_cacher settings are used." %
              conf_file_path)
        args = CacherArgs.auto_configure()
    if args.error_counter.error_count > 0 and args.report.enabled:
        print("fn_cacher configuration has errors. memoizer report is disabled.")
        args.report.enabled = False
    cc = CacherTestContext(args)


@pytest.fixture
def memoize(request) -> Callable[..., Memoizer]:
    """factory fixture: memoize(function, name=None) returns a Memoizer recorded for the session report"""
    if cc is None:
        raise Exception("fn_cacher test context is not initialized")
    return cc.memoize_factory(request.node.nodeid)


# cleanup session


def pytest_sessionfinish(session):
    if cc is None or not cc.enabled:
        return
    path = cc.save_report()
    if path is not None:
        print("\nmemoizer report is written to %s" % path)
