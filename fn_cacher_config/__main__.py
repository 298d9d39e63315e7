import os
import sys
import argparse
from typing import List, Optional
from fn_cacher_args import CacherArgs
from fn_cacher_args.cacher_args import DEFAULT_CONF_PATH


# validate the file and show the settings a pytest session would use
def verify(path: str) -> int:
    if not os.path.isfile(path):
        print("%s does not exist." % path)
        return 1
    # errors are printed while loading
    conf = CacherArgs.from_yaml(path)
    if conf.error_counter.error_count > 0:
        return 1

    report = conf.report
    print("trace: %s" % ("on" if conf.trace else "off"))
    if report.enabled:
        print("report: %s format, written to %s" %
              (report.format, os.path.abspath(str(report.result_dir))))
    else:
        print("report: disabled")
    return 0


def create(path: str, force: bool) -> int:
    if os.path.exists(path) and not force:
        print("%s already exists. use --force to overwrite it." % path)
        return 1
    CacherArgs.auto_configure().write_as_yaml(path)
    print("default settings are written to %s" % os.path.abspath(path))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='write or check the fn_cacher settings used by the pytest plugin')
    parser.add_argument('--file', dest="file",
                        default=DEFAULT_CONF_PATH, help='configuration file name')
    command = parser.add_mutually_exclusive_group(required=True)
    command.add_argument('--create', action="store_true",
                         help='write a configuration file with default settings')
    command.add_argument('--verify', action="store_true",
                         help='check a configuration file and print the effective settings')
    parser.add_argument('--force', action="store_true",
                        help='with --create, overwrite an existing file')

    args = parser.parse_args(argv)
    if args.verify:
        return verify(args.file)
    return create(args.file, args.force)


if __name__ == '__main__':
    sys.exit(main())
