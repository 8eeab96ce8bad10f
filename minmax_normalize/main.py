from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence, Tuple

from . import rules
from .arff import read_arff, write_arff
from .errors import InvalidArgument, InvalidArgumentCount, NormalizeError, UnknownAttribute
from .models import RangeSpec, RunReport
from .normalize import compute_min_max, normalize_dataset

USAGE = (
    "%(prog)s InputFile -c classattribute "
    "-attribute1 newminVal1 newmaxVal1 -attribute2 newminVal2 newmaxVal2 ..."
)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="minmax-normalize",
        usage=USAGE,
        description="Min-max normalize selected attributes of an ARFF data file.",
    )
    p.add_argument("input", help="Input ARFF file")
    p.add_argument(
        "params",
        nargs=argparse.REMAINDER,
        help="-c <class attribute> followed by -<attribute> <new min> <new max> triples",
    )
    return p


def _parse_float(token: str, attribute: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise InvalidArgument(f"Range bound '{token}' for {attribute} is not a number") from None


def parse_params(params: Sequence[str]) -> Tuple[str, List[RangeSpec]]:
    """
    Split `-c <class> [-<attr> <min> <max>]...` into the class attribute and range specs.

    The input file plus these params must come in groups of three.
    """
    if (len(params) + 1) % 3 != 0:
        raise InvalidArgumentCount("Invalid number of arguments")
    if params[0] != rules.CLASS_FLAG:
        raise InvalidArgument(f"Expected {rules.CLASS_FLAG} <classattribute>, got '{params[0]}'")

    class_attribute = params[1]
    ranges: List[RangeSpec] = []
    seen = set()

    for i in range(2, len(params), 3):
        flag, low, high = params[i:i + 3]
        if not flag.startswith(rules.ATTRIBUTE_FLAG_PREFIX) or len(flag) == 1:
            raise InvalidArgument(f"Expected -<attribute>, got '{flag}'")
        name = flag[len(rules.ATTRIBUTE_FLAG_PREFIX):]

        if name == class_attribute:
            raise InvalidArgument(f"Class attribute {name} cannot be normalized")
        if name in seen:
            raise InvalidArgument(f"Range for {name} given more than once")
        seen.add(name)

        ranges.append(
            RangeSpec(attribute=name, new_min=_parse_float(low, name), new_max=_parse_float(high, name))
        )

    return class_attribute, ranges


def run(input_file: str, class_attribute: str, ranges: List[RangeSpec]) -> RunReport:
    print(f"Reading from file {input_file}..........")
    dataset, encoding = read_arff(input_file)
    print("Reading from file completed.")

    if dataset.column_index(class_attribute) is None:
        raise UnknownAttribute(class_attribute)

    rows, columns = dataset.shape
    print(f"Computing min max values for {columns} attributes.......")
    stats = compute_min_max(dataset)

    # every range is checked here, before either output file is opened
    print(f"Processing normalization for {len(ranges)} attributes.........")
    normalized = normalize_dataset(dataset, stats, class_attribute, ranges)

    minmax_file = rules.MINMAX_PREFIX + input_file
    write_arff(minmax_file, stats.as_dataset())
    print(f"Min max values dumped in the file {minmax_file}")

    normalized_file = rules.NORMALIZED_PREFIX + input_file
    write_arff(normalized_file, normalized)
    print(f"Normalized data dumped into file {normalized_file}")
    print("Processing completed. Please check the output files for review")

    return RunReport(
        input_file=input_file,
        encoding=encoding,
        rows=rows,
        columns=columns,
        class_attribute=class_attribute,
        normalized=[spec.attribute for spec in ranges],
        minmax_file=minmax_file,
        normalized_file=normalized_file,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        class_attribute, ranges = parse_params(args.params)
    except InvalidArgument as exc:
        print(exc, file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 2

    try:
        report = run(args.input, class_attribute, ranges)
    except NormalizeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(
        f"{report.rows} rows x {report.columns} attributes read "
        f"(encoding: {report.encoding or 'unknown'}), "
        f"normalized: {', '.join(report.normalized) or 'none'}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
