import argparse
import json
import logging
import sys

from recovery.errors import RecoveryError
from recovery.bigint import to_decimal
from recovery_service.config import STRATEGIES, load_settings
from recovery_service.core import RecoveryCore
from share_documents.json_loader import load_share_sets
from share_documents.models import ShareDocumentError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="share-recover",
        description="Recover the secret f(0) from base-encoded polynomial shares",
    )
    parser.add_argument("files", nargs="+", help="JSON share documents")
    parser.add_argument("--strategy", choices=STRATEGIES, default=None, help="majority vote over all k-subsets, or the first k points")
    parser.add_argument("--strict", action="store_true", default=None, help="abort instead of dropping shares that fail to decode")
    parser.add_argument("--json", action="store_true", help="print one JSON report per document")
    parser.add_argument("--log-level", default=None, help="logging level (default from RECOVERY_LOG_LEVEL)")
    parser.add_argument("--env-file", default=None, help="dotenv file to read settings from")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {"strategy": args.strategy, "strict_shares": args.strict, "log_level": args.log_level}
    try:
        settings = load_settings(args.env_file, overrides)
    except ValueError as e:
        print(f"share-recover: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(level=logging.getLevelName(settings.log_level))

    core = RecoveryCore(settings)
    failed = False
    for path in args.files:
        try:
            share_sets = load_share_sets(path)
        except (OSError, ShareDocumentError) as e:
            print(f"{path}: {e}", file=sys.stderr)
            failed = True
            continue

        multi = len(args.files) > 1 or len(share_sets) > 1
        for idx, share_set in enumerate(share_sets):
            label = f"{path}[{idx}]" if multi else path
            try:
                res = core.recover(share_set)
            except RecoveryError as e:
                print(f"{label}: {e}", file=sys.stderr)
                failed = True
                continue

            if args.json:
                print(json.dumps(res.to_dict(), ensure_ascii=False))
            elif multi:
                print(f"{label}: SECRET: {to_decimal(res.secret)}")
            else:
                print(f"SECRET: {to_decimal(res.secret)}")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
