"""
CLI to run the compliance filter over a draft before it is loaded into a sequence.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from hotel_capital.api.schema import serialize_compliance_result
from hotel_capital.compliance.rules import check_compliance
from hotel_capital.services.types import ACCREDITED_STATUSES, OFFERING_TYPES, ComplianceCheckInput


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Check outbound investor content for compliance.")
    parser.add_argument(
        "content_file",
        nargs="?",
        type=Path,
        default=None,
        help="File containing the message body (reads stdin when omitted).",
    )
    parser.add_argument("--subject", default=None, help="Email subject line, scanned ahead of the body.")
    parser.add_argument(
        "--offering-type",
        choices=OFFERING_TYPES,
        default="REG_D_506B",
        help="Reg D exemption the offering relies on.",
    )
    parser.add_argument(
        "--prior-relationship",
        action="store_true",
        help="Recipient has a documented pre-existing relationship.",
    )
    parser.add_argument("--opted-out", action="store_true", help="Recipient has opted out.")
    parser.add_argument(
        "--accredited-status",
        choices=ACCREDITED_STATUSES,
        default="UNVERIFIED",
        help="Recipient accreditation status.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)

    if args.content_file is not None:
        content = args.content_file.read_text(encoding="utf-8")
    else:
        content = sys.stdin.read()

    result = check_compliance(
        ComplianceCheckInput(
            content=content,
            subject=args.subject,
            offering_type=args.offering_type,
            investor_has_prior_relationship=args.prior_relationship,
            investor_opted_out=args.opted_out,
            investor_accredited_status=args.accredited_status,
        )
    )
    print(json.dumps(serialize_compliance_result(result), ensure_ascii=False, indent=2))
    return 0 if result.passed else 1


if __name__ == "__main__":
    sys.exit(main())
