"""CLI for creating an empty relationship network workbook with the People, Relationships and Events sheets"""

import argparse
from pathlib import Path

from openpyxl import load_workbook

from relnet.config import settings
from relnet.table_stores.workbook import create_template


def main(outfile: str) -> None:
    path = Path(outfile)
    # Existing workbooks only get the sheets they are missing
    workbook = create_template(load_workbook(path) if path.exists() else None)
    path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(path)
    print(f"Template written to {path}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--outfile",
        type=str,
        required=False,
        help="Workbook to create or extend",
        default=settings.workbook_path or "data/relationship-network.xlsx",
    )

    args = parser.parse_args()

    main(outfile=args.outfile)
