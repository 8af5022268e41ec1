from __future__ import annotations

import csv
import io
from typing import Sequence

import pandas as pd

from .statement import STATEMENT_COLUMNS, PaymentStatementRow, to_header_records


def statements_to_csv(rows: Sequence[PaymentStatementRow]) -> bytes:
    """CSV with BOM so Excel opens the Korean headers correctly."""

    headers = [header for _, header in STATEMENT_COLUMNS]
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=headers)
    writer.writeheader()
    for record in to_header_records(rows):
        writer.writerow(record)
    return out.getvalue().encode("utf-8-sig")


def statements_to_excel(rows: Sequence[PaymentStatementRow], *, sheet_name: str = "수당명세서") -> bytes:
    headers = [header for _, header in STATEMENT_COLUMNS]
    df = pd.DataFrame(to_header_records(rows), columns=headers)

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    return output.getvalue()
