"""Plain-text account statements."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING

from bank_ledger.exceptions import StatementError
from bank_ledger.formatting import statement_header

if TYPE_CHECKING:
    from bank_ledger.store.bank import Bank

logger = logging.getLogger(__name__)


class StatementWriter:
    """Write one-account statements as UTF-8 text files."""

    def __init__(self, output_dir: str | Path) -> None:
        """Initialize statement writer.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write statements to; created on first write.
        """
        self.output_dir = Path(output_dir)

    def write(
        self,
        bank: Bank,
        personal_number: str,
        account_id: int,
        day: date | None = None,
        filename: str = "statement.txt",
    ) -> Path | None:
        """Write a statement for one account.

        The file holds a ``Kontoutdrag - <YYYY-MM-DD>`` header line
        followed by the account line.

        Parameters
        ----------
        bank : Bank
            Bank owning the account.
        personal_number : str
            Owner of the account.
        account_id : int
            Account to report.
        day : date | None
            Statement date (default: today).
        filename : str
            File name inside ``output_dir``.

        Returns
        -------
        Path | None
            Path of the written file, or ``None`` if the account was not
            found.
        """
        details = bank.get_account(personal_number, account_id)
        if details is None:
            return None

        day = day or date.today()
        file_path = self.output_dir / filename
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            with open(file_path, "w", encoding="utf-8") as f:
                f.write(statement_header(day) + "\n")
                f.write(details + "\n")
        except OSError as exc:
            raise StatementError(f"Could not write statement to {file_path}: {exc}") from exc

        logger.info("Wrote statement for account %d to %s", account_id, file_path)
        return file_path
