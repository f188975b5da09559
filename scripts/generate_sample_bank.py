#!/usr/bin/env python3
"""Generate a sample bank and save it as a snapshot.

The bank is populated with Faker-generated customers, savings and credit
accounts and a short deposit/withdrawal history per account. The result is
written to the configured snapshot path, ready to be loaded by the
application. Optionally a statement for the first account is written too.

Defaults come from the environment (see ``bank_ledger.config``).
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_ledger.config import BankConfig
from bank_ledger.exceptions import PersistenceError
from bank_ledger.logging import configure_logging, get_logger
from bank_ledger.scenarios import SampleBankScenario
from bank_ledger.sinks import StatementWriter

logger = get_logger(__name__)


def main() -> None:
    """Main entry point."""
    config = BankConfig.from_env()

    parser = argparse.ArgumentParser(description="Generate a sample bank snapshot")
    parser.add_argument(
        "--customers",
        type=int,
        default=config.sample.num_customers,
        help=f"Number of customers to generate (default: {config.sample.num_customers})",
    )
    parser.add_argument(
        "--transactions",
        type=int,
        default=config.sample.transactions_per_account,
        help="Deposits/withdrawals attempted per account "
        f"(default: {config.sample.transactions_per_account})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=config.storage.snapshot_path,
        help=f"Snapshot file to write (default: {config.storage.snapshot_path})",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        default=config.storage.pretty_json,
        help="Pretty-print the snapshot JSON",
    )
    parser.add_argument(
        "--statement",
        action="store_true",
        help="Also write a statement for the first generated account",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        help=f"Log level (default: {config.log_level})",
    )
    args = parser.parse_args()

    configure_logging(config, level=args.log_level)

    scenario = SampleBankScenario(
        num_customers=args.customers,
        accounts_per_customer=config.sample.accounts_per_customer,
        transactions_per_account=args.transactions,
        seed=args.seed,
        locale=config.sample.locale,
    )
    bank = scenario.generate()

    try:
        path = bank.save_customers_to_file(args.output, pretty=args.pretty)

        if args.statement:
            customer = next(
                (c for c in bank.customers.values() if c.accounts), None
            )
            if customer is None:
                logger.warning("No accounts generated; skipping statement")
            else:
                StatementWriter(config.storage.data_dir).write(
                    bank,
                    customer.personal_number,
                    customer.accounts[0].account_number,
                    filename=config.storage.statement_file,
                )
    except PersistenceError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    print(f"Sample bank written to: {path}")
    for entity_type, count in bank.summary().items():
        print(f"  {entity_type}: {count}")


if __name__ == "__main__":
    main()
