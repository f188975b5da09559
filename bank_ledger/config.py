"""Configuration management for bank-ledger."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from bank_ledger.exceptions import ConfigurationError

LOG_FORMATS = ("standard", "json")


@dataclass
class StorageConfig:
    """Where snapshots and statements are written."""

    data_dir: Path = field(default_factory=lambda: Path("bank_data"))
    snapshot_file: str = "bank.json"
    statement_file: str = "statement.txt"
    pretty_json: bool = False

    @property
    def snapshot_path(self) -> Path:
        """Get the full snapshot path."""
        return self.data_dir / self.snapshot_file

    @property
    def statement_path(self) -> Path:
        """Get the full statement path."""
        return self.data_dir / self.statement_file


@dataclass
class SampleDataConfig:
    """Configuration for generating a sample bank."""

    num_customers: int = 10
    accounts_per_customer: tuple[int, int] = (1, 3)
    transactions_per_account: int = 5
    locale: str = "sv_SE"


@dataclass
class BankConfig:
    """Main configuration for bank-ledger."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    sample: SampleDataConfig = field(default_factory=SampleDataConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.log_format!r}; expected one of {LOG_FORMATS}"
            )

    @classmethod
    def from_env(cls) -> "BankConfig":
        """Create config from environment variables."""
        storage = StorageConfig(
            data_dir=Path(os.getenv("BANK_DATA_DIR", "bank_data")),
            snapshot_file=os.getenv("BANK_SNAPSHOT_FILE", "bank.json"),
            statement_file=os.getenv("BANK_STATEMENT_FILE", "statement.txt"),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        sample = SampleDataConfig(
            num_customers=_env_int("SAMPLE_CUSTOMERS", 10),
            transactions_per_account=_env_int("SAMPLE_TRANSACTIONS", 5),
            locale=os.getenv("SAMPLE_LOCALE", "sv_SE"),
        )

        return cls(
            storage=storage,
            sample=sample,
            seed=_env_int("SEED"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _env_int(name: str, default: int | None = None) -> int | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from exc
