"""CLI configuration with XDG-compliant paths and environment variable overrides."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import StrEnum
from pathlib import Path

from ledger_reports.config import SourceConfig, default_config_dir
from ledger_reports.models import BALANCE_TOLERANCE


class OutputFormat(StrEnum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"
    CSV = "csv"


@dataclass
class CLIConfig:
    """Configuration passed through Typer context.

    Attributes:
        verbose: Enable debug logging.
        config_dir: Directory holding ``config.json`` with backend credentials.
        tolerance: Largest difference still reported as balanced.
    """

    verbose: bool = False
    config_dir: Path = field(default_factory=default_config_dir)
    tolerance: Decimal = BALANCE_TOLERANCE

    @property
    def source_config_path(self) -> Path:
        """Get the backend credentials file path."""
        return self.config_dir / "config.json"

    def load_source_config(self) -> SourceConfig:
        """Load backend settings (SUPABASE_URL/SUPABASE_KEY override the file).

        Raises:
            ConfigError: If credentials cannot be determined from env vars or file
        """
        return SourceConfig.load(self.source_config_path)
