"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.infrastructure.logging.logger import get_app_logger

SUPPORTED_CURRENCIES = ("USD", "EUR")


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for account resolution and display.

    Attributes:
        demo_account_id: Account used when no known e-mail is supplied.
        display_currency: Currency that presentation adapters convert to.
    """

    demo_account_id: int = 1
    display_currency: str = "USD"

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables.

        Returns:
            DashboardSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        demo_account_id = cls._parse_account_id(
            os.getenv("DEMO_ACCOUNT_ID"),
            logger=logger,
        )
        currency = os.getenv("DISPLAY_CURRENCY", "USD").strip().upper()
        if currency not in SUPPORTED_CURRENCIES:
            logger.warning(
                f"Unsupported DISPLAY_CURRENCY '{currency}', using USD"
            )
            currency = "USD"
        return cls(demo_account_id=demo_account_id, display_currency=currency)

    @staticmethod
    def _parse_account_id(raw_value: str | None, logger) -> int:
        """Parse the demo account id, defaulting to 1.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: Parsed account id.
        """
        if not raw_value:
            return 1
        try:
            return int(raw_value.strip())
        except ValueError:
            logger.warning(
                f"Invalid DEMO_ACCOUNT_ID '{raw_value}'. Expected an integer."
            )
            return 1


__all__ = ["DashboardSettings", "SUPPORTED_CURRENCIES"]
