"""Use case mapping a caller e-mail to an account id."""

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.infrastructure.logging.logger import get_app_logger


class ResolveAccountUseCase:
    """Resolve the account of a caller, falling back to the demo account."""

    def __init__(
        self,
        finance_repository: FinanceRepositoryPort,
        demo_account_id: int = 1,
        logger=None,
    ) -> None:
        self._finance_repository = finance_repository
        self._demo_account_id = demo_account_id
        self._logger = logger or get_app_logger()

    def execute(self, email: str | None) -> int:
        """Return the account id for the e-mail, or the demo account id."""
        account_id = self._finance_repository.resolve_account_id(email)
        if account_id is None:
            self._logger.info(
                f"No account for email={email!r}, using demo account "
                f"{self._demo_account_id}"
            )
            return self._demo_account_id
        return account_id


__all__ = ["ResolveAccountUseCase"]
