"""Use case registering a user on first sign-in."""

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.infrastructure.logging.logger import get_app_logger


class RegisterUserUseCase:
    """Insert a user row, treating an existing e-mail as success."""

    def __init__(
        self,
        finance_repository: FinanceRepositoryPort,
        logger=None,
    ) -> None:
        self._finance_repository = finance_repository
        self._logger = logger or get_app_logger()

    def execute(self, email: str, name: str | None = None) -> bool:
        """Register the user.

        Returns:
            bool: True when a new user was created.

        Raises:
            ValueError: If the e-mail is blank.
        """
        email = (email or "").strip()
        if not email:
            raise ValueError("email is required")
        created = self._finance_repository.ensure_user(email, name)
        if created:
            self._logger.info(f"Registered user {email}")
        else:
            self._logger.info(f"User {email} already registered")
        return created


__all__ = ["RegisterUserUseCase"]
