"""SQLAlchemy repository for the hosted finance database."""

from dataclasses import asdict

from sqlalchemy import bindparam, text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.finance_repository import (
    FinanceRecords,
    FinanceRepositoryPort,
    NewAffiliateProgram,
    NewDigitalProduct,
    NewGoal,
    NewTransaction,
    TransactionUpdate,
)
from src.domain.models import (
    AffiliateProgram,
    DigitalProduct,
    Goal,
    Transaction,
)
from src.utils.decimal_utils import coerce_decimal


SELECT_USER_ID_SQL = text(
    """
    SELECT id
    FROM users
    WHERE email = :email
    LIMIT 1
    """
)

INSERT_USER_SQL = text(
    """
    INSERT INTO users (email, name)
    VALUES (:email, :name)
    ON CONFLICT (email) DO NOTHING
    RETURNING id
    """
)

SELECT_TRANSACTIONS_SQL = text(
    """
    SELECT id, user_id, type, amount, category, date, description,
           is_tax_deductible
    FROM transactions
    WHERE user_id = :account_id
    ORDER BY id
    """
)

SELECT_AFFILIATE_PROGRAMS_SQL = text(
    """
    SELECT id, user_id, name, clicks, conversions, commissions
    FROM affiliate_programs
    WHERE user_id = :account_id
    ORDER BY id
    """
)

SELECT_DIGITAL_PRODUCTS_SQL = text(
    """
    SELECT id, user_id, name, sales, gross_revenue, platform_fee
    FROM digital_products
    WHERE user_id = :account_id
    ORDER BY id
    """
)

SELECT_GOALS_SQL = text(
    """
    SELECT id, user_id, type, target_amount, current_amount, month
    FROM goals
    WHERE user_id = :account_id
    ORDER BY id
    """
)

INSERT_TRANSACTION_SQL = text(
    """
    INSERT INTO transactions (
        user_id,
        type,
        amount,
        category,
        date,
        description,
        is_tax_deductible
    )
    VALUES (
        :account_id,
        :type,
        :amount,
        :category,
        :date,
        :description,
        :is_tax_deductible
    )
    RETURNING id
    """
)

UPDATE_TRANSACTION_SQL = text(
    """
    UPDATE transactions
    SET amount = :amount,
        category = :category,
        date = :date,
        description = :description,
        is_tax_deductible = :is_tax_deductible
    WHERE id = :transaction_id AND user_id = :account_id
    """
)

DELETE_TRANSACTIONS_SQL = text(
    """
    DELETE FROM transactions
    WHERE id IN :ids AND user_id = :account_id
    """
).bindparams(bindparam("ids", expanding=True))

CATEGORIZE_TRANSACTIONS_SQL = text(
    """
    UPDATE transactions
    SET category = :category
    WHERE id IN :ids AND user_id = :account_id
    """
).bindparams(bindparam("ids", expanding=True))

INSERT_AFFILIATE_PROGRAM_SQL = text(
    """
    INSERT INTO affiliate_programs (
        user_id, name, clicks, conversions, commissions
    )
    VALUES (:account_id, :name, :clicks, :conversions, :commissions)
    RETURNING id
    """
)

INSERT_DIGITAL_PRODUCT_SQL = text(
    """
    INSERT INTO digital_products (
        user_id, name, sales, gross_revenue, platform_fee
    )
    VALUES (:account_id, :name, :sales, :gross_revenue, :platform_fee)
    RETURNING id
    """
)

INSERT_GOAL_SQL = text(
    """
    INSERT INTO goals (user_id, type, target_amount, current_amount, month)
    VALUES (:account_id, :type, :target_amount, 0, :month)
    RETURNING id
    """
)


class SqlAlchemyFinanceRepository(FinanceRepositoryPort):
    """Repository reading and writing finance records with SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def resolve_account_id(self, email: str | None) -> int | None:
        if not email:
            return None
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            result = conn.execute(SELECT_USER_ID_SQL, {"email": email}).first()
        return result.id if result else None

    def fetch_records(self, account_id: int) -> FinanceRecords:
        """Read the four record lists inside one repeatable-read transaction.

        Args:
            account_id: Account whose records are read.

        Returns:
            FinanceRecords: Records reflecting the same point in time.
        """
        params = {"account_id": account_id}
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            conn.execution_options(isolation_level="REPEATABLE READ")
            transaction_rows = conn.execute(
                SELECT_TRANSACTIONS_SQL, params
            ).all()
            program_rows = conn.execute(
                SELECT_AFFILIATE_PROGRAMS_SQL, params
            ).all()
            product_rows = conn.execute(
                SELECT_DIGITAL_PRODUCTS_SQL, params
            ).all()
            goal_rows = conn.execute(SELECT_GOALS_SQL, params).all()
        return FinanceRecords(
            transactions=[_to_transaction(row) for row in transaction_rows],
            affiliate_programs=[_to_program(row) for row in program_rows],
            digital_products=[_to_product(row) for row in product_rows],
            goals=[_to_goal(row) for row in goal_rows],
        )

    def fetch_transactions(self, account_id: int) -> list[Transaction]:
        rows = self._fetch(SELECT_TRANSACTIONS_SQL, account_id)
        return [_to_transaction(row) for row in rows]

    def fetch_affiliate_programs(
        self,
        account_id: int,
    ) -> list[AffiliateProgram]:
        rows = self._fetch(SELECT_AFFILIATE_PROGRAMS_SQL, account_id)
        return [_to_program(row) for row in rows]

    def fetch_goals(self, account_id: int) -> list[Goal]:
        rows = self._fetch(SELECT_GOALS_SQL, account_id)
        return [_to_goal(row) for row in rows]

    def ensure_user(self, email: str, name: str | None) -> bool:
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            result = conn.execute(
                INSERT_USER_SQL, {"email": email, "name": name}
            ).first()
        return result is not None

    def add_transaction(
        self,
        account_id: int,
        transaction: NewTransaction,
    ) -> int:
        payload = asdict(transaction)
        payload["account_id"] = account_id
        return self._insert(INSERT_TRANSACTION_SQL, payload)

    def update_transaction(
        self,
        account_id: int,
        transaction_id: int,
        update: TransactionUpdate,
    ) -> int:
        payload = asdict(update)
        payload["account_id"] = account_id
        payload["transaction_id"] = transaction_id
        return self._write(UPDATE_TRANSACTION_SQL, payload)

    def delete_transactions(self, account_id: int, ids: list[int]) -> int:
        return self._write(
            DELETE_TRANSACTIONS_SQL,
            {"account_id": account_id, "ids": list(ids)},
        )

    def categorize_transactions(
        self,
        account_id: int,
        ids: list[int],
        category: str,
    ) -> int:
        return self._write(
            CATEGORIZE_TRANSACTIONS_SQL,
            {"account_id": account_id, "ids": list(ids), "category": category},
        )

    def add_affiliate_program(
        self,
        account_id: int,
        program: NewAffiliateProgram,
    ) -> int:
        payload = asdict(program)
        payload["account_id"] = account_id
        return self._insert(INSERT_AFFILIATE_PROGRAM_SQL, payload)

    def add_digital_product(
        self,
        account_id: int,
        product: NewDigitalProduct,
    ) -> int:
        payload = asdict(product)
        payload["account_id"] = account_id
        return self._insert(INSERT_DIGITAL_PRODUCT_SQL, payload)

    def add_goal(self, account_id: int, goal: NewGoal) -> int:
        payload = asdict(goal)
        payload["account_id"] = account_id
        return self._insert(INSERT_GOAL_SQL, payload)

    def _fetch(self, query, account_id: int) -> list:
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            return conn.execute(query, {"account_id": account_id}).all()

    def _insert(self, query, params: dict) -> int:
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            result = conn.execute(query, params).first()
        if not result:
            raise RuntimeError("Insert did not return an id")
        return result.id

    def _write(self, query, params: dict) -> int:
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            result = conn.execute(query, params)
        return result.rowcount


def _to_transaction(row) -> Transaction:
    return Transaction(
        id=row.id,
        account_id=row.user_id,
        type=row.type,
        amount=coerce_decimal(row.amount),
        category=row.category or "",
        date=str(row.date),
        description=row.description or "",
        is_tax_deductible=bool(row.is_tax_deductible),
    )


def _to_program(row) -> AffiliateProgram:
    return AffiliateProgram(
        id=row.id,
        account_id=row.user_id,
        name=row.name,
        clicks=int(row.clicks or 0),
        conversions=int(row.conversions or 0),
        commissions=coerce_decimal(row.commissions),
    )


def _to_product(row) -> DigitalProduct:
    return DigitalProduct(
        id=row.id,
        account_id=row.user_id,
        name=row.name,
        sales=int(row.sales or 0),
        gross_revenue=coerce_decimal(row.gross_revenue),
        platform_fee=coerce_decimal(row.platform_fee),
    )


def _to_goal(row) -> Goal:
    return Goal(
        id=row.id,
        account_id=row.user_id,
        type=row.type,
        target_amount=coerce_decimal(row.target_amount),
        month=row.month,
        current_amount=coerce_decimal(row.current_amount),
    )


__all__ = [
    "SqlAlchemyFinanceRepository",
    "SELECT_TRANSACTIONS_SQL",
    "SELECT_AFFILIATE_PROGRAMS_SQL",
    "SELECT_DIGITAL_PRODUCTS_SQL",
    "SELECT_GOALS_SQL",
]
