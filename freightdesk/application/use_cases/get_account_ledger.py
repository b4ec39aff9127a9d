"""Use case to list the postings of one general-ledger account."""

from dataclasses import dataclass
from datetime import date

from freightdesk.application.ports.records_repository import RecordsRepositoryPort
from freightdesk.domain.models import STANDARD_ACCOUNTS, Account, AccountActivity
from freightdesk.domain.services.balances import accumulate_account_activity
from freightdesk.domain.services.normalization import normalize_account_code
from freightdesk.domain.services.parsing import NumericPolicy
from freightdesk.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class AccountLedger:
    """Account metadata with its posting activity."""

    account_code: str
    account_name: str
    account_type: str
    activity: AccountActivity


class GetAccountLedgerUseCase:
    """Read postings of an account and fold a running balance."""

    def __init__(
        self,
        records_repository: RecordsRepositoryPort,
        logger=None,
        numeric_policy: NumericPolicy = NumericPolicy.DEFAULT_ZERO,
    ) -> None:
        self._records_repository = records_repository
        self._logger = logger or get_app_logger()
        self._numeric_policy = numeric_policy

    def execute(
        self,
        account_code: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> AccountLedger:
        """Return the postings of an account with a debit-minus-credit balance.

        Args:
            account_code: Code of the account, e.g. ``1100``.
            start_date: Optional lower bound for posting dates.
            end_date: Optional upper bound for posting dates.

        Returns:
            AccountLedger: Account metadata and its activity.
        """
        code = normalize_account_code(account_code)
        postings = self._records_repository.fetch_journal_entries(
            start_date,
            end_date,
            account_code=code,
        )
        activity = accumulate_account_activity(
            postings,
            numeric_policy=self._numeric_policy,
            logger=self._logger,
        )
        account = self._lookup_account(code)
        self._logger.info(
            f"Account {code} ledger built: postings={len(activity.rows)}, "
            f"balance={activity.balance}"
        )
        return AccountLedger(
            account_code=code,
            account_name=account.name if account else "",
            account_type=account.account_type if account else "",
            activity=activity,
        )

    def _lookup_account(self, code: str) -> Account | None:
        for account in self._records_repository.fetch_accounts():
            if account.code == code:
                return account
        for account in STANDARD_ACCOUNTS:
            if account.code == code:
                return account
        return None


__all__ = ["GetAccountLedgerUseCase", "AccountLedger"]
