"""Financial statement models."""

from dataclasses import dataclass, field
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

ZERO = Decimal("0")
CENT = Decimal("0.01")


@dataclass(frozen=True)
class RevenueSection:
    """Revenue lines of a profit and loss statement."""

    service_revenue: Decimal = ZERO
    freight_revenue: Decimal = ZERO
    other_income: Decimal = ZERO
    total: Decimal = ZERO


@dataclass(frozen=True)
class CostOfServicesSection:
    """Direct costs of freight services."""

    freight_costs: Decimal = ZERO
    handling_costs: Decimal = ZERO
    total: Decimal = ZERO


@dataclass(frozen=True)
class OperatingExpensesSection:
    """Operating expense lines."""

    salaries: Decimal = ZERO
    rent: Decimal = ZERO
    utilities: Decimal = ZERO
    insurance: Decimal = ZERO
    depreciation: Decimal = ZERO
    marketing: Decimal = ZERO
    administrative: Decimal = ZERO
    other: Decimal = ZERO
    total: Decimal = ZERO


@dataclass(frozen=True)
class OtherExpensesSection:
    """Non-operating expense lines."""

    interest_expense: Decimal = ZERO
    taxes: Decimal = ZERO
    total: Decimal = ZERO


@dataclass(frozen=True)
class ProfitLossStatement:
    """Profit and loss statement for a period.

    Attributes:
        period: Human label of the period.
        start_date: First day of the period.
        end_date: Last day of the period.
        currency_code: Currency of every amount.
        gross_margin: Gross profit as a percentage of revenue.
        net_margin: Net income as a percentage of revenue.
        unmapped_codes: Codes routed through a catch-all line.
        skipped_codes: Codes that matched no line and were ignored.
    """

    period: str
    start_date: date | None
    end_date: date | None
    currency_code: str
    revenue: RevenueSection
    cost_of_services: CostOfServicesSection
    gross_profit: Decimal
    gross_margin: Decimal
    operating_expenses: OperatingExpensesSection
    operating_income: Decimal
    other_expenses: OtherExpensesSection
    net_income: Decimal
    net_margin: Decimal
    unmapped_codes: tuple[str, ...] = field(default_factory=tuple)
    skipped_codes: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CurrentAssetsSection:
    cash: Decimal = ZERO
    accounts_receivable: Decimal = ZERO
    inventory: Decimal = ZERO
    prepaid_expenses: Decimal = ZERO
    total: Decimal = ZERO


@dataclass(frozen=True)
class FixedAssetsSection:
    property_plant_equipment: Decimal = ZERO
    accumulated_depreciation: Decimal = ZERO
    net: Decimal = ZERO


@dataclass(frozen=True)
class AssetsSection:
    current_assets: CurrentAssetsSection
    fixed_assets: FixedAssetsSection
    other_assets: Decimal
    total_assets: Decimal


@dataclass(frozen=True)
class CurrentLiabilitiesSection:
    accounts_payable: Decimal = ZERO
    accrued_expenses: Decimal = ZERO
    short_term_debt: Decimal = ZERO
    total: Decimal = ZERO


@dataclass(frozen=True)
class LongTermLiabilitiesSection:
    long_term_debt: Decimal = ZERO
    other_long_term: Decimal = ZERO
    total: Decimal = ZERO


@dataclass(frozen=True)
class LiabilitiesSection:
    current_liabilities: CurrentLiabilitiesSection
    long_term_liabilities: LongTermLiabilitiesSection
    total_liabilities: Decimal


@dataclass(frozen=True)
class EquitySection:
    owners_equity: Decimal = ZERO
    retained_earnings: Decimal = ZERO
    current_year_earnings: Decimal = ZERO
    total_equity: Decimal = ZERO


@dataclass(frozen=True)
class BalanceSheetStatement:
    """Balance sheet as of a date."""

    as_of_date: date | None
    currency_code: str
    assets: AssetsSection
    liabilities: LiabilitiesSection
    equity: EquitySection
    total_liabilities_and_equity: Decimal
    unmapped_codes: tuple[str, ...] = field(default_factory=tuple)
    skipped_codes: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_balanced(self) -> bool:
        """Return True when assets equal liabilities plus equity to the cent.

        Converted balances carry full Decimal precision, so both sides are
        rounded to cents before comparing.
        """
        assets = self.assets.total_assets.quantize(CENT, rounding=ROUND_HALF_UP)
        claims = self.total_liabilities_and_equity.quantize(
            CENT,
            rounding=ROUND_HALF_UP,
        )
        return assets == claims


__all__ = [
    "RevenueSection",
    "CostOfServicesSection",
    "OperatingExpensesSection",
    "OtherExpensesSection",
    "ProfitLossStatement",
    "CurrentAssetsSection",
    "FixedAssetsSection",
    "AssetsSection",
    "CurrentLiabilitiesSection",
    "LongTermLiabilitiesSection",
    "LiabilitiesSection",
    "EquitySection",
    "BalanceSheetStatement",
]
