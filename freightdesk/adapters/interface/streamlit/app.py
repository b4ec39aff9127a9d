"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import streamlit as st
import altair as alt

from freightdesk.application.use_cases import (
    AccountLedger,
    BalanceSheetStatement,
    PartyLedger,
    ProfitLossStatement,
)
from freightdesk.domain.models import STANDARD_ACCOUNTS, LedgerEntryWithBalance
from freightdesk.domain.services.balances import LedgerView
from freightdesk.domain.services.currency import (
    currency_options,
    format_amount,
)
from freightdesk.infrastructure.container import (
    build_account_ledger_use_case,
    build_balance_sheet_use_case,
    build_general_ledger_use_case,
    build_party_ledger_use_case,
    build_profit_loss_use_case,
    build_settings,
)
from freightdesk.infrastructure.logging.logger import get_usage_logger

PAGES = [
    "Receivables",
    "Payables",
    "General Ledger",
    "Profit & Loss",
    "Balance Sheet",
]
PERIODS = ["YTD", "MTD", "QTD", "All Time"]
ALL_PARTIES = "All parties"


def _fetch_party_ledger(
    view: LedgerView,
    display_currency: str,
    include_settled: bool,
    party_id: str | None = None,
) -> PartyLedger:
    """Fetch a receivable or payable ledger, optionally for one party."""
    use_case = build_party_ledger_use_case()
    return use_case.execute(
        view=view,
        display_currency=display_currency,
        party_id=party_id,
        include_settled=include_settled,
    )


@st.cache_data(show_spinner=False)
def _load_party_ledger(
    view: LedgerView,
    display_currency: str,
    include_settled: bool,
    party_id: str | None = None,
) -> PartyLedger:
    """Cached wrapper around _fetch_party_ledger."""
    return _fetch_party_ledger(view, display_currency, include_settled, party_id)


@st.cache_data(show_spinner=False)
def _load_general_ledger(display_currency: str) -> PartyLedger:
    """Cached general ledger of invoices, expenses and vendor bills."""
    return build_general_ledger_use_case().execute(display_currency)


@st.cache_data(show_spinner=False)
def _load_account_ledger(
    account_code: str,
    start_date: date | None,
    end_date: date | None,
) -> AccountLedger:
    """Cached per-account posting history."""
    use_case = build_account_ledger_use_case()
    return use_case.execute(account_code, start_date, end_date)


@st.cache_data(show_spinner=False)
def _load_profit_loss(
    start_date: date | None,
    end_date: date | None,
    currency_code: str,
) -> ProfitLossStatement:
    """Cached profit and loss statement."""
    use_case = build_profit_loss_use_case()
    return use_case.execute(start_date, end_date, currency_code)


@st.cache_data(show_spinner=False)
def _load_balance_sheet(
    as_of_date: date | None,
    currency_code: str,
) -> BalanceSheetStatement:
    """Cached balance sheet."""
    use_case = build_balance_sheet_use_case()
    return use_case.execute(as_of_date, currency_code)


def _get_period_start(
    period: str,
    today: date,
) -> date | None:
    """Return the start date for the selected period."""
    if period == "All Time":
        return None
    if period == "YTD":
        return date(today.year, 1, 1)
    if period == "MTD":
        return date(today.year, today.month, 1)
    if period == "QTD":
        quarter = (today.month - 1) // 3
        start_month = quarter * 3 + 1
        return date(today.year, start_month, 1)
    return None


def _ledger_rows(
    entries: Sequence[LedgerEntryWithBalance],
    currency_code: str,
) -> list[dict[str, str]]:
    """Return table rows for ledger entries, newest first.

    Balances are accumulated oldest first; the table shows the latest
    entry on top.
    """
    return [
        {
            "Date": entry.date.isoformat() if entry.date else "—",
            "Reference": entry.invoice_number,
            "Party": entry.party_name or "—",
            "Job": entry.job_number or "—",
            "Description": entry.description,
            "Status": entry.status,
            "Total": format_amount(entry.total, currency_code),
            "Paid": format_amount(entry.paid, currency_code),
            "Outstanding": format_amount(entry.outstanding, currency_code),
            "Balance": format_amount(entry.balance, currency_code),
        }
        for entry in reversed(entries)
    ]


def _account_rows(ledger: AccountLedger) -> list[dict[str, str]]:
    """Return table rows for account postings."""
    return [
        {
            "Date": row.entry.date.isoformat() if row.entry.date else "—",
            "Reference": row.entry.reference or "—",
            "Description": row.entry.description,
            "Debit": f"{row.debit:,.2f}",
            "Credit": f"{row.credit:,.2f}",
            "Balance": f"{row.balance:,.2f}",
        }
        for row in ledger.activity.rows
    ]


def _profit_loss_chart_data(
    statement: ProfitLossStatement,
) -> list[dict[str, str | float]]:
    """Prepare bar chart data for the profit and loss sections."""
    sections = [
        ("Revenue", statement.revenue.total),
        ("Cost of Services", statement.cost_of_services.total),
        ("Gross Profit", statement.gross_profit),
        ("Operating Expenses", statement.operating_expenses.total),
        ("Operating Income", statement.operating_income),
        ("Other Expenses", statement.other_expenses.total),
        ("Net Income", statement.net_income),
    ]
    return [
        {
            "section": label,
            "amount": float(amount),
            "amount_label": format_amount(amount, statement.currency_code),
        }
        for label, amount in sections
    ]


def _profit_loss_rows(statement: ProfitLossStatement) -> list[dict[str, str]]:
    """Return the statement lines as label/amount rows."""
    code = statement.currency_code
    revenue = statement.revenue
    costs = statement.cost_of_services
    opex = statement.operating_expenses
    other = statement.other_expenses
    lines: list[tuple[str, Decimal]] = [
        ("Service Revenue", revenue.service_revenue),
        ("Freight Revenue", revenue.freight_revenue),
        ("Other Income", revenue.other_income),
        ("Total Revenue", revenue.total),
        ("Freight Costs", costs.freight_costs),
        ("Handling Costs", costs.handling_costs),
        ("Total Cost of Services", costs.total),
        ("Gross Profit", statement.gross_profit),
        ("Salaries and Wages", opex.salaries),
        ("Rent", opex.rent),
        ("Utilities", opex.utilities),
        ("Insurance", opex.insurance),
        ("Depreciation", opex.depreciation),
        ("Marketing", opex.marketing),
        ("Administrative", opex.administrative),
        ("Other Operating", opex.other),
        ("Total Operating Expenses", opex.total),
        ("Operating Income", statement.operating_income),
        ("Interest Expense", other.interest_expense),
        ("Income Tax", other.taxes),
        ("Total Other Expenses", other.total),
        ("Net Income", statement.net_income),
    ]
    return [
        {"Line": label, "Amount": format_amount(amount, code)}
        for label, amount in lines
    ]


def _balance_sheet_rows(
    statement: BalanceSheetStatement,
) -> list[dict[str, str]]:
    """Return the balance sheet as section/line/amount rows."""
    code = statement.currency_code
    assets = statement.assets
    liabilities = statement.liabilities
    equity = statement.equity
    lines: list[tuple[str, str, Decimal]] = [
        ("Assets", "Cash", assets.current_assets.cash),
        ("Assets", "Accounts Receivable", assets.current_assets.accounts_receivable),
        ("Assets", "Inventory", assets.current_assets.inventory),
        ("Assets", "Prepaid Expenses", assets.current_assets.prepaid_expenses),
        ("Assets", "Total Current Assets", assets.current_assets.total),
        ("Assets", "Property, Plant & Equipment", assets.fixed_assets.property_plant_equipment),
        ("Assets", "Accumulated Depreciation", assets.fixed_assets.accumulated_depreciation),
        ("Assets", "Net Fixed Assets", assets.fixed_assets.net),
        ("Assets", "Other Assets", assets.other_assets),
        ("Assets", "Total Assets", assets.total_assets),
        ("Liabilities", "Accounts Payable", liabilities.current_liabilities.accounts_payable),
        ("Liabilities", "Accrued Expenses", liabilities.current_liabilities.accrued_expenses),
        ("Liabilities", "Short-term Debt", liabilities.current_liabilities.short_term_debt),
        ("Liabilities", "Total Current Liabilities", liabilities.current_liabilities.total),
        ("Liabilities", "Long-term Debt", liabilities.long_term_liabilities.long_term_debt),
        ("Liabilities", "Other Long-term", liabilities.long_term_liabilities.other_long_term),
        ("Liabilities", "Total Liabilities", liabilities.total_liabilities),
        ("Equity", "Owner's Equity", equity.owners_equity),
        ("Equity", "Retained Earnings", equity.retained_earnings),
        ("Equity", "Current Year Earnings", equity.current_year_earnings),
        ("Equity", "Total Equity", equity.total_equity),
        ("", "Total Liabilities & Equity", statement.total_liabilities_and_equity),
    ]
    return [
        {"Section": section, "Line": label, "Amount": format_amount(amount, code)}
        for section, label, amount in lines
    ]


def _party_options(
    entries: Sequence[LedgerEntryWithBalance],
) -> dict[str, str | None]:
    """Return selectbox labels mapped to party ids, in first-seen order."""
    options: dict[str, str | None] = {ALL_PARTIES: None}
    seen: set[str] = set()
    for entry in entries:
        if not entry.party_id or entry.party_id in seen:
            continue
        seen.add(entry.party_id)
        name = entry.party_name or entry.party_id
        options[f"{name} ({entry.party_id})"] = entry.party_id
    return options


def _render_summary(ledger: PartyLedger, outstanding_label: str) -> None:
    """Render the summary cards of a ledger."""
    summary = ledger.summary
    code = summary.currency_code
    total_col, paid_col, outstanding_col, count_col = st.columns(4)
    total_col.metric("Total", format_amount(summary.total, code))
    paid_col.metric("Paid", format_amount(summary.paid, code))
    outstanding_col.metric(
        outstanding_label,
        format_amount(summary.current_balance, code),
    )
    count_col.metric("Entries", summary.entry_count)


def _render_party_ledger(
    view: LedgerView,
    display_currency: str,
    include_settled: bool,
) -> None:
    """Render the receivable or payable page."""
    ledger = _load_party_ledger(view, display_currency, include_settled)
    label = "Receivable" if view is LedgerView.RECEIVABLE else "Payable"
    party_label = "Customer" if view is LedgerView.RECEIVABLE else "Vendor"
    options = _party_options(ledger.entries)
    selected = st.selectbox(party_label, options=list(options))
    party_id = options.get(selected)
    if party_id:
        ledger = _load_party_ledger(
            view,
            display_currency,
            include_settled,
            party_id,
        )
    _render_summary(ledger, f"{label} Balance")
    query = st.text_input("Search by party or reference", placeholder="Type to filter")
    query_lower = query.strip().lower()
    entries = [
        entry
        for entry in ledger.entries
        if not query_lower
        or query_lower in entry.party_name.lower()
        or query_lower in entry.invoice_number.lower()
    ]
    if not entries:
        st.info("No open documents.")
        return
    st.dataframe(
        _ledger_rows(entries, display_currency),
        width="stretch",
        hide_index=True,
        height=420,
    )


def _render_general_ledger(display_currency: str, today: date) -> None:
    """Render the general ledger and the per-account history."""
    ledger = _load_general_ledger(display_currency)
    _render_summary(ledger, "Net Balance")
    st.dataframe(
        _ledger_rows(ledger.entries, display_currency),
        width="stretch",
        hide_index=True,
        height=360,
    )

    st.subheader("Account History")
    labels = {f"{acc.code} {acc.name}": acc.code for acc in STANDARD_ACCOUNTS}
    selected = st.selectbox("Account", options=list(labels))
    period = st.selectbox("Period", PERIODS, key="account_period")
    account_ledger = _load_account_ledger(
        labels[selected],
        _get_period_start(period, today),
        today,
    )
    debit_col, credit_col, balance_col = st.columns(3)
    activity = account_ledger.activity
    debit_col.metric("Debits", f"{activity.total_debit:,.2f}")
    credit_col.metric("Credits", f"{activity.total_credit:,.2f}")
    balance_col.metric("Balance", f"{activity.balance:,.2f}")
    if not activity.rows:
        st.info("No postings for this account in the period.")
        return
    st.dataframe(_account_rows(account_ledger), width="stretch", hide_index=True)


def _render_profit_loss_chart(statement: ProfitLossStatement) -> None:
    """Render a bar chart of profit and loss sections."""
    data = _profit_loss_chart_data(statement)
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusEnd=4,
    ).encode(
        x=alt.X("amount:Q", title=statement.currency_code),
        y=alt.Y(
            "section:N",
            sort=[row["section"] for row in data],
            title=None,
        ),
        color=alt.condition(
            alt.datum.amount >= 0,
            alt.value("#2e7d32"),
            alt.value("#e76f51"),
        ),
        tooltip=[
            alt.Tooltip("section:N"),
            alt.Tooltip("amount_label:N"),
        ],
    ).properties(
        height=320,
    ).configure_view(
        stroke=None
    )
    st.altair_chart(chart, width="stretch")


def _render_profit_loss(currency_code: str, today: date) -> None:
    """Render the profit and loss page."""
    period = st.sidebar.selectbox("Period", PERIODS)
    start_date = _get_period_start(period, today)
    statement = _load_profit_loss(start_date, today, currency_code)
    st.caption(f"Period: {statement.period}")

    revenue_col, gross_col, net_col = st.columns(3)
    revenue_col.metric(
        "Revenue",
        format_amount(statement.revenue.total, currency_code),
    )
    gross_col.metric(
        "Gross Profit",
        format_amount(statement.gross_profit, currency_code),
        f"{statement.gross_margin:.1f}% margin",
    )
    net_col.metric(
        "Net Income",
        format_amount(statement.net_income, currency_code),
        f"{statement.net_margin:.1f}% margin",
    )
    _render_profit_loss_chart(statement)
    st.dataframe(_profit_loss_rows(statement), width="stretch", hide_index=True)
    if statement.unmapped_codes:
        st.warning(
            "Accounts without a dedicated line: "
            + ", ".join(statement.unmapped_codes)
        )


def _render_balance_sheet(currency_code: str, today: date) -> None:
    """Render the balance sheet page."""
    statement = _load_balance_sheet(today, currency_code)
    assets_col, liabilities_col, equity_col = st.columns(3)
    assets_col.metric(
        "Assets",
        format_amount(statement.assets.total_assets, currency_code),
    )
    liabilities_col.metric(
        "Liabilities",
        format_amount(statement.liabilities.total_liabilities, currency_code),
    )
    equity_col.metric(
        "Equity",
        format_amount(statement.equity.total_equity, currency_code),
    )
    if not statement.is_balanced:
        st.warning("Assets do not equal liabilities plus equity.")
    st.dataframe(_balance_sheet_rows(statement), width="stretch", hide_index=True)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Freight Ledger", layout="wide")
    st.title("Freight Ledger")

    settings = build_settings()
    page = st.sidebar.selectbox("Page", PAGES)
    codes = [option["value"] for option in currency_options()]
    display_currency = st.sidebar.selectbox(
        "Currency",
        options=codes,
        index=codes.index(settings.display_currency),
    )
    get_usage_logger().info(f"Page viewed: {page} ({display_currency})")
    today = date.today()

    if page == "Receivables":
        include_settled = st.sidebar.checkbox(
            "Include settled", value=settings.include_settled
        )
        _render_party_ledger(
            LedgerView.RECEIVABLE, display_currency, include_settled
        )
    elif page == "Payables":
        include_settled = st.sidebar.checkbox(
            "Include settled", value=settings.include_settled
        )
        _render_party_ledger(LedgerView.PAYABLE, display_currency, include_settled)
    elif page == "General Ledger":
        _render_general_ledger(display_currency, today)
    elif page == "Profit & Loss":
        _render_profit_loss(display_currency, today)
    else:
        _render_balance_sheet(display_currency, today)


if __name__ == "__main__":  # pragma: no cover
    main()
