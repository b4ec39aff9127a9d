"""Tests for the Streamlit app module."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest

from freightdesk.adapters.interface.streamlit import app
from freightdesk.application.use_cases import PartyLedger
from freightdesk.domain.models import (
    JournalEntry,
    LedgerEntryWithBalance,
    LedgerSummary,
)
from freightdesk.domain.services.balances import LedgerView
from freightdesk.domain.services.statements import (
    build_balance_sheet,
    build_profit_loss,
)
from freightdesk.infrastructure.settings import LedgerSettings


def _ledger_entry(entry_id: str, entry_date, balance: str):
    return LedgerEntryWithBalance(
        id=entry_id,
        party_type="customer",
        party_id="c-1",
        party_name="Acme Imports",
        invoice_number=f"INV-{entry_id}",
        job_number="",
        description="Ocean freight",
        date=entry_date,
        status="sent",
        total=Decimal("100"),
        paid=Decimal("25"),
        outstanding=Decimal("75"),
        source="invoice",
        balance=Decimal(balance),
    )


def _party_ledger(entries) -> PartyLedger:
    return PartyLedger(
        view=LedgerView.RECEIVABLE,
        entries=entries,
        summary=LedgerSummary(
            entry_count=len(entries),
            total=Decimal("200"),
            paid=Decimal("50"),
            outstanding=Decimal("150"),
            current_balance=Decimal("150"),
            currency_code="USD",
        ),
    )


class _FakeColumn:
    def __init__(self, sink: list) -> None:
        self._sink = sink

    def metric(self, label, value, delta=None, **_kwargs):
        self._sink.append((label, value, delta))


class _FakeSidebar:
    def __init__(self, choices: dict) -> None:
        self._choices = choices

    def selectbox(self, label, options, index=0, **_kwargs):
        return self._choices.get(label, list(options)[index])

    def checkbox(self, label, value=False, **_kwargs):
        return self._choices.get(label, value)


class _FakeStreamlit:
    def __init__(self, choices: dict | None = None) -> None:
        self._choices = choices or {}
        self.sidebar = _FakeSidebar(self._choices)
        self.selectbox_options: dict[str, list] = {}
        self.metrics: list = []
        self.dataframes: list = []
        self.infos: list[str] = []
        self.warnings: list[str] = []
        self.text_query = ""

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def columns(self, count: int):
        return [_FakeColumn(self.metrics) for _ in range(count)]

    def selectbox(self, label, options, index=0, **_kwargs):
        self.selectbox_options[label] = list(options)
        return self._choices.get(label, list(options)[index])

    def text_input(self, *_args, **_kwargs):
        return self.text_query

    def dataframe(self, data, **_kwargs):
        self.dataframes.append(data)

    def info(self, text: str):
        self.infos.append(text)

    def warning(self, text: str):
        self.warnings.append(text)


@pytest.mark.parametrize(
    "period, expected",
    [
        ("YTD", date(2024, 1, 1)),
        ("MTD", date(2024, 8, 1)),
        ("QTD", date(2024, 7, 1)),
        ("All Time", None),
    ],
)
def test_get_period_start(period, expected) -> None:
    assert app._get_period_start(period, date(2024, 8, 15)) == expected


def test_ledger_rows_show_newest_first() -> None:
    entries = [
        _ledger_entry("1", date(2024, 1, 1), "75"),
        _ledger_entry("2", None, "150"),
    ]

    rows = app._ledger_rows(entries, "EUR")

    assert [row["Reference"] for row in rows] == ["INV-2", "INV-1"]
    assert rows[0]["Date"] == "—"
    assert rows[0]["Balance"] == "€150.00"
    assert rows[1]["Outstanding"] == "€75.00"
    assert rows[1]["Job"] == "—"


def test_profit_loss_chart_data() -> None:
    statement = build_profit_loss(
        [
            JournalEntry(id="1", date=None, account_code="4100",
                         credit="1000"),
            JournalEntry(id="2", date=None, account_code="5000",
                         debit="1250"),
        ],
        None,
        None,
    )

    data = app._profit_loss_chart_data(statement)

    by_section = {row["section"]: row for row in data}
    assert list(by_section) == [
        "Revenue",
        "Cost of Services",
        "Gross Profit",
        "Operating Expenses",
        "Operating Income",
        "Other Expenses",
        "Net Income",
    ]
    assert by_section["Revenue"]["amount"] == 1000.0
    assert by_section["Net Income"]["amount"] == -250.0
    assert by_section["Net Income"]["amount_label"] == "$-250.00"


def test_statement_rows_cover_every_line() -> None:
    profit_loss = build_profit_loss([], None, None)
    balance_sheet = build_balance_sheet([], None)

    pl_rows = app._profit_loss_rows(profit_loss)
    bs_rows = app._balance_sheet_rows(balance_sheet)

    assert pl_rows[-1] == {"Line": "Net Income", "Amount": "$0.00"}
    assert bs_rows[-1]["Line"] == "Total Liabilities & Equity"
    assert {row["Section"] for row in bs_rows} == {
        "Assets",
        "Liabilities",
        "Equity",
        "",
    }


def test_fetch_party_ledger_invokes_use_case(monkeypatch) -> None:
    calls = {}

    class _FakeUseCase:
        def execute(self, **kwargs):
            calls.update(kwargs)
            return "ledger"

    monkeypatch.setattr(app, "build_party_ledger_use_case", _FakeUseCase)

    result = app._fetch_party_ledger(LedgerView.PAYABLE, "GBP", True)

    assert result == "ledger"
    assert calls == {
        "view": LedgerView.PAYABLE,
        "display_currency": "GBP",
        "party_id": None,
        "include_settled": True,
    }


def test_render_party_ledger_filters_by_query(monkeypatch) -> None:
    fake_st = _FakeStreamlit()
    fake_st.text_query = "inv-2"
    ledger = _party_ledger(
        [
            _ledger_entry("1", date(2024, 1, 1), "75"),
            _ledger_entry("2", date(2024, 2, 1), "150"),
        ]
    )
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_party_ledger", lambda *args: ledger)

    app._render_party_ledger(LedgerView.RECEIVABLE, "USD", False)

    assert ("Receivable Balance", "$150.00", None) in fake_st.metrics
    [rows] = fake_st.dataframes
    assert [row["Reference"] for row in rows] == ["INV-2"]


def test_render_party_ledger_with_no_entries(monkeypatch) -> None:
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_party_ledger", lambda *args: _party_ledger([]))

    app._render_party_ledger(LedgerView.PAYABLE, "USD", False)

    assert fake_st.infos == ["No open documents."]
    assert fake_st.dataframes == []


@pytest.mark.parametrize(
    "page, renderer",
    [
        ("Receivables", "_render_party_ledger"),
        ("Payables", "_render_party_ledger"),
        ("General Ledger", "_render_general_ledger"),
        ("Profit & Loss", "_render_profit_loss"),
        ("Balance Sheet", "_render_balance_sheet"),
    ],
)
def test_main_routes_pages(monkeypatch, page, renderer) -> None:
    fake_st = _FakeStreamlit({"Page": page, "Currency": "EUR"})
    rendered = []
    usage = SimpleNamespace(info=lambda msg: rendered.append(("usage", msg)))
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "build_settings", lambda: LedgerSettings())
    monkeypatch.setattr(app, "get_usage_logger", lambda: usage)
    for name in (
        "_render_party_ledger",
        "_render_general_ledger",
        "_render_profit_loss",
        "_render_balance_sheet",
    ):
        monkeypatch.setattr(
            app,
            name,
            lambda *args, _name=name: rendered.append((_name, args)),
        )

    app.main()

    assert fake_st.title_text == "Freight Ledger"
    assert rendered[0] == ("usage", f"Page viewed: {page} (EUR)")
    assert rendered[1][0] == renderer
    assert "EUR" in rendered[1][1]


def test_party_options_list_each_party_once() -> None:
    first = _ledger_entry("1", date(2024, 1, 1), "75")
    second = _ledger_entry("2", date(2024, 2, 1), "150")

    options = app._party_options([first, second])

    assert options == {
        "All parties": None,
        "Acme Imports (c-1)": "c-1",
    }


def test_render_party_ledger_loads_selected_party(monkeypatch) -> None:
    fake_st = _FakeStreamlit({"Customer": "Acme Imports (c-1)"})
    full = _party_ledger([_ledger_entry("1", date(2024, 1, 1), "75")])
    single = _party_ledger([_ledger_entry("2", date(2024, 2, 1), "150")])
    loads = []

    def _load(*args):
        loads.append(args)
        return single if len(args) == 4 else full

    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_party_ledger", _load)

    app._render_party_ledger(LedgerView.RECEIVABLE, "USD", False)

    assert loads == [
        (LedgerView.RECEIVABLE, "USD", False),
        (LedgerView.RECEIVABLE, "USD", False, "c-1"),
    ]
    assert fake_st.selectbox_options["Customer"] == [
        "All parties",
        "Acme Imports (c-1)",
    ]
    [rows] = fake_st.dataframes
    assert [row["Reference"] for row in rows] == ["INV-2"]
