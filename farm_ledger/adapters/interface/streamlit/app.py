"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import streamlit as st
import altair as alt

from farm_ledger.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from farm_ledger.application.use_cases.export_transactions import (
    ExportTransactionsUseCase,
)
from farm_ledger.application.use_cases.get_expense_charts import (
    GetExpenseChartsUseCase,
)
from farm_ledger.application.use_cases.get_transactions import (
    GetTransactionsUseCase,
)
from farm_ledger.application.use_cases.import_transactions import (
    ImportTransactionsUseCase,
)
from farm_ledger.application.use_cases.manage_transactions import (
    ManageTransactionsUseCase,
)
from farm_ledger.domain.constants import (
    ASCENDING,
    DESCENDING,
    EXPENSE,
    EXPORT_COLUMNS,
    INCOME,
    PAGE_SIZE_OPTIONS,
    TRANSACTION_KINDS,
)
from farm_ledger.domain.errors import LedgerError
from farm_ledger.domain.models import (
    CategoryAggregate,
    MonthlyAggregate,
    TransactionFilters,
    TransactionRecord,
)
from farm_ledger.domain.services.aggregation import parse_iso_date
from farm_ledger.domain.services.filters import distinct_values
from farm_ledger.domain.services.pagination import PaginationState
from farm_ledger.domain.services.sorting import toggle_sort
from farm_ledger.domain.services.validation import filter_valid_records
from farm_ledger.infrastructure.container import build_transactions_repository
from farm_ledger.infrastructure.settings import LedgerSettings
from farm_ledger.adapters.interface.streamlit.sub_category_treemap import (
    build_plotly_figure,
    build_treemap_model,
)

ALL_OPTION = "All"
PAGINATION_KEY = "pagination"
SORT_KEY = "sort"
COLUMN_LABELS = dict(EXPORT_COLUMNS)
FIELD_BY_LABEL = {label: field for field, label in EXPORT_COLUMNS}


@st.cache_resource(show_spinner=False)
def _load_settings() -> LedgerSettings:
    """Cached settings for the Streamlit process."""
    return LedgerSettings.from_env()


@st.cache_resource(show_spinner=False)
def _load_repository() -> TransactionsRepositoryPort:
    """Cached record source shared by every Streamlit session."""
    return build_transactions_repository(_load_settings())


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that the numpy and pandas installs are usable by Altair.

    Returns:
        Tuple with a success flag and an error message when unusable.
    """
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Chart dependencies are missing: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "numpy is installed but incomplete (no ndarray)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas is installed but incomplete (no Timestamp)."
    return True, None


def _format_currency(value: Decimal) -> str:
    """Format rupee amounts for display."""
    sign = "-" if value < 0 else ""
    return f"{sign}₹{abs(value):,.2f}"


def _option_or_none(value: str) -> str | None:
    """Map the ``All`` choice of a select box to no filter."""
    return None if value == ALL_OPTION else value


def _build_filters(
    search: str,
    kind: str,
    category: str,
    payer: str,
    source: str,
    date_range: Sequence[date] | None,
) -> TransactionFilters:
    """Turn the sidebar widget values into transaction filters."""
    date_from = date_to = None
    if date_range:
        date_from = date_range[0].isoformat()
        date_to = date_range[-1].isoformat()
    return TransactionFilters(
        search=search.strip() or None,
        kind=_option_or_none(kind),
        category=_option_or_none(category),
        payer=_option_or_none(payer),
        source=_option_or_none(source),
        date_from=date_from,
        date_to=date_to,
    )


def _render_filters(
    repository: TransactionsRepositoryPort,
) -> TransactionFilters:
    """Render the sidebar filters and return the active selection."""
    records = filter_valid_records(repository.fetch_transactions())
    st.sidebar.subheader("Filters")
    search = st.sidebar.text_input(
        "Search", placeholder="Description or notes"
    )
    kind = st.sidebar.selectbox(
        "Type", [ALL_OPTION, *TRANSACTION_KINDS], index=0
    )
    category = st.sidebar.selectbox(
        "Category", [ALL_OPTION, *distinct_values(records, "category")]
    )
    payer = st.sidebar.selectbox(
        "Paid by", [ALL_OPTION, *distinct_values(records, "payer")]
    )
    source = st.sidebar.selectbox(
        "Source", [ALL_OPTION, *distinct_values(records, "source")]
    )
    use_dates = st.sidebar.checkbox("Filter by date")
    date_range = None
    if use_dates:
        today = date.today()
        date_range = st.sidebar.date_input(
            "Date range",
            value=(date(today.year, 1, 1), today),
        )
    return _build_filters(search, kind, category, payer, source, date_range)


def _next_sort_state(
    current: tuple[str, str],
    chosen_label: str,
    flip: bool,
) -> tuple[str, str]:
    """Return the sort state after a column choice or a flip request."""
    field, direction = current
    chosen_field = FIELD_BY_LABEL[chosen_label]
    if chosen_field != field or flip:
        return toggle_sort(field, direction, chosen_field)
    return current


def _records_to_rows(
    records: Sequence[TransactionRecord],
) -> list[dict[str, str]]:
    """Return display rows keyed by the export column headers."""
    rows = []
    for record in records:
        row = {}
        for field, label in EXPORT_COLUMNS:
            value = getattr(record, field)
            if field == "amount":
                value = _format_currency(value)
            row[label] = value
        rows.append(row)
    return rows


def _render_summary(repository, filters: TransactionFilters) -> None:
    """Render the income, expense and balance metrics."""
    view = GetTransactionsUseCase(repository).execute(filters=filters)
    summary = view.summary
    income_col, expense_col, balance_col, count_col = st.columns(4)
    income_col.metric("Income", _format_currency(summary.income_total))
    expense_col.metric("Expenses", _format_currency(summary.expense_total))
    balance_col.metric("Balance", _format_currency(summary.balance))
    count_col.metric("Transactions", summary.transaction_count)


def _render_transactions(
    repository: TransactionsRepositoryPort,
    filters: TransactionFilters,
    default_page_size: int,
) -> None:
    """Render the sortable, paginated transactions table."""
    state: PaginationState = st.session_state.setdefault(
        PAGINATION_KEY, PaginationState(page_size=default_page_size)
    )
    sort_state = st.session_state.setdefault(SORT_KEY, ("date", DESCENDING))

    sort_col, flip_col, size_col = st.columns([3, 1, 2])
    labels = list(FIELD_BY_LABEL)
    chosen = sort_col.selectbox(
        "Sort by",
        labels,
        index=labels.index(COLUMN_LABELS[sort_state[0]]),
    )
    arrow = "↑" if sort_state[1] == ASCENDING else "↓"
    flip = flip_col.button(f"Order {arrow}")
    sort_state = _next_sort_state(sort_state, chosen, flip)
    st.session_state[SORT_KEY] = sort_state

    options = list(PAGE_SIZE_OPTIONS)
    if state.page_size not in options:
        options = sorted({*options, state.page_size})
    page_size = size_col.selectbox(
        "Rows per page",
        options,
        index=options.index(state.page_size),
    )
    if page_size != state.page_size:
        state = state.change_page_size(page_size)

    view = GetTransactionsUseCase(repository).execute(
        filters=filters,
        sort_field=sort_state[0],
        direction=sort_state[1],
        page_size=state.page_size,
        page=state.page,
    )
    page = view.page
    state = state.resolve(page.total)

    if view.dropped_count:
        st.caption(f"{view.dropped_count} malformed records hidden")
    if not page.items:
        st.info("No transactions match the current filters.")
    else:
        st.dataframe(
            _records_to_rows(page.items),
            width="stretch",
            hide_index=True,
        )

    prev_col, info_col, next_col = st.columns([1, 3, 1])
    if prev_col.button("Previous", disabled=not page.has_previous_page):
        state = state.previous_page(page.total)
        st.session_state[PAGINATION_KEY] = state
        st.rerun()
    info_col.caption(
        f"Page {page.page} of {max(page.total_pages, 1)} "
        f"({page.total} transactions)"
    )
    if next_col.button("Next", disabled=not page.has_next_page):
        state = state.next_page(page.total)
        st.session_state[PAGINATION_KEY] = state
        st.rerun()
    st.session_state[PAGINATION_KEY] = state


def _record_label(record: TransactionRecord) -> str:
    """Return a select-box label that stays unique per record id."""
    return (
        f"{record.date} · {record.description} · "
        f"{_format_currency(record.amount)} (#{record.id})"
    )


def _render_transaction_form(
    form_key: str,
    record: TransactionRecord | None,
    submit_label: str,
) -> TransactionRecord | None:
    """Render a transaction form pre-filled from ``record``.

    Returns:
        The edited record when the form was submitted, otherwise None. The
        id is kept from ``record`` and left blank for new transactions.
    """
    kinds = list(TRANSACTION_KINDS)
    current_date = date.today()
    if record is not None:
        current_date = parse_iso_date(record.date) or current_date
    with st.form(form_key, clear_on_submit=record is None):
        entry_date = st.date_input("Date", value=current_date)
        kind = st.selectbox(
            "Type",
            kinds,
            index=kinds.index(record.kind)
            if record is not None and record.kind in kinds
            else kinds.index(EXPENSE),
        )
        description = st.text_input(
            "Description", value=record.description if record else ""
        )
        amount = st.number_input(
            "Amount",
            min_value=0.0,
            step=100.0,
            value=float(record.amount) if record else 0.0,
        )
        payer = st.text_input("Paid by", value=record.payer if record else "")
        category = st.text_input(
            "Category", value=record.category if record else ""
        )
        sub_category = st.text_input(
            "Sub-category", value=record.sub_category if record else ""
        )
        source = st.text_input("Source", value=record.source if record else "")
        notes = st.text_area("Notes", value=record.notes if record else "")
        if not st.form_submit_button(submit_label):
            return None
    return TransactionRecord(
        id=record.id if record is not None else "",
        date=entry_date.isoformat(),
        kind=kind,
        description=description,
        amount=Decimal(str(amount)),
        payer=payer,
        category=category,
        sub_category=sub_category,
        source=source,
        notes=notes,
    )


def _render_manage(repository: TransactionsRepositoryPort) -> None:
    """Render the add, edit and delete forms."""
    manager = ManageTransactionsUseCase(repository)
    with st.expander("Add transaction"):
        new_record = _render_transaction_form("add_transaction", None, "Save")
        if new_record is not None:
            try:
                manager.add(new_record)
            except LedgerError as exc:
                st.error(str(exc))
            else:
                st.success("Transaction saved.")

    records = filter_valid_records(repository.fetch_transactions())
    by_id = {record.id: record for record in records}

    with st.expander("Edit transaction"):
        if not by_id:
            st.info("No transactions to edit.")
        else:
            selected_id = st.selectbox(
                "Transaction",
                list(by_id),
                format_func=lambda tid: _record_label(by_id[tid]),
                key="edit_transaction_id",
            )
            edited = _render_transaction_form(
                f"edit_transaction_{selected_id}",
                by_id[selected_id],
                "Update",
            )
            if edited is not None:
                try:
                    manager.update(edited)
                except LedgerError as exc:
                    st.error(str(exc))
                else:
                    st.success("Transaction updated.")

    with st.expander("Delete transactions"):
        selected = st.multiselect(
            "Transactions",
            list(by_id),
            format_func=lambda tid: _record_label(by_id[tid]),
        )
        if st.button("Delete selected", disabled=not selected):
            try:
                deleted = manager.bulk_delete(list(selected))
            except LedgerError as exc:
                st.error(str(exc))
            else:
                st.success(f"Deleted {deleted} transactions.")


def _prepare_donut_chart_data(
    categories: Sequence[CategoryAggregate],
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data from already grouped category totals.

    Args:
        categories: Top categories including the merged ``Other`` slice.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    total_amount = sum(
        (item.amount for item in categories),
        start=Decimal("0"),
    )
    data: list[dict[str, str | float]] = []
    for item in categories:
        share = (
            (item.amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": item.category,
                "amount": float(item.amount),
                "amount_label": _format_currency(item.amount),
                "share_label": f"{share:.1f}%",
                "count": item.count,
            }
        )
    return data, total_amount


def _prepare_monthly_chart_data(
    monthly: Sequence[MonthlyAggregate],
) -> list[dict[str, str | float]]:
    """Flatten monthly totals into one row per month and kind."""
    data: list[dict[str, str | float]] = []
    for index, item in enumerate(monthly):
        for kind, amount in (
            (INCOME, item.income_total),
            (EXPENSE, item.expense_total),
        ):
            data.append(
                {
                    "month": item.month_label,
                    "order": index,
                    "kind": kind,
                    "amount": float(amount),
                    "amount_label": _format_currency(amount),
                }
            )
    return data


def _render_category_chart(
    categories: Sequence[CategoryAggregate],
    chart_size: int = 360,
) -> None:
    """Render a donut chart of expenses by category."""
    st.subheader("Expenses by Category")
    if not categories:
        st.info("No expense data available for the chart.")
        return
    data, _ = _prepare_donut_chart_data(categories)
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            legend=alt.Legend(orient="bottom", title=None, columns=3),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
            alt.Tooltip("count:Q"),
        ],
    )
    hover_text = alt.Chart(alt.Data(values=data)).transform_filter(
        hover
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=16,
        fontWeight="bold",
    ).encode(text="amount_label:N")
    chart = alt.layer(base, hover_text).add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    ).configure_view(stroke=None)
    st.altair_chart(chart, width="stretch")


def _render_monthly_chart(monthly: Sequence[MonthlyAggregate]) -> None:
    """Render grouped monthly income and expense bars."""
    st.subheader("Monthly Trend")
    if not monthly:
        st.info("No transactions in the last twelve months.")
        return
    data = _prepare_monthly_chart_data(monthly)
    chart = alt.Chart(alt.Data(values=data)).mark_bar().encode(
        x=alt.X(
            "month:N",
            sort=alt.SortField("order"),
            title=None,
        ),
        xOffset="kind:N",
        y=alt.Y("amount:Q", title="Amount (₹)"),
        color=alt.Color(
            "kind:N",
            scale=alt.Scale(
                domain=[INCOME, EXPENSE],
                range=["#2e7d32", "#e76f51"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("month:N"),
            alt.Tooltip("kind:N"),
            alt.Tooltip("amount_label:N"),
        ],
    ).properties(height=360)
    st.altair_chart(chart, width="stretch")


def _render_charts(
    repository: TransactionsRepositoryPort,
    filters: TransactionFilters,
) -> None:
    """Render the expense charts page."""
    ok, message = _check_altair_dependencies()
    if not ok:
        st.error(message)
        return
    charts = GetExpenseChartsUseCase(repository).execute(filters=filters)
    left, right = st.columns(2)
    with left:
        _render_category_chart(charts.top_categories)
    with right:
        _render_monthly_chart(charts.monthly)

    st.subheader("Sub-category Breakdown")
    model = build_treemap_model(charts.sub_categories)
    if model.is_empty:
        st.info("No categorised expenses to break down.")
        return
    st.plotly_chart(build_plotly_figure(model), width="stretch")


def _render_import_export(
    repository: TransactionsRepositoryPort,
    filters: TransactionFilters,
) -> None:
    """Render file import and export controls."""
    st.subheader("Import")
    uploaded = st.file_uploader(
        "CSV or Excel file", type=["csv", "xlsx", "xls"]
    )
    if uploaded is not None and st.button("Import transactions"):
        try:
            result = ImportTransactionsUseCase(repository).execute(
                uploaded.name,
                uploaded.getvalue(),
            )
        except LedgerError as exc:
            st.error(str(exc))
        else:
            st.success(
                f"Imported {result.imported_count} transactions "
                f"from {result.filename}."
            )

    st.subheader("Export")
    file_format = st.selectbox("Format", ["csv", "xlsx", "json"])
    export = ExportTransactionsUseCase(repository).execute(
        file_format=file_format,
        filters=filters,
    )
    st.caption(f"{export.record_count} transactions will be exported")
    st.download_button(
        "Download",
        data=export.content,
        file_name=export.filename,
        mime=export.media_type,
    )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Farm Ledger", layout="wide")
    st.title("Farm Ledger")

    settings = _load_settings()
    repository = _load_repository()
    page = st.sidebar.selectbox(
        "Page", ["Transactions", "Charts", "Import / Export"]
    )
    filters = _render_filters(repository)

    if page == "Transactions":
        _render_summary(repository, filters)
        _render_transactions(repository, filters, settings.default_page_size)
        _render_manage(repository)
    elif page == "Charts":
        _render_charts(repository, filters)
    else:
        _render_import_export(repository, filters)


if __name__ == "__main__":  # pragma: no cover
    main()
