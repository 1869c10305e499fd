# frontend/dashboard.py (run with: streamlit run frontend/dashboard.py)
import datetime as dt

import httpx
import plotly.express as px
import streamlit as st

from frontend.api import ApiError, FinanceApiClient
from frontend.views import (
    CATEGORY_COLORS,
    CATEGORY_LABELS,
    budget_vs_actual,
    category_breakdown,
    filter_expenses,
    format_category_name,
    format_money,
    format_month_display,
    monthly_trend,
    overview_stats,
    paginate,
)

st.set_page_config(page_title="FinFit", layout="wide")

DELETE_PROMPT = "Are you sure you want to delete this expense?"


@st.cache_resource
def get_client() -> FinanceApiClient:
    return FinanceApiClient()


api = get_client()
current_month = dt.date.today().strftime("%Y-%m")

st.title("FinFit")
st.caption(format_month_display(current_month))

try:
    summary = api.get_summary(current_month)
    expenses = api.list_expenses()
except (ApiError, httpx.HTTPError) as e:
    st.error(f"Could not reach the API: {e}")
    st.stop()

# --- Overview ---
cols = st.columns(4)
for col, stat in zip(cols, overview_stats(summary)):
    col.metric(stat["label"], stat["value"], help=stat["caption"])

st.markdown("### Budget progress")
st.progress(min(summary["budgetPercentage"], 100) / 100)
st.write(
    f"{summary['budgetPercentage']}%: {format_money(summary['totalSpent'])} "
    f"of {format_money(summary['budgetAmount'])} spent"
)

# --- Sidebar forms ---
if "editing" not in st.session_state:
    st.session_state.editing = None
if "pending_delete" not in st.session_state:
    st.session_state.pending_delete = None

editing = st.session_state.editing
categories = list(CATEGORY_LABELS.keys())

with st.sidebar.form("expense_form", clear_on_submit=True):
    st.subheader("Edit expense" if editing else "Add expense")
    description = st.text_input("Description", value=editing["description"] if editing else "")
    amount = st.number_input(
        "Amount ($)", min_value=0.0, step=0.01, format="%.2f",
        value=float(editing["amount"]) if editing else 0.0,
    )
    category = st.selectbox(
        "Category", categories, format_func=format_category_name,
        index=categories.index(editing["category"]) if editing else 0,
    )
    day = st.date_input(
        "Date",
        value=dt.date.fromisoformat(editing["date"]) if editing else dt.date.today(),
    )
    notes = st.text_area("Notes", value=(editing or {}).get("notes") or "")
    if st.form_submit_button("Save expense"):
        data = {
            "description": description.strip(),
            "amount": f"{amount:.2f}",
            "category": category,
            "date": day.isoformat(),
            "notes": notes or None,
        }
        try:
            if editing:
                api.update_expense(editing["id"], data)
                st.toast("Expense updated successfully")
            else:
                api.create_expense(data)
                st.toast("Expense added successfully")
            st.session_state.editing = None
            st.rerun()
        except ApiError as e:
            st.error(e.message)

with st.sidebar.form("budget_form"):
    budget_month = st.text_input("Month (YYYY-MM)", value=current_month)
    try:
        existing = api.get_budget_for_month(budget_month) if budget_month else None
    except ApiError:
        existing = None
    st.subheader("Update Monthly Budget" if existing else "Set Monthly Budget")
    budget_amount = st.number_input(
        "Budget ($)", min_value=0.0, step=50.0, format="%.2f",
        value=float(existing["amount"]) if existing else 0.0,
    )
    if existing:
        st.caption("(This will update the existing budget)")
    if st.form_submit_button("Save budget"):
        try:
            api.save_budget(f"{budget_amount:.2f}", budget_month)
            st.toast("Budget updated successfully" if existing else "Budget created successfully")
            st.rerun()
        except ApiError as e:
            st.error(e.message)

# --- Expense table ---
st.markdown("## Expenses")
f1, f2 = st.columns(2)
category_filter = f1.selectbox(
    "Category", ["all"] + categories,
    format_func=lambda c: "All categories" if c == "all" else format_category_name(c),
)
use_day = f2.checkbox("Filter by date")
day_filter = f2.date_input("Day", value=dt.date.today()).isoformat() if use_day else None

filtered = filter_expenses(expenses, category_filter, day_filter)
if not filtered:
    st.info("No expenses found.")
else:
    page = st.number_input("Page", min_value=1, value=1, step=1)
    rows, total_pages = paginate(filtered, int(page))
    st.caption(f"Page {min(int(page), total_pages)} of {total_pages}")
    for e in rows:
        c1, c2, c3, c4, c5, c6 = st.columns([2, 4, 2, 2, 1, 1])
        c1.write(e["date"])
        c2.write(e["description"])
        c3.markdown(
            f"<span style='color:{CATEGORY_COLORS.get(e['category'], '#6B7280')}'>"
            f"{format_category_name(e['category'])}</span>",
            unsafe_allow_html=True,
        )
        c4.write(format_money(e["amount"]))
        if c5.button("Edit", key=f"edit-{e['id']}"):
            st.session_state.editing = e
            st.rerun()
        if c6.button("Delete", key=f"delete-{e['id']}"):
            st.session_state.pending_delete = e["id"]
            st.rerun()
        if st.session_state.pending_delete == e["id"]:
            st.warning(DELETE_PROMPT)
            yes, no, _ = st.columns([1, 1, 6])
            if yes.button("Delete", key=f"confirm-delete-{e['id']}", type="primary"):
                st.session_state.pending_delete = None
                try:
                    api.delete_expense(e["id"])
                    st.toast("Expense deleted successfully")
                except ApiError as err:
                    st.error(err.message)
                st.rerun()
            if no.button("Cancel", key=f"cancel-delete-{e['id']}"):
                st.session_state.pending_delete = None
                st.rerun()

# --- Analytics ---
st.markdown("## Analytics")
a1, a2 = st.columns(2)

breakdown = category_breakdown(summary)
if breakdown.empty:
    a1.info("No spending recorded this month.")
else:
    fig_cat = px.pie(
        breakdown, names="label", values="total", hole=0.5,
        color="category", color_discrete_map=CATEGORY_COLORS,
    )
    fig_cat.update_traces(textposition="inside", textinfo="percent+label")
    a1.plotly_chart(fig_cat, use_container_width=True)

trend = monthly_trend(expenses, current_month)
fig_trend = px.area(trend, x="label", y="total", markers=True, labels={"total": "Spending ($)", "label": "Month"})
a2.plotly_chart(fig_trend, use_container_width=True)

st.markdown("### Budget vs Actual Spending")
comparison = budget_vs_actual(summary, expenses, current_month)
fig_budget = px.bar(
    comparison, x="label", y=["budget", "actual"], barmode="group",
    color_discrete_map={"budget": "#E5E7EB", "actual": "#10B981"},
    labels={"value": "Amount ($)", "label": "Month", "variable": ""},
)
st.plotly_chart(fig_budget, use_container_width=True)
