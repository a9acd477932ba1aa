"""Sub-category treemap presentation logic for the Streamlit UI.

This module contains pure, testable transformations from the
``SubCategoryBreakdown`` list produced by ``GetExpenseChartsUseCase`` to a
treemap model and Plotly figure. Loading the breakdown stays in the UI.

The treemap has two levels:
    category -> sub-category
under a single root node holding the overall expense total.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

from farm_ledger.domain.models import SubCategoryBreakdown

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


ROOT_ID = "root"
ROOT_LABEL = "All expenses"


@dataclass
class TreemapModel:
    """Flat node lists ready for ``go.Treemap``.

    Attributes:
        ids: Unique node ids.
        labels: Display labels.
        parents: Parent id per node, empty for the root.
        values: Node amounts; parents carry the sum of their children.
        counts: Record counts per node.
    """

    ids: list[str] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)
    parents: list[str] = field(default_factory=list)
    values: list[float] = field(default_factory=list)
    counts: list[int] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Return True when only the root (or nothing) is present."""
        return len(self.ids) <= 1

    def _add(
        self,
        node_id: str,
        label: str,
        parent: str,
        value: Decimal,
        count: int,
    ) -> None:
        self.ids.append(node_id)
        self.labels.append(label)
        self.parents.append(parent)
        self.values.append(float(value))
        self.counts.append(count)


def build_treemap_model(
    breakdowns: list[SubCategoryBreakdown],
    max_sub_categories: int | None = None,
) -> TreemapModel:
    """Build a treemap model from sub-category breakdowns.

    Args:
        breakdowns: Breakdown per category, as returned by the use case.
        max_sub_categories: Optional cap per category; remaining
            sub-categories are merged into an ``Other`` child.

    Returns:
        TreemapModel with one root, one node per category and one per
        sub-category.
    """
    model = TreemapModel()
    non_empty = [item for item in breakdowns if item.sub_categories]
    if not non_empty:
        return model

    grand_total = sum(
        (item.total for item in non_empty),
        start=Decimal("0"),
    )
    grand_count = sum(
        sub.count for item in non_empty for sub in item.sub_categories
    )
    model._add(ROOT_ID, ROOT_LABEL, "", grand_total, grand_count)

    for breakdown in non_empty:
        category_id = f"{ROOT_ID}/{breakdown.category}"
        model._add(
            category_id,
            breakdown.category,
            ROOT_ID,
            breakdown.total,
            sum(sub.count for sub in breakdown.sub_categories),
        )
        kept = breakdown.sub_categories
        merged = []
        if max_sub_categories is not None and max_sub_categories >= 0:
            kept = breakdown.sub_categories[:max_sub_categories]
            merged = breakdown.sub_categories[max_sub_categories:]
        for sub in kept:
            model._add(
                f"{category_id}/{sub.sub_category}",
                sub.sub_category,
                category_id,
                sub.amount,
                sub.count,
            )
        if merged:
            model._add(
                f"{category_id}/~other",
                "Other",
                category_id,
                sum((sub.amount for sub in merged), start=Decimal("0")),
                sum(sub.count for sub in merged),
            )
    return model


def build_plotly_figure(model: TreemapModel) -> "go.Figure":
    """Build a Plotly treemap figure from a treemap model.

    Args:
        model: Treemap model built by ``build_treemap_model``.

    Returns:
        Plotly figure ready to be displayed in Streamlit.
    """
    import plotly.graph_objects as go

    fig = go.Figure(
        data=[
            go.Treemap(
                ids=model.ids,
                labels=model.labels,
                parents=model.parents,
                values=model.values,
                customdata=model.counts,
                branchvalues="total",
                hovertemplate=(
                    "<b>%{label}</b><br>"
                    "Amount: ₹%{value:,.2f}<br>"
                    "Transactions: %{customdata}<extra></extra>"
                ),
                textinfo="label+percent parent",
            )
        ]
    )
    fig.update_layout(
        margin=dict(l=8, r=8, t=8, b=8),
        height=520,
    )
    return fig


__all__ = [
    "TreemapModel",
    "build_treemap_model",
    "build_plotly_figure",
]
