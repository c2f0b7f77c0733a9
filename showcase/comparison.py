"""Two-product comparison summaries."""

from showcase.schemas import Product

SELECT_TWO_PROMPT = "Select two products to compare."
IDENTICAL_MESSAGE = "Products are identical."


def stock_label(in_stock: bool) -> str:
    """Render an availability flag for display."""
    return "In stock" if in_stock else "Out of stock"


def compare_products(
    a: Product | None,
    b: Product | None,
    currency: str = "RON",
) -> str:
    """Summarize how two products differ.

    Emits one line per differing attribute in the order title, category,
    price, stock. Equal attributes are omitted.

    Args:
        a: First selection, or None if nothing is selected.
        b: Second selection, or None if nothing is selected.
        currency: Label printed after prices.

    Returns:
        The difference summary, SELECT_TWO_PROMPT when a selection is
        missing, or IDENTICAL_MESSAGE when nothing differs.
    """
    if a is None or b is None:
        return SELECT_TWO_PROMPT

    lines = []
    if a.title != b.title:
        lines.append(f'Title: "{a.title}" vs "{b.title}"')
    if a.category != b.category:
        lines.append(f"Category: {a.category.value} vs {b.category.value}")
    if a.price != b.price:
        lines.append(f"Price: {a.price} {currency} vs {b.price} {currency}")
    if a.in_stock != b.in_stock:
        lines.append(
            f"Stock: {stock_label(a.in_stock)} vs {stock_label(b.in_stock)}"
        )

    if not lines:
        return IDENTICAL_MESSAGE
    return "".join(f"{line}\n" for line in lines)
