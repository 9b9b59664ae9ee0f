import argparse
import os
import sys
from pathlib import Path
from typing import Any, Literal

if __package__ in (None, ""):
    sys.path.append(str(Path(__file__).resolve().parent.parent))

from rich.console import Console
from rich.table import Table

from spendshare.config import get_settings
from spendshare.core.comparison import get_comparison
from spendshare.core.errors import SpendShareError
from spendshare.core.formatting import (
    format_currency,
    format_large_number,
    format_proportion,
)
from spendshare.core.liability import TaxLiability, liability_from_declared_tax, liability_from_income
from spendshare.core.share import ShareResult, calculate_share
from spendshare.core.tables import ReferenceData, get_reference_data
from spendshare.wizard import (
    clear_session,
    load_session,
    parse_number,
    parse_spending_billions,
    save_session,
    session_path,
)

ColorPreference = Literal["auto", "always", "never"]


def _resolve_color_preference(pref: ColorPreference) -> ColorPreference:
    if pref == "auto" and os.getenv("NO_COLOR"):
        return "never"
    return pref


def _get_console(pref: ColorPreference) -> Console:
    resolved = _resolve_color_preference(pref)
    if resolved == "never":
        return Console(no_color=True, highlight=False)
    return Console(force_terminal=resolved == "always" or None)


def _build_table(title: str, columns: list[str]) -> Table:
    table = Table(title=title, expand=False)
    for column in columns:
        table.add_column(column)
    return table


def _fail(console: Console, message: str) -> None:
    console.print(f"ERROR: {message}", markup=False)
    sys.exit(1)


def _resolve_liability(args: argparse.Namespace, session: dict[str, Any], ref: ReferenceData) -> TaxLiability:
    status = args.filing_status or session.get("filing_status") or get_settings().default_filing_status
    if args.tax is not None:
        return liability_from_declared_tax(parse_number(args.tax), status, ref)
    if args.income is not None:
        return liability_from_income(parse_number(args.income), status, ref)
    if session.get("input_mode") == "tax" and session.get("direct_tax") is not None:
        return liability_from_declared_tax(session["direct_tax"], status, ref)
    if session.get("income") is not None:
        return liability_from_income(session["income"], status, ref)
    raise ValueError("No income given. Pass --income or --tax (or run `spendshare tax <income>` first).")


def _remember(args: argparse.Namespace, liability: TaxLiability, console: Console) -> None:
    if args.no_save:
        return
    data: dict[str, Any] = {
        "input_mode": liability.input_mode,
        "filing_status": liability.filing_status,
    }
    if liability.input_mode == "tax":
        data["direct_tax"] = liability.income_tax
    else:
        data["income"] = liability.gross_income
        data["direct_tax"] = None
    save_session(data)
    console.print(f"[dim]Saved your answers to {session_path()}[/dim]")


def _print_liability(liability: TaxLiability, console: Console) -> None:
    table = _build_table("Your federal taxes", ["Metric", "Value"])
    if liability.input_mode == "tax":
        table.add_row("Declared income tax", format_currency(liability.income_tax))
        table.add_row("Estimated income", format_currency(liability.gross_income, show_cents=False))
    else:
        table.add_row("Gross income", format_currency(liability.gross_income, show_cents=False))
        table.add_row("Federal income tax", format_currency(liability.income_tax))
    table.add_row("Social Security", format_currency(liability.fica.social_security))
    table.add_row("Medicare", format_currency(liability.fica.medicare))
    table.add_row("Total payroll tax", format_currency(liability.fica_tax))
    rate = liability.effective_rate
    if rate is not None and liability.input_mode == "income":
        table.add_row("Effective income tax rate", f"{rate * 100:.1f}%")
    table.add_row("Filing status", liability.filing_status)
    console.print(table)


def _print_share(result: ShareResult, comparison: str, multi_year: bool, console: Console) -> None:
    console.print(
        f"\nOf {format_large_number(result.spending_amount)} in {result.category.lower()} spending, "
        f"you paid [bold]{format_currency(result.your_share)}[/bold]."
    )
    if comparison:
        console.print(comparison)
    breakdown = result.breakdown
    table = _build_table("The math", ["Step", "Value"])
    table.add_row("Tax type", breakdown.tax_type)
    table.add_row("Your tax", format_currency(breakdown.your_tax))
    if breakdown.total_revenue is not None:
        table.add_row("Total revenue", format_large_number(breakdown.total_revenue))
    if breakdown.income_contribution is not None:
        table.add_row("Income tax portion", format_currency(breakdown.income_contribution))
    if breakdown.fica_contribution is not None:
        table.add_row("Payroll tax portion", format_currency(breakdown.fica_contribution))
    table.add_row("Your proportion", format_proportion(breakdown.proportion))
    table.add_row("Your share", format_currency(result.your_share))
    console.print(table)
    if result.exceeds_budget:
        console.print(
            f"Note: this is more than the entire {result.category} budget "
            f"({format_large_number(result.budget_pool)})."
        )
    if multi_year:
        console.print("Note: this cost was spread over several years; it is shown as a single amount.")
    console.print(f"[dim]{result.deficit_note}[/dim]")


def _cmd_tax(args: argparse.Namespace, console: Console, ref: ReferenceData) -> None:
    session, _ = load_session()
    if args.subargs and args.income is None and args.tax is None:
        args.income = args.subargs[0]
    liability = _resolve_liability(args, session, ref)
    _print_liability(liability, console)
    _remember(args, liability, console)


def _cmd_share(args: argparse.Namespace, console: Console, ref: ReferenceData) -> None:
    if not args.subargs:
        raise ValueError("Provide a spending amount, e.g. `spendshare share 13.3b --category defense`.")
    raw = args.subargs[0]
    category = args.category
    item = next((n for n in ref.notable_spending if n.key == raw), None)
    if item is not None:
        spending, multi_year = item.value, item.multi_year
        category = category or item.category
    else:
        spending = parse_spending_billions(raw) if args.billions else parse_number(raw)
        multi_year = False
    if not category:
        raise ValueError("Choose a category with --category (see `spendshare categories`).")
    session, _ = load_session()
    liability = _resolve_liability(args, session, ref)
    result = calculate_share(liability.income_tax, liability.fica_tax, spending, category, ref)
    comparison = get_comparison(result.your_share, liability.annual_tax, ref)
    _print_share(result, comparison, multi_year, console)
    _remember(args, liability, console)


def _cmd_categories(console: Console, ref: ReferenceData) -> None:
    table = _build_table(f"Funding categories (FY{ref.year})", ["Key", "Name", "Funded by", "Budget"])
    for category in ref.categories.values():
        table.add_row(category.key, category.name, category.tax_source, format_large_number(category.budget_pool))
    console.print(table)


def _cmd_notable(console: Console, ref: ReferenceData) -> None:
    table = _build_table("Notable spending", ["Key", "Label", "Amount", "Category", "Notes"])
    for item in ref.notable_spending:
        flags = []
        if item.multi_year:
            flags.append("multi-year")
        if item.is_savings:
            flags.append("savings")
        label = item.label + (f" ({', '.join(flags)})" if flags else "")
        table.add_row(item.key, label, format_large_number(item.value), item.category, item.notes)
    console.print(table)


def _cmd_session(args: argparse.Namespace, console: Console) -> None:
    action = args.subargs[0].lower() if args.subargs else "show"
    if action == "clear":
        removed = clear_session()
        console.print("Cleared saved answers." if removed else "No saved answers to clear.")
        return
    if action != "show":
        raise ValueError(f"Unknown session action {action!r}; use show or clear.")
    data, errors = load_session()
    for message in errors:
        console.print(f"NOTE: {message}", markup=False)
    if not data:
        console.print("No saved answers yet.")
        return
    table = _build_table("Saved answers", ["field", "value"])
    for key, value in data.items():
        table.add_row(key, str(value))
    console.print(table)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="spendshare",
        description="How much of a federal spending figure did your taxes pay for?",
    )
    parser.add_argument(
        "command",
        choices=["tax", "share", "categories", "notable", "session"],
        help="Action to perform.",
    )
    parser.add_argument("subargs", nargs="*", help="Additional arguments for the chosen command.")
    parser.add_argument("--income", help="Annual gross income, e.g. 75000 or 75k.")
    parser.add_argument("--tax", help="Federal income tax you paid, instead of income.")
    parser.add_argument("--filing-status", help="single or married.")
    parser.add_argument("--category", help="Funding category key, e.g. defense.")
    parser.add_argument("--billions", action="store_true", help="Read the spending amount as billions.")
    parser.add_argument("--data-year", type=int, help="Reference data year (default from settings).")
    parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Color output preference (default: auto).",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_const",
        const="never",
        help="Alias for --color never.",
    )
    parser.add_argument("--no-save", action="store_true", help="Do not remember income and filing status.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    console = _get_console(args.color)
    try:
        ref = get_reference_data(args.data_year or get_settings().data_year)
        if args.command == "tax":
            _cmd_tax(args, console, ref)
        elif args.command == "share":
            _cmd_share(args, console, ref)
        elif args.command == "categories":
            _cmd_categories(console, ref)
        elif args.command == "notable":
            _cmd_notable(console, ref)
        else:
            _cmd_session(args, console)
    except (SpendShareError, ValueError) as exc:
        _fail(console, str(exc))


if __name__ == "__main__":
    main()
