# cli.py — interactive storefront console with autocomplete
import json
import os
import sys
from datetime import datetime
from typing import List, Dict, Any, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.pystore import StoreClient

console = Console()
c = StoreClient(base_url=os.getenv("STOREFRONT_URL", "http://127.0.0.1:8080"))


# Global state for status messages and caching
status_message = "Ready"
product_cache: List[Dict[str, Any]] = []

# Custom prompt style for prompt_toolkit
custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]]):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title="📦 Products Catalog",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=12)
    table.add_column("Name", style="bold", width=28)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Category", width=18)

    for p in products:
        price = p.get("price")
        table.add_row(
            str(p.get("id", "N/A")),
            str(p.get("name", "N/A")),
            f"{price}" if price is not None else "-",
            str(p.get("category") or "Uncategorized")
        )
    console.print(table)


def show_categories(categories: List[Dict[str, Any]]):
    if not categories:
        console.print("[italic yellow]No categories found[/italic yellow]")
        return

    table = Table(title="🏷️ Categories", box=box.ROUNDED, header_style="bold cyan")
    table.add_column("Slug", style="dim", width=24)
    table.add_column("Name", style="bold", width=28)
    for cat in categories:
        table.add_row(cat.get("id") or "[dim](empty)[/dim]", str(cat.get("name")))
    console.print(table)


def show_orders(orders: List[Dict[str, Any]]):
    if not orders:
        console.print("[italic yellow]No orders found[/italic yellow]")
        return

    table = Table(
        title="📋 Orders",
        box=box.ROUNDED,
        header_style="bold yellow",
        title_style="bold yellow",
        show_lines=True
    )
    table.add_column("Order ID", style="dim", width=20)
    table.add_column("Created", width=24)
    table.add_column("Status", width=12)
    table.add_column("Total", justify="right", width=10)
    table.add_column("Items", justify="right", width=6)

    for order in orders:
        status_style = "yellow" if order.get("status") == "processing" else "green"
        items = order.get("items")
        table.add_row(
            str(order.get("id", "N/A")),
            str(order.get("createdAt", "-")),
            f"[{status_style}]{order.get('status', 'N/A')}[/{status_style}]",
            str(order.get("total", "-")),
            str(len(items)) if isinstance(items, list) else "-"
        )
    console.print(table)


def show_statistics(stats: Dict[str, Any]):
    console.print(
        Panel.fit(
            f"📦 Products: [bold]{stats.get('totalProducts', 0)}[/bold]\n"
            f"📋 Orders: [bold]{stats.get('totalOrders', 0)}[/bold]\n"
            f"⏳ Processing: [bold]{stats.get('pendingOrders', 0)}[/bold]\n"
            f"💰 Sales: [green]{stats.get('totalSales', 0)}[/green]",
            title="📈 Statistics",
            border_style="green"
        )
    )


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper with enhanced exception handling
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs). Shows a spinner while calling.
    Catches exceptions and updates status_message.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
            console.print(show_status(success_msg, True))
        return result
    except Exception as e:
        status_message = f"Error: {e}"
        console.print(show_status(f"Error: {e}", False))
        return None


# ---------------------------
# Autocompletion helpers
# ---------------------------
def get_product_completer():
    global product_cache
    if not product_cache:
        product_cache = try_api(c.list_products) or []

    ids = [str(p.get("id", "")) for p in product_cache]
    return WordCompleter([i for i in ids if i], ignore_case=True)


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Storefront",
        "[bold blue]Catalog & Orders Console[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_items() -> List[Dict[str, Any]]:
    """Collect order lines until the user enters an empty product id."""
    items: List[Dict[str, Any]] = []
    while True:
        pid = prompt_with_autocomplete(
            "Product ID (empty to finish)", completer=get_product_completer()
        ).strip()
        if not pid:
            return items
        raw_qty = Prompt.ask("Quantity", default="1")
        try:
            qty = int(raw_qty)
        except ValueError:
            console.print("[red]Please enter a whole number.[/red]")
            continue
        items.append({"id": pid, "qty": qty})


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message, product_cache

    console.clear()
    console.print(create_header())

    # Preload products for autocomplete
    product_cache = try_api(c.list_products) or []

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 List products", "5", "📋 List orders"),
            ("2", "ℹ️ Get product by ID", "6", "📈 Statistics"),
            ("3", "🏷️ List categories", "7", "❤️ Health check"),
            ("4", "✅ Place order", "q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 8)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            products = try_api(c.list_products, success_msg="Products loaded successfully")
            if products is not None:
                product_cache = products
                show_products(products)

        elif choice == "2":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            resp = try_api(c.get_product, pid, success_msg=f"Product {pid} details loaded")
            if resp:
                show_products([resp])

        elif choice == "3":
            cats = try_api(c.list_categories, success_msg="Categories loaded")
            if cats is not None:
                show_categories(cats)

        elif choice == "4":
            items = ask_items()
            if not items:
                console.print("[yellow]An order needs at least one item.[/yellow]")
                continue
            raw_total = Prompt.ask("Order total", default="0")
            try:
                total = float(raw_total)
            except ValueError:
                total = None
            resp = try_api(c.create_order, items, total)
            if resp is None:
                continue
            body = resp.json()
            if resp.status_code == 201:
                console.print(Panel.fit(
                    f"[green]Order placed successfully![/green]\n"
                    f"Order ID: [bold]{body.get('id')}[/bold]\n"
                    f"Created: {body.get('createdAt')}",
                    title="✅ Order Confirmation"
                ))
            else:
                console.print(Panel.fit(f"[red]Order failed:[/red] {json.dumps(body)}", title="❌ Order Failed"))

        elif choice == "5":
            orders = try_api(c.list_orders, success_msg="Orders loaded")
            if orders is not None:
                show_orders(orders)

        elif choice == "6":
            stats = try_api(c.statistics, success_msg="Statistics loaded")
            if stats:
                show_statistics(stats)

        elif choice == "7":
            resp = try_api(c.health)
            if resp:
                console.print(show_status(f"{resp.get('status')}: {resp.get('message')}", True))

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Goodbye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
