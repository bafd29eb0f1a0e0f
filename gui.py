import tkinter as tk
from tkinter import ttk, messagebox

from utils.config import load_settings
from utils.logger import setup_logger
from utils.parsing import parse_name, parse_price
from services.invoice_service import InvoiceService
from models.cart import Cart
from models.product import Product


class ShoppingCartApp:
    def __init__(self, root: tk.Tk):
        # core services / data
        self.root = root
        self.root.title("Online Shopping Cart")
        self.root.geometry("600x400")

        self.settings = load_settings()
        self.logger = setup_logger(self.settings.log_dir, self.settings.log_level)
        self.invoice_service = InvoiceService()

        # Cart from the last run, or an empty one
        self.cart = Cart.load_or_empty(self.settings.cart_file)

        self.build_cart_frame()
        self.refresh_cart_table()

    # Utility funcs
    def save_cart(self):
        # The whole cart is written after every change.
        if not self.cart.save_to_file(self.settings.cart_file):
            messagebox.showerror(
                "Save Failed",
                f"Could not save the cart to {self.settings.cart_file}.\n"
                "See the log for details."
            )

    def selected_index(self) -> int | None:
        selection = self.cart_tree.selection()
        if not selection:
            return None
        return self.cart_tree.index(selection[0])

    def read_entries(self) -> tuple[str, float] | None:
        # Parse the entry fields, show an error and return None if invalid.
        try:
            name = parse_name(self.name_entry.get())
            price = parse_price(self.price_entry.get())
        except ValueError as e:
            messagebox.showerror("Error", str(e))
            return None
        return name, price

    def clear_entries(self):
        self.name_entry.delete(0, tk.END)
        self.price_entry.delete(0, tk.END)

    # CART VIEW

    def build_cart_frame(self):
        self.total_label = ttk.Label(
            self.root,
            text="Total: $0.00",
            font=("Arial", 16, "bold"),
            anchor="center"
        )
        self.total_label.pack(fill="x", pady=(10, 0))

        top_frame = ttk.LabelFrame(self.root, text="Products")
        top_frame.pack(fill="both", expand=True, padx=10, pady=10)

        columns = ("name", "price")
        self.cart_tree = ttk.Treeview(
            top_frame,
            columns=columns,
            show="headings",
            selectmode="browse",
            height=10
        )
        self.cart_tree.heading("name", text="Name")
        self.cart_tree.heading("price", text="Price")
        self.cart_tree.column("name", width=360)
        self.cart_tree.column("price", width=100, anchor="e")
        self.cart_tree.pack(fill="both", expand=True, padx=5, pady=5)
        self.cart_tree.bind("<<TreeviewSelect>>", self.on_select)

        # input + actions
        edit_frame = ttk.LabelFrame(self.root, text="Product")
        edit_frame.pack(fill="x", padx=10, pady=(0, 10))

        ttk.Label(edit_frame, text="Name:").grid(row=0, column=0, sticky="e", padx=5, pady=5)
        ttk.Label(edit_frame, text="Price:").grid(row=0, column=2, sticky="e", padx=5, pady=5)

        self.name_entry = ttk.Entry(edit_frame, width=25)
        self.price_entry = ttk.Entry(edit_frame, width=10)
        self.name_entry.grid(row=0, column=1, sticky="w", padx=5, pady=5)
        self.price_entry.grid(row=0, column=3, sticky="w", padx=5, pady=5)

        btn_frame = ttk.Frame(edit_frame)
        btn_frame.grid(row=1, column=0, columnspan=4, pady=5)
        ttk.Button(btn_frame, text="Add Product", command=self.gui_add_product).pack(side="left", padx=5)
        ttk.Button(btn_frame, text="Edit Selected", command=self.gui_edit_product).pack(side="left", padx=5)
        ttk.Button(btn_frame, text="Remove Selected", command=self.gui_remove_product).pack(side="left", padx=5)
        ttk.Button(btn_frame, text="Invoice", command=self.show_invoice).pack(side="left", padx=5)

    def refresh_cart_table(self):
        for row in self.cart_tree.get_children():
            self.cart_tree.delete(row)

        for item in self.cart.items:
            self.cart_tree.insert(
                "",
                "end",
                values=(item.name, f"${item.price:.2f}")
            )

        self.total_label.config(text=f"Total: ${self.cart.calculate_total():.2f}")

    def on_select(self, event=None):
        # copy the selected product into the entry fields for editing
        index = self.selected_index()
        if index is None:
            return
        item = self.cart.items[index]
        self.clear_entries()
        self.name_entry.insert(0, item.name)
        self.price_entry.insert(0, f"{item.price:.2f}")

    def gui_add_product(self):
        parsed = self.read_entries()
        if parsed is None:
            return
        name, price = parsed

        self.cart.add_item(Product(name, price))
        self.logger.info(f"GUI: added {name} price={price}")
        self.save_cart()

        self.clear_entries()
        self.refresh_cart_table()

    def gui_edit_product(self):
        index = self.selected_index()
        if index is None:
            messagebox.showerror("Error", "Select a product to edit.")
            return
        parsed = self.read_entries()
        if parsed is None:
            return
        name, price = parsed

        self.cart.edit_item(index, name, price)
        self.logger.info(f"GUI: edited item {index} -> {name} price={price}")
        self.save_cart()

        self.clear_entries()
        self.refresh_cart_table()

    def gui_remove_product(self):
        index = self.selected_index()
        if index is None:
            messagebox.showerror("Error", "Select a product to remove.")
            return

        self.cart.remove_item(index)
        self.logger.info(f"GUI: removed item {index}")
        self.save_cart()

        self.clear_entries()
        self.refresh_cart_table()

    def show_invoice(self):
        popup = tk.Toplevel(self.root)
        popup.title("Receipt")
        popup.geometry("300x400")

        text = tk.Text(popup, wrap="none")
        text.insert("1.0", self.invoice_service.render_receipt(self.cart))
        text.config(state="disabled")

        scrollbar = ttk.Scrollbar(popup, orient="vertical", command=text.yview)
        text.config(yscrollcommand=scrollbar.set)
        scrollbar.pack(side="right", fill="y")
        text.pack(fill="both", expand=True)

        self.logger.info("GUI: receipt shown")


def main():
    root = tk.Tk()
    app = ShoppingCartApp(root)
    root.mainloop()


if __name__ == "__main__":
    main()
