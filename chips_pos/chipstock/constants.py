from __future__ import annotations

# MENU OPTIONS (numbers the operator types)
OPT_EXIT    = 0
OPT_SHOW    = 1
OPT_ADD     = 2
OPT_SEARCH  = 3
OPT_EDIT    = 4
OPT_DELETE  = 5
OPT_BILL    = 6
OPT_CONTACT = 7

MENU_OPTIONS: dict[int, str] = {
    OPT_SHOW:    "SHOW PRODUCT DETAILS",
    OPT_ADD:     "ADD NEW PRODUCT",
    OPT_SEARCH:  "SEARCH PRODUCT",
    OPT_EDIT:    "EDIT PRODUCT DETAILS",
    OPT_DELETE:  "DELETE PRODUCT",
    OPT_BILL:    "GENERATE BILL",
    OPT_CONTACT: "CONTACT SUPPORT",
    OPT_EXIT:    "EXIT",
}

# ── Flat file columns (order is the on-disk order) ───────────────────────────
FIELD_NAMES: list[str] = [
    "product_id",
    "product_name",
    "quantity",
    "seller_name",
    "price",
    "brand_name",
    "deadstock",
]
MIN_FIELDS = 6

# Human-readable column labels (tables + exports)
FIELD_LABELS: dict[str, str] = {
    "product_id":   "Product ID",
    "product_name": "Product Name",
    "quantity":     "Quantity",
    "seller_name":  "Seller Name",
    "price":        "Price",
    "brand_name":   "Brand Name",
    "deadstock":    "Deadstock",
}

# OPERATOR MESSAGES
MSG_NOT_FOUND        = "## SORRY! NO MATCHING DETAILS AVAILABLE ##"
MSG_DUPLICATE_ID     = "Product ID already exists. Please enter a unique ID."
MSG_ADDED            = "## RECORD ADDED SUCCESSFULLY!"
MSG_UPDATED          = "## RECORD UPDATED ##"
MSG_DELETED          = "## RECORD DELETED ##"
MSG_UPDATE_CANCELLED = "Update cancelled."
MSG_DELETE_CANCELLED = "Deletion cancelled."
MSG_OUT_OF_STOCK     = "Product is out of stock."
MSG_QTY_NOT_POSITIVE = "Quantity must be greater than zero."
MSG_QTY_TOO_LARGE    = "Insufficient stock. Available quantity: {available}."
MSG_INVENTORY_EMPTY  = "Inventory is empty. Add products before {action}."
MSG_NOT_SAVED        = "Could not save changes to {path}: {error}"
MSG_GOODBYE          = "GOODBYE!!"
MSG_INPUT_CLOSED     = "Input terminated. Exiting..."
